"""
Tests para el agregador de totales.
"""

from decimal import Decimal

from src.domain.models.financial_entry import FinancialEntry
from src.domain.models.section_type import SectionType
from src.domain.services.aggregator import summarize


def _entry(section_type: SectionType, amount: str | None, index: int = 0) -> FinancialEntry:
    return FinancialEntry(
        section_type=section_type,
        provenance=(index, index),
        amount=Decimal(amount) if amount is not None else None,
    )


class TestSummarize:
    def test_sin_partidas(self):
        summary = summarize([])
        assert summary.is_empty

    def test_suma_por_seccion(self):
        summary = summarize(
            [
                _entry(SectionType.INCOME, "1500.00"),
                _entry(SectionType.INCOME, "300.50"),
                _entry(SectionType.BANK_ACCOUNT, "200.00"),
                _entry(SectionType.SECURITY, "7838.02"),
                _entry(SectionType.REAL_ESTATE, None),
                _entry(SectionType.REAL_ESTATE, None),
            ]
        )
        assert summary.total_income == Decimal("1800.50")
        assert summary.total_deposits == Decimal("200.00")
        assert summary.total_investments == Decimal("7838.02")
        assert summary.real_estate_count == 2

    def test_otras_secciones_no_suman(self):
        summary = summarize([_entry(SectionType.OTHER, "999")])
        assert summary.is_empty

    def test_recalculo_completo(self):
        """Dos llamadas con las mismas partidas dan el mismo resumen,
        sin arrastrar nada de la anterior."""
        entries = [_entry(SectionType.INCOME, "10")]
        assert summarize(entries) == summarize(entries)
        assert summarize(entries).total_income == Decimal("10")
