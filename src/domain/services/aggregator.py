"""
Servicio de dominio: Agregador de totales.

El resumen de una declaración es un fold puro sobre la secuencia de
partidas. Se recalcula completo en cada extracción: nunca se parte de
un resumen previo, para que re-extraer un documento no arrastre totales
de una corrida anterior.
"""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models.financial_entry import FinancialEntry
from src.domain.models.section_type import SectionType
from src.domain.models.summary import DeclarationSummary


def summarize(entries: Iterable[FinancialEntry]) -> DeclarationSummary:
    """Calcula el resumen a partir de las partidas.

    - total_income: suma de montos INCOME.
    - total_deposits: suma de montos BANK_ACCOUNT.
    - total_investments: suma de montos (valoraciones) SECURITY.
    - real_estate_count: cantidad de partidas REAL_ESTATE.

    Partidas sin monto no suman (solo los inmuebles cuentan).
    """
    totals: dict[SectionType, Decimal] = {
        SectionType.INCOME: Decimal("0"),
        SectionType.BANK_ACCOUNT: Decimal("0"),
        SectionType.SECURITY: Decimal("0"),
    }
    real_estate_count = 0

    for entry in entries:
        if entry.section_type is SectionType.REAL_ESTATE:
            real_estate_count += 1
        elif entry.section_type in totals and entry.amount is not None:
            totals[entry.section_type] += entry.amount

    return DeclarationSummary(
        total_income=totals[SectionType.INCOME],
        total_deposits=totals[SectionType.BANK_ACCOUNT],
        total_investments=totals[SectionType.SECURITY],
        real_estate_count=real_estate_count,
    )
