"""
Tests para el registro de extractores de sección.
"""

import pytest

from src.adapters.input.section_extractors.income_extractor import IncomeExtractor
from src.domain.models.financial_entry import FinancialEntry
from src.domain.models.section_type import SectionType
from src.domain.ports.section_extractor import SectionExtractor
from src.domain.shared.line_window import LineWindow
from src.infrastructure.registry import SectionExtractorRegistry, create_default_registry


class NoneSectionExtractor(SectionExtractor):
    @property
    def section_type(self) -> SectionType:
        return SectionType.NONE

    def is_trigger(self, line: str) -> bool:
        return False

    def extract(self, window: LineWindow) -> FinancialEntry | None:
        return None


class TestRegistry:
    def test_registro_por_defecto(self):
        registry = create_default_registry()

        assert len(registry) == 4
        assert registry.available_sections == [
            "BANK_ACCOUNT",
            "INCOME",
            "REAL_ESTATE",
            "SECURITY",
        ]
        assert isinstance(registry.get(SectionType.INCOME), IncomeExtractor)

    def test_otros_no_tiene_extractor(self):
        assert create_default_registry().get(SectionType.OTHER) is None

    def test_duplicado(self):
        registry = SectionExtractorRegistry()
        registry.register(IncomeExtractor())

        with pytest.raises(ValueError, match="INCOME"):
            registry.register(IncomeExtractor())

    def test_seccion_none_no_se_registra(self):
        with pytest.raises(ValueError, match="NONE"):
            SectionExtractorRegistry().register(NoneSectionExtractor())
