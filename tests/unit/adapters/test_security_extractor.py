"""
Tests para el extractor de valores (convención posicional de columnas).
"""

from decimal import Decimal

import pytest

from src.adapters.input.section_extractors.security_extractor import SecurityExtractor
from src.domain.models.section_type import SectionType
from src.domain.shared.line_window import LineWindow


class TestSecurityExtractor:
    @pytest.fixture
    def securities(self):
        return SecurityExtractor()

    def test_valoracion_es_la_columna_del_medio(self, securities):
        line = "0,00 7.838,02 0,00"
        assert securities.is_trigger(line)

        entry = securities.extract(LineWindow([line], 0))

        assert entry.section_type is SectionType.SECURITY
        assert entry.amount == Decimal("7838.02")
        assert entry.notes == "Investment Valuation"
        assert entry.auxiliary_data == {
            "raw": line,
            "acquisition": "0,00",
            "valuation": "7.838,02",
            "sold": "0,00",
        }
        assert entry.provenance == (0, 0)

    def test_tres_numeros_dentro_de_texto(self, securities):
        line = "ΟΤΕ 1.000,00 2.500,50 0,00 ΕΥΡΩ"
        entry = securities.extract(LineWindow(["x", line], 1))

        assert entry.amount == Decimal("2500.50")
        assert entry.provenance == (1, 1)

    @pytest.mark.parametrize("line", ["ΟΤΕ Α.Ε.", "1.000,00 2.000,00", "ΕΥΡΩ"])
    def test_no_dispara(self, securities, line):
        assert not securities.is_trigger(line)

    def test_valoracion_ilegible(self, securities):
        """Tres grupos de puntuación sin dígitos: la valoración no es número."""
        assert securities.extract(LineWindow(["1,00 ., 2,00"], 0)) is None
