"""
Tests para el clasificador de secciones.
"""

import pytest

from src.domain.models.section_type import SectionType
from src.domain.services.section_classifier import SectionClassifier


class TestSectionClassifier:
    @pytest.fixture
    def classifier(self):
        return SectionClassifier()

    @pytest.mark.parametrize(
        "line, expected",
        [
            ("Έσοδα από κάθε πηγή", SectionType.INCOME),
            ("Μετοχές ημεδαπών εταιρειών", SectionType.SECURITY),
            ("ΜΕΡΙΔΑ ΕΠΕΝΔΥΤΗΣ", SectionType.SECURITY),
            ("Καταθέσεις σε τράπεζες", SectionType.BANK_ACCOUNT),
            ("Ακίνητα και εμπράγματα δικαιώματα", SectionType.REAL_ESTATE),
            ("Οχήματα", SectionType.OTHER),
        ],
    )
    def test_titulos(self, classifier, line, expected):
        assert classifier.classify(line) is expected

    def test_subcadena_con_ruido(self, classifier):
        assert classifier.classify("3. Έσοδα από κάθε πηγή :") is SectionType.INCOME

    def test_linea_normal(self, classifier):
        assert classifier.classify("ΕΥΡΩ") is None

    def test_prioridad_ingresos_primero(self, classifier):
        """Si una línea contiene dos títulos, gana el primero de la lista."""
        line = "Έσοδα από κάθε πηγή / Καταθέσεις σε τράπεζες"
        assert classifier.classify(line) is SectionType.INCOME

    def test_distingue_mayusculas(self, classifier):
        """Los anclas son exactas: sin normalizar mayúsculas."""
        assert classifier.classify("ΈΣΟΔΑ ΑΠΌ ΚΆΘΕ ΠΗΓΉ") is None

    def test_secciones_conocidas(self, classifier):
        assert classifier.known_sections[0] is SectionType.INCOME
        assert SectionType.NONE not in classifier.known_sections
