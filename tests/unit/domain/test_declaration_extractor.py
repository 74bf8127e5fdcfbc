"""
Tests para el extractor de declaraciones (recorrido de secciones + resumen).
"""

from decimal import Decimal

import pytest

from src.domain.exceptions import MissingIdentityError
from src.domain.models.section_type import HolderRole, SectionType
from src.domain.services.aggregator import summarize
from src.domain.services.declaration_extractor import ScanState

IDENTIDAD = ["Επώνυμο :", "ΠΑΠΑΔΟΠΟΥΛΟΣ", "Όνομα :", "ΓΙΩΡΓΟΣ"]


class TestScan:
    """Recorrido de secciones sobre secuencias parciales."""

    def test_ingreso_y_deposito(self, extractor):
        lineas = [
            "Έσοδα από κάθε πηγή",
            "1.500,00",
            "ΕΥΡΩ",
            "Καταθέσεις σε τράπεζες",
            "3   200,00",
            "ΕΥΡΩ",
        ]
        state = extractor.scan(lineas)

        assert [e.section_type for e in state.entries] == [
            SectionType.INCOME,
            SectionType.BANK_ACCOUNT,
        ]
        assert state.entries[0].amount == Decimal("1500.00")
        assert state.entries[1].amount == Decimal("200.00")
        assert state.current_section is SectionType.BANK_ACCOUNT

    def test_linea_de_valores(self, extractor):
        state = extractor.scan(["Μετοχές ημεδαπών", "0,00 7.838,02 0,00"])

        assert len(state.entries) == 1
        entry = state.entries[0]
        assert entry.section_type is SectionType.SECURITY
        assert entry.amount == Decimal("7838.02")
        assert entry.auxiliary_data["acquisition"] == "0,00"
        assert entry.auxiliary_data["sold"] == "0,00"

    def test_sin_titulos_no_hay_partidas(self, extractor):
        state = extractor.scan(["1.500,00", "ΕΥΡΩ", "0,00 7.838,02 0,00", "ΑΚΙΝΗΤΟ 1"])
        assert state == ScanState()

    def test_titulo_se_consume(self, extractor):
        """El título no llega al extractor aunque contenga un disparador."""
        state = extractor.scan(["1.000,00", "Έσοδα από κάθε πηγή ΕΥΡΩ"])
        assert state.entries == ()
        assert state.discarded == 0

    def test_seccion_otros_se_salta(self, extractor):
        state = extractor.scan(["Οχήματα", "1.600,00", "ΕΥΡΩ"])
        assert state.entries == ()
        assert state.current_section is SectionType.OTHER

    def test_candidato_descartado_se_cuenta(self, extractor):
        state = extractor.scan(["Έσοδα από κάθε πηγή", "ΕΥΡΩ"])
        assert state.entries == ()
        assert state.discarded == 1

    def test_reingreso_a_una_seccion(self, extractor):
        lineas = [
            "Έσοδα από κάθε πηγή",
            "100,00",
            "ΕΥΡΩ",
            "Οχήματα",
            "50,00",
            "ΕΥΡΩ",
            "Έσοδα από κάθε πηγή",
            "200,00",
            "ΕΥΡΩ",
        ]
        state = extractor.scan(lineas)
        assert [e.amount for e in state.entries] == [Decimal("100.00"), Decimal("200.00")]

    def test_step_no_modifica_el_estado_anterior(self, extractor):
        lineas = ["Έσοδα από κάθε πηγή", "1,00", "ΕΥΡΩ"]
        inicial = ScanState()
        s1 = extractor.step(inicial, lineas, 0)
        s2 = extractor.step(s1, lineas, 1)
        s3 = extractor.step(s2, lineas, 2)

        assert inicial.current_section is SectionType.NONE
        assert s1.current_section is SectionType.INCOME
        assert s2 == s1
        assert len(s3.entries) == 1
        assert s2.entries == ()


class TestExtract:
    """Extracción completa de una declaración."""

    def test_lineas_sin_normalizar(self, extractor, lineas_completas):
        """Espacios en los extremos y líneas en blanco no cambian el resultado."""
        sucias = []
        for line in lineas_completas:
            sucias.extend([f"  {line}  ", "   ", ""])

        limpio = extractor.extract(lineas_completas, "x_2024.pdf")
        sucio = extractor.extract(sucias, "x_2024.pdf")

        assert sucio == limpio
        assert sucio.num_lines == 34

    def test_documento_completo(self, extractor, texto_completo):
        result = extractor.extract_text(texto_completo, "PAPADOPOULOS_GIORGOS_2024.pdf")

        assert result.person.full_name == "ΓΙΩΡΓΟΣ ΠΑΠΑΔΟΠΟΥΛΟΣ"
        assert result.person.father_name == "ΝΙΚΟΛΑΟΣ"
        assert result.declaration.declaration_number == "123456"
        assert result.declaration.year == 2024
        assert result.num_lines == 34
        assert result.source_file == "PAPADOPOULOS_GIORGOS_2024.pdf"

        summary = result.summary
        assert summary.total_income == Decimal("48800.00")
        assert summary.total_deposits == Decimal("10183.20")
        assert summary.total_investments == Decimal("7838.02")
        assert summary.real_estate_count == 2

    def test_partidas_en_orden_de_documento(self, extractor, lineas_completas):
        result = extractor.extract(lineas_completas, "x_2024.pdf")

        assert [e.provenance for e in result.entries] == [
            (10, 13),
            (14, 18),
            (21, 22),
            (24, 25),
            (28, 28),
            (30, 30),
            (31, 31),
        ]

    def test_ingreso_del_conyuge(self, extractor, lineas_completas):
        result = extractor.extract(lineas_completas, "x_2024.pdf")
        incomes = result.entries_of(SectionType.INCOME)

        assert incomes[0].holder_role is HolderRole.DECLARANT
        assert incomes[0].auxiliary_data["description"] == "ΥΠΟΧΡΕΟΣ Μισθωτές υπηρεσίες"
        assert incomes[1].holder_role is HolderRole.SPOUSE
        assert incomes[1].auxiliary_data["description"] == "ΣΥΖΥΓΟΣ Ενοίκια"

    def test_depositos_y_valores_siempre_del_declarante(self, extractor, lineas_completas):
        result = extractor.extract(lineas_completas, "x_2024.pdf")
        otros = [e for e in result.entries if e.section_type is not SectionType.INCOME]
        assert all(e.holder_role is HolderRole.DECLARANT for e in otros)

    def test_resumen_es_el_fold_de_las_partidas(self, extractor, lineas_completas):
        result = extractor.extract(lineas_completas, "x_2024.pdf")
        assert result.summary == summarize(result.entries)
        assert result.summary.total_income == sum(
            e.amount for e in result.entries_of(SectionType.INCOME)
        )

    def test_determinista(self, extractor, lineas_completas):
        primera = extractor.extract(lineas_completas, "x_2024.pdf")
        segunda = extractor.extract(lineas_completas, "x_2024.pdf")
        assert primera.entries == segunda.entries
        assert primera == segunda

    def test_documento_sin_secciones(self, extractor):
        result = extractor.extract(IDENTIDAD + ["ΕΥΡΩ", "1.000,00"], "x.pdf")
        assert result.entries == ()
        assert result.summary.is_empty
        assert result.declaration.is_placeholder_number
        assert result.declaration.declaration_number == "AUTO-1710504000000"

    def test_sin_identidad_es_fatal(self, extractor):
        with pytest.raises(MissingIdentityError):
            extractor.extract(["Έσοδα από κάθε πηγή", "1,00", "ΕΥΡΩ"], "x.pdf")
