"""
Tests para el logger de consola.
"""

from pathlib import Path

from src.adapters.output.loggers.console_logger import ConsoleLogger
from src.domain.exceptions import ExtractionError
from src.domain.models.declaration import ExtractedDeclaration
from src.domain.models.section_type import SectionType


class TestConsoleLogger:
    def test_contadores(self):
        logger = ConsoleLogger()
        path = Path("a_2024.pdf")

        logger.log_file_received(path, ".pdf")
        logger.log_extraction_complete(path, num_lines=120, num_entries=7)
        logger.log_candidate_discarded(SectionType.INCOME, 10, "ΕΥΡΩ")
        logger.log_declaration_replaced("123456", 7)
        logger.log_error(Path("b.pdf"), ExtractionError("b.pdf", "roto"))

        summary = logger.get_summary()
        assert summary["archivos_recibidos"] == 1
        assert summary["archivos_procesados"] == 1
        assert summary["total_partidas"] == 7
        assert summary["candidatos_descartados"] == 1
        assert summary["declaraciones_reemplazadas"] == 1
        assert summary["archivos_con_error"] == 1
        assert summary["errores"][0]["archivo"] == "b.pdf"

    def test_descartes_solo_en_modo_verbose(self, capsys):
        ConsoleLogger().log_candidate_discarded(SectionType.INCOME, 10, "ΕΥΡΩ")
        assert capsys.readouterr().out == ""

        ConsoleLogger(verbose=True).log_candidate_discarded(SectionType.INCOME, 10, "ΕΥΡΩ")
        assert "línea 10" in capsys.readouterr().out

    def test_aviso_de_numero_sintetico(self, capsys):
        logger = ConsoleLogger()
        logger.log_declaration_header(
            "x.pdf", ExtractedDeclaration(declaration_number="AUTO-1", year=2024)
        )

        out = capsys.readouterr().out
        assert "AUTO-1" in out
        assert "sintético" in out

    def test_resumen_impreso(self, capsys):
        logger = ConsoleLogger()
        logger.log_error(Path("b.pdf"), ValueError("malo"))
        logger.print_summary()

        out = capsys.readouterr().out
        assert "RESUMEN DE PROCESAMIENTO" in out
        assert "b.pdf: malo" in out
