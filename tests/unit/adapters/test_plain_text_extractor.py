"""
Tests para el extractor de texto plano.
"""

import pytest

from src.adapters.input.text_extractors.plain_text_extractor import PlainTextExtractor
from src.domain.exceptions import ExtractionError, InvalidFormatError


class TestPlainTextExtractor:
    @pytest.fixture
    def plain(self):
        return PlainTextExtractor()

    def test_can_handle(self, plain, tmp_path):
        assert plain.can_handle(tmp_path / "a.TXT")
        assert not plain.can_handle(tmp_path / "a.pdf")

    def test_una_sola_pagina(self, plain, tmp_path):
        path = tmp_path / "a.txt"
        path.write_bytes("Επώνυμο :\r\nΠΑΠΑΔΟΠΟΥΛΟΣ\x00\r\n".encode("utf-8"))

        pages = plain.extract(path)

        assert len(pages) == 1
        assert pages[0].page_num == 1
        assert pages[0].text == "Επώνυμο :\nΠΑΠΑΔΟΠΟΥΛΟΣ \n"

    def test_archivo_inexistente(self, plain, tmp_path):
        with pytest.raises(InvalidFormatError):
            plain.extract(tmp_path / "no.txt")

    def test_codificacion_incorrecta(self, plain, tmp_path):
        path = tmp_path / "a.txt"
        path.write_bytes("ΕΥΡΩ".encode("iso-8859-7"))

        with pytest.raises(ExtractionError, match="utf-8"):
            plain.extract(path)

    def test_otra_codificacion(self, tmp_path):
        path = tmp_path / "a.txt"
        path.write_bytes("ΕΥΡΩ".encode("iso-8859-7"))

        pages = PlainTextExtractor(encoding="iso-8859-7").extract(path)

        assert pages[0].text == "ΕΥΡΩ"
