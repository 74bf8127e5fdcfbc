"""
Adaptador de entrada: Extractor de texto plano (.txt).

Para declaraciones cuyo texto ya fue extraído por otra herramienta
(volcados de pdftotext, del analizador de la CLI, etc.). Todo el
contenido va en una sola PageText.
"""

from pathlib import Path

from src.domain.exceptions import ExtractionError, InvalidFormatError
from src.domain.models.page_text import PageText
from src.domain.ports.text_extractor import TextExtractor
from src.domain.shared.text_cleaner import clean_pdf_text


class PlainTextExtractor(TextExtractor):
    """Lee archivos .txt en UTF-8."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    @property
    def name(self) -> str:
        return "plain-text"

    def can_handle(self, file_path: Path) -> bool:
        return file_path.suffix.lower() == ".txt"

    def extract(self, file_path: Path) -> list[PageText]:
        if not file_path.exists():
            raise InvalidFormatError(str(file_path), "TXT", "El archivo no existe")

        try:
            raw_text = file_path.read_text(encoding=self._encoding)
        except UnicodeDecodeError as e:
            raise ExtractionError(str(file_path), f"No está en {self._encoding}: {e}")
        except OSError as e:
            raise ExtractionError(str(file_path), str(e))

        return [PageText(page_num=1, text=clean_pdf_text(raw_text))]
