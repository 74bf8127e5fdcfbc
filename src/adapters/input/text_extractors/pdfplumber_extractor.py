"""
Adaptador de entrada: Extractor de texto usando pdfplumber.

pdfplumber es la librería principal para leer las declaraciones en PDF
nativo (con texto embebido), que es el formato en que se publican.

Este adaptador:
1. Abre el PDF con pdfplumber.
2. Extrae el texto plano de cada página (extract_text).
3. Envuelve todo en objetos PageText del dominio.

El extractor de declaraciones no sabe que existe pdfplumber: recibe
texto y opera sobre líneas.
"""

from pathlib import Path

from src.domain.exceptions import ExtractionError, InvalidFormatError
from src.domain.models.page_text import PageText
from src.domain.ports.text_extractor import TextExtractor
from src.domain.shared.text_cleaner import clean_pdf_text

# Import lazy: pdfplumber es pesado, solo se importa cuando se usa.
try:
    import pdfplumber
except ImportError:
    pdfplumber = None  # type: ignore[assignment]


class PdfplumberExtractor(TextExtractor):
    """Extrae texto de PDFs nativos usando pdfplumber."""

    @property
    def name(self) -> str:
        return "pdfplumber"

    def can_handle(self, file_path: Path) -> bool:
        """Puede manejar archivos con extensión .pdf.

        No verifica si el PDF tiene texto embebido (eso se detecta después
        al intentar extraer — si no hay texto, es candidato para OCR).
        """
        return file_path.suffix.lower() == ".pdf"

    def extract(self, file_path: Path) -> list[PageText]:
        """Extrae el texto de cada página del PDF.

        Returns:
            Lista de PageText, una por página. Páginas sin texto se incluyen
            con text="" para mantener la correspondencia page_num ↔ índice.

        Raises:
            ExtractionError: Si pdfplumber no puede abrir el PDF
                            (corrupto, protegido con contraseña, etc.)
            InvalidFormatError: Si el archivo no existe o no es PDF.
        """
        if pdfplumber is None:
            raise ExtractionError(
                str(file_path),
                "pdfplumber no está instalado. " "Instalar con: pip install pdfplumber",
            )

        if not file_path.exists():
            raise InvalidFormatError(str(file_path), "PDF", "El archivo no existe")

        if file_path.suffix.lower() != ".pdf":
            raise InvalidFormatError(
                str(file_path),
                "PDF",
                f"Extensión inesperada: {file_path.suffix}",
            )

        pages: list[PageText] = []

        try:
            with pdfplumber.open(file_path) as pdf:
                if len(pdf.pages) == 0:
                    raise ExtractionError(str(file_path), "El PDF no tiene páginas")

                for page_num, page in enumerate(pdf.pages, start=1):
                    raw_text = page.extract_text() or ""
                    pages.append(PageText(page_num=page_num, text=clean_pdf_text(raw_text)))

        except ExtractionError:
            raise
        except pdfplumber.pdfminer.pdfparser.PDFSyntaxError as e:
            raise ExtractionError(str(file_path), f"PDF corrupto o inválido: {e}")
        except Exception as e:
            # Captura genérica para errores inesperados de pdfplumber
            # (PDFs protegidos, encoding roto, etc.)
            if "password" in str(e).lower() or "encrypt" in str(e).lower():
                raise ExtractionError(str(file_path), "El PDF está protegido con contraseña.")
            raise ExtractionError(str(file_path), str(e))

        return pages
