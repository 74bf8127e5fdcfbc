"""
Adaptador de entrada: Extractor de texto por OCR (pytesseract + pdf2image).

Este extractor es el FALLBACK para declaraciones escaneadas (sin texto
embebido). Lo usa el DeclarationProcessor cuando PdfplumberExtractor
devuelve páginas vacías.

Workflow:
1. pdf2image convierte cada página del PDF a una imagen PIL (300 DPI).
2. pytesseract ejecuta OCR sobre cada imagen.
3. El texto resultante se envuelve en PageText del dominio.

¿Por qué ell+eng?
Las declaraciones están en griego, pero los nombres de bancos y
emisores de valores aparecen a menudo en caracteres latinos.

Dependencias externas:
- pytesseract (wrapper Python de Tesseract OCR)
- pdf2image (wrapper de poppler-utils para convertir PDF a imagen)
- Tesseract OCR con el paquete de idioma 'ell' (binario del sistema)
- poppler-utils (binario del sistema, para pdf2image)
"""

import platform
from pathlib import Path

from src.domain.exceptions import ExtractionError, InvalidFormatError
from src.domain.models.page_text import PageText
from src.domain.ports.text_extractor import TextExtractor
from src.domain.shared.text_cleaner import clean_pdf_text

# Imports lazy: solo se cargan cuando se usan.
try:
    import pytesseract

    # En Windows, Tesseract no se agrega al PATH automáticamente.
    if platform.system() == "Windows" and pytesseract is not None:
        _TESSERACT_WINDOWS_PATHS = [
            Path.home() / "AppData/Local/Programs/Tesseract-OCR/tesseract.exe",
            Path(r"C:\Program Files\Tesseract-OCR\tesseract.exe"),
            Path(r"C:\Program Files (x86)\Tesseract-OCR\tesseract.exe"),
        ]
        for _path in _TESSERACT_WINDOWS_PATHS:
            if _path.exists():
                pytesseract.pytesseract.tesseract_cmd = str(_path)
                break

except ImportError:
    pytesseract = None  # type: ignore[assignment]

try:
    from pdf2image import convert_from_path
except ImportError:
    convert_from_path = None  # type: ignore[assignment]


class OcrExtractor(TextExtractor):
    """Extrae texto de declaraciones escaneadas usando OCR."""

    def __init__(
        self,
        dpi: int = 300,
        lang: str = "ell+eng",
    ) -> None:
        """
        Args:
            dpi: Resolución para la conversión PDF→imagen.
                 300 es el balance entre calidad OCR y velocidad; a menos
                 resolución se pierden las comas decimales de los montos.
            lang: Idiomas para Tesseract (formato "lang1+lang2").
                  Si "ell" no está instalado, se hace fallback a "eng".
        """
        self._dpi = dpi
        self._lang = lang
        self._lang_fallback = "eng"

    @property
    def name(self) -> str:
        return "ocr-tesseract"

    def can_handle(self, file_path: Path) -> bool:
        """Puede manejar archivos PDF.

        Se registra DESPUÉS de PdfplumberExtractor: solo se usa si el
        primero devuelve páginas vacías.
        """
        return file_path.suffix.lower() == ".pdf"

    def extract(self, file_path: Path) -> list[PageText]:
        """Extrae texto de cada página del PDF mediante OCR.

        Raises:
            ExtractionError: Si pytesseract/pdf2image no están
                            instalados o si falla la conversión.
            InvalidFormatError: Si el archivo no existe o no es PDF.
        """
        if pytesseract is None:
            raise ExtractionError(
                str(file_path),
                "pytesseract no está instalado. " "Instalar con: pip install pytesseract",
            )

        if convert_from_path is None:
            raise ExtractionError(
                str(file_path),
                "pdf2image no está instalado. " "Instalar con: pip install pdf2image",
            )

        if not file_path.exists():
            raise InvalidFormatError(str(file_path), "PDF", "El archivo no existe")

        if file_path.suffix.lower() != ".pdf":
            raise InvalidFormatError(
                str(file_path),
                "PDF",
                f"Extensión inesperada: {file_path.suffix}",
            )

        try:
            images = convert_from_path(str(file_path), dpi=self._dpi)
        except Exception as e:
            raise ExtractionError(
                str(file_path),
                f"Error al convertir PDF a imágenes: {e}",
            )

        if not images:
            raise ExtractionError(str(file_path), "pdf2image no produjo ninguna imagen.")

        pages: list[PageText] = []
        lang_efectivo = self._resolve_lang(file_path)

        for page_num, image in enumerate(images, start=1):
            try:
                raw_text = pytesseract.image_to_string(image, lang=lang_efectivo)
            except pytesseract.TesseractError:
                # Si falla el OCR de una página, continuar con las demás
                raw_text = ""

            pages.append(PageText(page_num=page_num, text=clean_pdf_text(raw_text)))

        return pages

    def _resolve_lang(self, file_path: Path) -> str:
        """Determina qué idioma(s) de Tesseract usar.

        Usa el idioma configurado si todos sus componentes están
        instalados; si no, 'eng'; y si tampoco, lo que haya instalado.
        Sin 'ell' el OCR pierde los títulos de sección, pero los montos
        se leen igual.
        """
        try:
            available = pytesseract.get_languages()
        except pytesseract.TesseractNotFoundError:
            raise ExtractionError(str(file_path), "Tesseract no está instalado en el sistema")
        except pytesseract.TesseractError:
            return self._lang

        requested = self._lang.split("+")
        if all(lg in available for lg in requested):
            return self._lang

        if self._lang_fallback in available:
            return self._lang_fallback

        usable = [lg for lg in available if lg != "osd"]
        if usable:
            return "+".join(usable)

        return self._lang
