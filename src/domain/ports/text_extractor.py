"""
Puerto de entrada: Extractor de texto.

Define el contrato para extraer texto de un archivo. La decodificación
del documento es un colaborador EXTERNO al extractor de declaraciones:
cada tipo de archivo tiene su propio adaptador que implementa este puerto:

    TextExtractor (interfaz)
    ├── PdfplumberExtractor     → PDFs nativos (texto embebido)
    ├── OcrExtractor            → PDFs escaneados (pytesseract)
    └── PlainTextExtractor      → Texto ya extraído (.txt)
"""

from abc import ABC, abstractmethod
from pathlib import Path

from src.domain.models.page_text import PageText


class TextExtractor(ABC):
    """Interfaz para extraer texto de un archivo."""

    @abstractmethod
    def can_handle(self, file_path: Path) -> bool:
        """Determina si este extractor puede manejar el archivo dado.

        El DeclarationProcessor itera por todos los extractores registrados
        y usa el primero cuyo can_handle devuelva True (y que produzca texto).

        Args:
            file_path: Ruta al archivo a evaluar.

        Returns:
            True si este extractor puede procesar el archivo.
        """
        ...

    @abstractmethod
    def extract(self, file_path: Path) -> list[PageText]:
        """Extrae el texto del archivo, separado por páginas.

        Args:
            file_path: Ruta al archivo del cual extraer texto.

        Returns:
            Lista de PageText, una por cada página del documento.
            Para archivos sin concepto de "páginas" (.txt) se devuelve
            una sola PageText con todo el contenido.

        Raises:
            ExtractionError: Si falla la extracción (archivo corrupto,
                            librería no disponible, etc.)
            InvalidFormatError: Si el archivo no existe o no es del tipo esperado.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Nombre legible del extractor. Para logging y debugging.

        Ejemplo: 'pdfplumber', 'ocr-tesseract', 'plain-text'
        """
        ...
