"""
Utilidades de limpieza de texto.

Funciones reutilizables para normalizar el texto extraído de las
declaraciones antes de que el extractor lo procese.

Estas funciones NO tienen lógica de negocio (no saben de secciones ni
montos). Solo operan sobre strings puros.
"""

from collections.abc import Iterable


def remove_non_printable(text: str) -> str:
    """Elimina caracteres no imprimibles (control chars) excepto \\n, \\r, \\t.

    ¿Cuándo se necesita? Cuando se lee texto de PDFs escaneados con OCR,
    que a veces incluyen caracteres de control invisibles.

    Ejemplos:
        >>> remove_non_printable("ΕΥΡΩ\\x00")
        'ΕΥΡΩ '
    """
    # Mantiene printables, newline, return, tab. Reemplaza el resto por espacio.
    cleaned = "".join(char if (char.isprintable() or char in "\n\r\t") else " " for char in text)
    return cleaned


def normalize_line_endings(text: str) -> str:
    """Normaliza todos los saltos de línea a \\n.

    Los PDFs pueden usar \\r\\n (Windows), \\r (Mac antiguo), o \\n (Unix).
    Normalizar asegura que split('\\n') funcione consistentemente.
    """
    return text.replace("\r\n", "\n").replace("\r", "\n")


def clean_pdf_text(text: str) -> str:
    """Aplica todas las limpiezas comunes en secuencia.

    Los text extractors la llaman después de extraer el texto crudo,
    ANTES de pasarlo al extractor de declaraciones.

    Secuencia:
    1. Eliminar caracteres no imprimibles
    2. Normalizar saltos de línea
    """
    text = remove_non_printable(text)
    text = normalize_line_endings(text)
    return text


def normalize_lines(text: str) -> list[str]:
    """Convierte el texto crudo en la secuencia ordenada de líneas.

    Es la única entrada compartida por todas las etapas posteriores:
    - Cada línea se recorta (strip) por ambos lados.
    - Las líneas vacías se eliminan.
    - El orden relativo se conserva.

    No hay ninguna otra transformación (ni mayúsculas, ni acentos): las
    etapas posteriores comparan contra anclas exactas en griego.

    Ejemplos:
        >>> normalize_lines("  Επώνυμο :\\n\\n ΠΑΠΑΔΟΠΟΥΛΟΣ  \\n")
        ['Επώνυμο :', 'ΠΑΠΑΔΟΠΟΥΛΟΣ']
    """
    return strip_lines(text.split("\n"))


def strip_lines(lines: Iterable[str]) -> list[str]:
    """Recorta cada línea y descarta las vacías, conservando el orden.

    Es idempotente: aplicada a líneas ya normalizadas no cambia nada.

    Ejemplos:
        >>> strip_lines(["  ΕΥΡΩ ", "   ", "1,00"])
        ['ΕΥΡΩ', '1,00']
    """
    stripped = (line.strip() for line in lines)
    return [line for line in stripped if line]
