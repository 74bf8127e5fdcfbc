"""
Servicio de dominio: Encabezado de la declaración (número y año).

Ninguno de los dos datos es obligatorio:
- Sin número en el texto se sintetiza 'AUTO-<milisegundos>'.
- Sin año en el nombre del archivo se usa el año en curso.

Ambos caminos son "degradados pero no fatales": la extracción continúa.

El reloj se inyecta (parámetro `clock`) para que los tests puedan fijar
la hora del número sintetizado y el año por defecto.
"""

import re
from collections.abc import Callable, Sequence
from datetime import datetime

from src.domain.models.declaration import PLACEHOLDER_PREFIX, ExtractedDeclaration

DECLARATION_NUMBER_ANCHOR = "ΑΡΙΘΜΟΣ ΔΗΛΩΣΗΣ :"

_YEAR_RUN = re.compile(r"(\d{4})")


def find_declaration_number(lines: Sequence[str]) -> str | None:
    """Busca la primera línea que contiene el ancla del número.

    El número es la línea SIGUIENTE al ancla. Solo se considera la primera
    aparición del ancla: si es la última línea del documento, no hay número.
    """
    for i, line in enumerate(lines):
        if DECLARATION_NUMBER_ANCHOR in line:
            if i + 1 < len(lines):
                return lines[i + 1]
            return None
    return None


def year_from_filename(file_name: str) -> int | None:
    """Primer grupo de 4 dígitos seguidos del nombre del archivo.

    Ejemplos:
        >>> year_from_filename("ABDELAS_APOSTOLOS_4103062_2024e.pdf")
        4103
        >>> year_from_filename("dilosi_2023.pdf")
        2023
        >>> year_from_filename("dilosi.pdf") is None
        True

    Nótese el primer ejemplo: se toma el PRIMER grupo de 4 dígitos,
    aunque forme parte de un número más largo.
    """
    match = _YEAR_RUN.search(file_name)
    return int(match.group(1)) if match else None


def placeholder_number(now: datetime) -> str:
    """Número sintético a partir de la hora (milisegundos desde epoch)."""
    return f"{PLACEHOLDER_PREFIX}{int(now.timestamp() * 1000)}"


def extract_declaration(
    lines: Sequence[str],
    file_name: str,
    clock: Callable[[], datetime] = datetime.now,
) -> ExtractedDeclaration:
    """Construye el encabezado de la declaración.

    Args:
        lines: Líneas normalizadas del documento.
        file_name: Nombre del archivo original (para el año).
        clock: Fuente de la hora actual.

    Returns:
        ExtractedDeclaration, siempre (nunca falla).
    """
    number = find_declaration_number(lines)
    year = year_from_filename(file_name)

    if number is None or year is None:
        now = clock()
        number = number or placeholder_number(now)
        year = year if year is not None else now.year

    return ExtractedDeclaration(declaration_number=number, year=year)
