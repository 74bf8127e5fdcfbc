"""
Servicio de dominio: Extracción de la identidad del declarante.

El encabezado de la declaración imprime cada etiqueta en su propia línea
y el valor en la línea siguiente:

    Επώνυμο :
    ΠΑΠΑΔΟΠΟΥΛΟΣ
    Όνομα :
    ΓΙΩΡΓΟΣ
    Όνομα πατρός :
    ΝΙΚΟΛΑΟΣ

Las etiquetas se comparan por igualdad EXACTA con la línea normalizada.
La primera aparición de cada etiqueta gana.
"""

from collections.abc import Sequence

from src.domain.exceptions import MissingIdentityError
from src.domain.models.person import ExtractedPerson

LAST_NAME_LABEL = "Επώνυμο :"
FIRST_NAME_LABEL = "Όνομα :"
FATHER_NAME_LABEL = "Όνομα πατρός :"


def extract_person(lines: Sequence[str], file_name: str = "") -> ExtractedPerson:
    """Extrae apellido, nombre y nombre del padre.

    El recorrido se detiene en cuanto se tienen los tres campos.

    Args:
        lines: Líneas normalizadas del documento.
        file_name: Nombre del archivo, solo para el mensaje de error.

    Returns:
        ExtractedPerson. father_name es None si no aparece.

    Raises:
        MissingIdentityError: Si falta el nombre o el apellido. Es un
            error fatal: no se produce ninguna declaración sin declarante.
    """
    fields: dict[str, str] = {}
    labels = {
        LAST_NAME_LABEL: "last_name",
        FIRST_NAME_LABEL: "first_name",
        FATHER_NAME_LABEL: "father_name",
    }

    for i, line in enumerate(lines):
        field_name = labels.get(line)
        if field_name and field_name not in fields and i + 1 < len(lines):
            fields[field_name] = lines[i + 1]
        if len(fields) == len(labels):
            break

    missing = [name for name in ("first_name", "last_name") if not fields.get(name)]
    if missing:
        raise MissingIdentityError(file_name, missing)

    return ExtractedPerson(
        first_name=fields["first_name"],
        last_name=fields["last_name"],
        father_name=fields.get("father_name") or None,
    )
