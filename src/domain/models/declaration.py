"""
Modelo de dominio: Encabezado de la declaración.

El número de declaración se busca en el texto; si no aparece se sintetiza
uno a partir de la hora actual (AUTO-<milisegundos>). El año sale del
nombre del archivo. Ambos son valores "best effort": la unicidad del
número la garantiza la capa de persistencia, no el extractor.
"""

from dataclasses import dataclass

PLACEHOLDER_PREFIX = "AUTO-"


@dataclass(frozen=True)
class ExtractedDeclaration:
    """Número y año de una declaración."""

    declaration_number: str
    """Número tal como aparece en el documento, o 'AUTO-<ms>'."""

    year: int
    """Año de la declaración (primer grupo de 4 dígitos del nombre del
    archivo, o el año en curso)."""

    @property
    def is_placeholder_number(self) -> bool:
        """Indica si el número fue sintetizado porque no estaba en el texto."""
        return self.declaration_number.startswith(PLACEHOLDER_PREFIX)

    def __post_init__(self) -> None:
        if not self.declaration_number:
            raise ValueError("El número de declaración no puede estar vacío")
