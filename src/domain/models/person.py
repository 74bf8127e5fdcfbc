"""
Modelo de dominio: Declarante (la persona que presenta la declaración).

Se extrae una sola vez por documento, de las etiquetas fijas
"Επώνυμο :", "Όνομα :" y "Όνομα πατρός :".
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractedPerson:
    """Identidad del declarante.

    frozen=True porque la identidad no cambia durante el procesamiento
    de un documento.
    """

    first_name: str
    """Nombre de pila. Obligatorio."""

    last_name: str
    """Apellido. Obligatorio."""

    father_name: str | None = None
    """Nombre del padre. Opcional: su ausencia NO es fatal."""

    @property
    def full_name(self) -> str:
        """Nombre completo en el orden en que se imprime en la consola."""
        return f"{self.first_name} {self.last_name}"

    def __post_init__(self) -> None:
        """Validaciones al crear la instancia."""
        if not self.first_name:
            raise ValueError("El nombre del declarante no puede estar vacío")
        if not self.last_name:
            raise ValueError("El apellido del declarante no puede estar vacío")
