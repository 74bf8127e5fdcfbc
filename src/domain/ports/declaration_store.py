"""
Puerto de salida: Almacén de declaraciones (colaborador de persistencia).

El extractor no persiste nada: produce un ExtractionResult y se lo pasa
a quien implemente este puerto. El contrato que se espera del almacén:

1. Declarante: upsert por (nombre, apellido, nombre del padre).
2. Declaración: se crea o se reutiliza por número de declaración.
   Un número repetido NO es un error: significa "ya procesado".
3. Partidas: si la declaración ya existía, TODAS sus partidas previas se
   borran antes de insertar la secuencia nueva (la re-extracción es
   idempotente, nunca se mezclan corridas).
4. Totales: se reemplazan con el resumen nuevo.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from src.domain.models.extraction_result import ExtractionResult


@dataclass(frozen=True)
class StoredDeclaration:
    """Lo que devuelve el almacén tras guardar una extracción."""

    person_id: int
    declaration_id: int

    person_created: bool
    """True si el declarante no existía."""

    replaced: bool
    """True si la declaración ya existía y se reemplazaron sus partidas."""

    entries_deleted: int = 0
    """Partidas previas borradas (solo si replaced)."""


class DeclarationStore(ABC):
    """Interfaz para persistir resultados de extracción."""

    @abstractmethod
    def save(self, result: ExtractionResult) -> StoredDeclaration:
        """Guarda declarante, declaración, partidas y totales.

        Debe ser atómico: si algo falla, no quedan escrituras parciales.
        """
        ...
