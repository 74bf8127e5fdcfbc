"""
Modelo de dominio: Resultado completo de la extracción de una declaración.

Es el objeto que fluye por toda la arquitectura:
- Lo PRODUCE el DeclarationExtractor.
- Lo CONSUMEN el OutputWriter y el DeclarationStore.
- Lo REGISTRA el ProcessLogger.
"""

from dataclasses import dataclass

from src.domain.models.declaration import ExtractedDeclaration
from src.domain.models.financial_entry import FinancialEntry
from src.domain.models.person import ExtractedPerson
from src.domain.models.section_type import SectionType
from src.domain.models.summary import DeclarationSummary


@dataclass(frozen=True)
class ExtractionResult:
    """Resultado de extraer un documento."""

    person: ExtractedPerson
    declaration: ExtractedDeclaration

    entries: tuple[FinancialEntry, ...]
    """Partidas en orden de documento."""

    summary: DeclarationSummary
    """Totales calculados a partir de `entries`."""

    source_file: str
    """Nombre del archivo original, para trazabilidad."""

    num_lines: int = 0
    """Cantidad de líneas normalizadas que se recorrieron."""

    discarded: int = 0
    """Disparadores que no produjeron partida (monto ilegible)."""

    def entries_of(self, section_type: SectionType) -> list[FinancialEntry]:
        """Partidas de una sección, en orden de documento."""
        return [e for e in self.entries if e.section_type is section_type]
