"""
Adaptador de entrada: Contador de inmuebles (Ακίνητα και εμπράγματα).

No hay montos: cada línea de la sección que contiene "ΑΚΙΝΗΤΟ" cuenta
como un inmueble. Cada acierto se emite como una partida sin monto, para
que el conteo del resumen sea un fold de las partidas como el resto de
los totales, y para que cada inmueble contado sea trazable a su línea.

La línea del título de la sección se excluye explícitamente. En
operación normal el clasificador ya la consumió, pero si el título se
repite dentro de la sección no debe contarse.
"""

from src.domain.models.financial_entry import FinancialEntry
from src.domain.models.section_type import SectionType
from src.domain.ports.section_extractor import SectionExtractor
from src.domain.shared.line_window import LineWindow


class RealEstateCounter(SectionExtractor):
    """Cuenta inmuebles por palabra clave."""

    KEYWORD = "ΑΚΙΝΗΤΟ"
    SECTION_TITLE = "Ακίνητα και εμπράγματα"

    @property
    def section_type(self) -> SectionType:
        return SectionType.REAL_ESTATE

    def is_trigger(self, line: str) -> bool:
        return self.KEYWORD in line and self.SECTION_TITLE not in line

    def extract(self, window: LineWindow) -> FinancialEntry | None:
        return FinancialEntry(
            section_type=SectionType.REAL_ESTATE,
            provenance=(window.index, window.index),
            auxiliary_data={"raw": window.current},
            notes="Real estate item",
        )
