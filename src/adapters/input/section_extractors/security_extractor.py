"""
Adaptador de entrada: Extractor de valores e inversiones (Μετοχές ημεδαπών).

El disparador es una línea con TRES números seguidos, separados por
espacios, cada uno con puntos de miles y coma decimal opcionales:

    0,00 7.838,02 0,00
    ↑    ↑        ↑
    adq. valor.   venta

La convención es POSICIONAL: el número del medio es la valoración y es
el que se suma al total de inversiones.

ADVERTENCIA: nada en el documento garantiza que el orden de columnas
(adquisición, valoración, venta) sea el mismo en todas las declaraciones
y monedas. Una fila con columnas en otro orden produce una valoración
incorrecta sin ningún aviso. La convención se conserva tal cual.
"""

import re

from src.domain.models.financial_entry import FinancialEntry
from src.domain.models.section_type import SectionType
from src.domain.ports.section_extractor import SectionExtractor
from src.domain.shared.greek_number import parse_greek_number
from src.domain.shared.line_window import LineWindow


class SecurityExtractor(SectionExtractor):
    """Extrae la valoración de valores por la posición de las columnas."""

    THREE_NUMBERS = re.compile(r"([\d.,]+)\s+([\d.,]+)\s+([\d.,]+)")
    """Tres tokens numéricos separados por espacios, en cualquier parte de la línea."""

    @property
    def section_type(self) -> SectionType:
        return SectionType.SECURITY

    def is_trigger(self, line: str) -> bool:
        return self.THREE_NUMBERS.search(line) is not None

    def extract(self, window: LineWindow) -> FinancialEntry | None:
        line = window.current
        match = self.THREE_NUMBERS.search(line)
        if match is None:
            return None

        acquisition, valuation_text, sold = match.groups()
        valuation = parse_greek_number(valuation_text)
        # Sin valoración legible se descarta la línea completa
        if valuation is None:
            return None

        return FinancialEntry(
            section_type=SectionType.SECURITY,
            provenance=(window.index, window.index),
            amount=valuation,
            auxiliary_data={
                "raw": line,
                "acquisition": acquisition,
                "valuation": valuation_text,
                "sold": sold,
            },
            notes="Investment Valuation",
        )
