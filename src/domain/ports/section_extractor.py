"""
Puerto de entrada: Extractor de sección.

Define el contrato que cada heurística de sección debe cumplir.
Hay exactamente un SectionExtractor por cada sección con datos:

    SectionExtractor (interfaz)
    ├── IncomeExtractor        → Έσοδα από κάθε πηγή
    ├── BankDepositExtractor   → Καταθέσεις σε τράπεζες
    ├── SecurityExtractor      → Μετοχές ημεδαπών / ΕΠΕΝΔΥΤΗΣ
    └── RealEstateCounter      → Ακίνητα και εμπράγματα

¿Por qué separar is_trigger de extract?
Porque un disparador que no produce partida (el monto no se puede leer)
es un resultado esperado de la heurística, pero hay que poder reportarlo
a la bitácora. El recorrido de secciones pregunta primero si la línea
dispara y después intenta extraer; si extract devuelve None, el
candidato se cuenta como descartado.

¿Por qué recibe una LineWindow y no la lista completa?
Porque cada heurística mira hacia atrás desde el disparador (i-1, i-2,
hasta i-5) y la ventana hace explícito el "no hay línea ahí" en vez de
indexar fuera de rango.
"""

from abc import ABC, abstractmethod

from src.domain.models.financial_entry import FinancialEntry
from src.domain.models.section_type import SectionType
from src.domain.shared.line_window import LineWindow


class SectionExtractor(ABC):
    """Interfaz para extraer partidas de una sección."""

    @property
    @abstractmethod
    def section_type(self) -> SectionType:
        """Sección que este extractor maneja.

        Se usa como clave en el registro de extractores (Registry).
        Solo recibe líneas mientras esta sección está activa.
        """
        ...

    @abstractmethod
    def is_trigger(self, line: str) -> bool:
        """Indica si la línea es un disparador de esta heurística.

        Ejemplo: en ingresos, una línea que contiene un nombre de moneda.
        """
        ...

    @abstractmethod
    def extract(self, window: LineWindow) -> FinancialEntry | None:
        """Intenta producir una partida a partir del disparador.

        Solo se llama cuando is_trigger(window.current) es True.

        Args:
            window: Vista de las líneas centrada en el disparador.

        Returns:
            FinancialEntry si se encontró un valor.
            None si el candidato se descarta. NO lanza excepciones por
            montos ilegibles: es un resultado esperado.
        """
        ...
