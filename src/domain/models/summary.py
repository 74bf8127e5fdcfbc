"""
Modelo de dominio: Resumen de la declaración.

El resumen es siempre un DERIVADO de la secuencia de partidas: se
recalcula completo en cada extracción (ver services/aggregator.py) y
nunca se modifica de forma incremental.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class DeclarationSummary:
    """Totales de una declaración."""

    total_income: Decimal = Decimal("0")
    """Suma de los montos de las partidas INCOME."""

    total_deposits: Decimal = Decimal("0")
    """Suma de los montos de las partidas BANK_ACCOUNT."""

    total_investments: Decimal = Decimal("0")
    """Suma de las valoraciones de las partidas SECURITY."""

    real_estate_count: int = 0
    """Cantidad de partidas REAL_ESTATE."""

    @property
    def is_empty(self) -> bool:
        """Indica si no se encontró nada en el documento."""
        return (
            self.total_income == 0
            and self.total_deposits == 0
            and self.total_investments == 0
            and self.real_estate_count == 0
        )
