"""
Modelo de dominio: Partida financiera.

Una FinancialEntry es una línea de resultado de la extracción: un ingreso,
un depósito bancario, un valor (acciones, fondos) o un inmueble.

Decisiones de diseño:
- Se usa `Decimal` para montos porque `float` tiene errores de redondeo
  con dinero, y los totales se suman sobre decenas de partidas.
- `amount` es opcional: los inmuebles solo se cuentan, no tienen monto.
- `provenance` guarda el rango de líneas normalizadas de donde salió la
  partida. La extracción es heurística, así que cada partida tiene que
  poder auditarse contra el texto original.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Any

from src.domain.models.section_type import HolderRole, SectionType


@dataclass(frozen=True)
class FinancialEntry:
    """Partida financiera extraída de una sección de la declaración."""

    section_type: SectionType
    """Sección a la que pertenece. Nunca NONE."""

    provenance: tuple[int, int]
    """Rango (primera, última) de índices de línea, ambos inclusivos."""

    amount: Decimal | None = None
    """Monto de la partida. None para partidas que solo cuentan (inmuebles)."""

    currency_label: str = ""
    """Línea de moneda tal como aparece en el texto (ej: 'ΕΥΡΩ').
    Vacía para secciones sin disparador de moneda."""

    holder_role: HolderRole = HolderRole.DECLARANT
    """Titular. DECLARANT salvo que el extractor lo distinga."""

    auxiliary_data: Mapping[str, Any] = field(default_factory=dict)
    """Datos específicos de la sección: descripción, línea cruda,
    adquisición/valoración/venta, etc. Se guarda como vista de solo lectura."""

    notes: str = ""
    """Etiqueta corta del extractor que la generó."""

    def __post_init__(self) -> None:
        """Validaciones al crear la instancia."""
        if self.section_type is SectionType.NONE:
            raise ValueError("Una partida no puede pertenecer a la sección NONE")
        first, last = self.provenance
        if first < 0 or last < first:
            raise ValueError(f"Rango de líneas inválido: {self.provenance}")

        # Vista de solo lectura sobre una copia
        object.__setattr__(self, "auxiliary_data", MappingProxyType(dict(self.auxiliary_data)))
