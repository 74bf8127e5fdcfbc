"""
Ventana de lectura sobre la secuencia de líneas normalizadas.

Los extractores de sección necesitan mirar HACIA ATRÁS desde la línea
disparadora: el monto suele estar en i-1 (o en i-2 si hay ruido en medio),
y la descripción del ingreso hasta 5 líneas más arriba.

En lugar de indexar la lista a mano (y arriesgar índices negativos que en
Python leen desde el FINAL de la lista), cada extractor recibe una
LineWindow centrada en el disparador. Fuera de rango devuelve None.
"""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class LineWindow:
    """Vista de solo lectura de las líneas, centrada en un índice."""

    lines: Sequence[str]
    """Todas las líneas normalizadas del documento."""

    index: int
    """Índice de la línea disparadora."""

    @property
    def current(self) -> str:
        """La línea disparadora."""
        return self.lines[self.index]

    def absolute(self, offset: int) -> int:
        """Índice absoluto de la línea a `offset` posiciones del centro."""
        return self.index + offset

    def at(self, offset: int) -> str | None:
        """Línea a `offset` posiciones del centro (negativo = hacia atrás).

        Returns:
            El texto de la línea, o None si cae fuera del documento.
        """
        position = self.index + offset
        if 0 <= position < len(self.lines):
            return self.lines[position]
        return None

    def backward(self, start: int, depth: int) -> list[tuple[int, str]]:
        """Recorre hacia atrás desde `start` (inclusive) hasta `depth` líneas.

        Ejemplo: backward(-2, 5) devuelve las líneas -2, -3, ..., -6,
        deteniéndose al llegar al inicio del documento.

        Returns:
            Lista de (offset, texto), del más cercano al más lejano.
        """
        found: list[tuple[int, str]] = []
        for offset in range(start, start - depth, -1):
            line = self.at(offset)
            if line is None:
                break
            found.append((offset, line))
        return found
