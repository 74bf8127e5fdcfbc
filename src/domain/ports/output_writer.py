"""
Puerto de salida: Escritor de resultados.

Define el contrato para escribir los resultados de la extracción en
algún formato de archivo (Excel hoy). El dominio no decide NI conoce
el formato de salida.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from src.domain.models.extraction_result import ExtractionResult


class OutputWriter(ABC):
    """Interfaz para escribir resultados de extracción."""

    @abstractmethod
    def write_single(self, result: ExtractionResult, output_path: Path) -> Path:
        """Escribe el resultado de una sola declaración.

        Args:
            result: Resultado de la extracción.
            output_path: Ruta donde crear el archivo de salida.

        Returns:
            Ruta real del archivo creado (puede diferir si se añadió extensión).

        Raises:
            OutputError: Si falla la escritura (permisos, disco lleno, etc.)
        """
        ...

    @abstractmethod
    def write_consolidated(self, results: list[ExtractionResult], output_path: Path) -> Path:
        """Escribe varias declaraciones en un solo archivo.

        Raises:
            OutputError: Si no hay resultados o falla la escritura.
        """
        ...
