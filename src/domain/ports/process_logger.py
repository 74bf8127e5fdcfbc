"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define el contrato para registrar eventos durante la extracción de
declaraciones.

¿Por qué no usar simplemente el módulo `logging` de Python?
Porque `logging` es una herramienta de infraestructura (HOW), mientras que
este puerto define los EVENTOS de negocio (WHAT):
- "Se encontró el declarante" (no "INFO: nombre encontrado")
- "Se descartó un candidato de ingreso" (no "DEBUG: parse falló")

La implementación puede imprimir a consola, escribir a archivo o
acumular en memoria para los tests.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from src.domain.models.declaration import ExtractedDeclaration
from src.domain.models.person import ExtractedPerson
from src.domain.models.section_type import SectionType


class ProcessLogger(ABC):
    """Interfaz para la bitácora de procesamiento."""

    # --- Fase 1: Lectura del documento ---

    @abstractmethod
    def log_file_received(self, file_path: Path, file_type: str) -> None:
        """Registra que se recibió un archivo para procesar."""
        ...

    @abstractmethod
    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        """Registra que un archivo (o un extractor) no produjo texto."""
        ...

    @abstractmethod
    def log_extraction_start(self, file_path: Path, extractor_name: str) -> None:
        """Registra el inicio de extracción de texto."""
        ...

    # --- Fase 2: Extracción ---

    @abstractmethod
    def log_identity_extracted(self, file_name: str, person: ExtractedPerson) -> None:
        """Registra el declarante encontrado."""
        ...

    @abstractmethod
    def log_declaration_header(self, file_name: str, declaration: ExtractedDeclaration) -> None:
        """Registra número y año de la declaración.

        La implementación debe advertir cuando el número es sintetizado
        (declaration.is_placeholder_number).
        """
        ...

    @abstractmethod
    def log_section_entered(self, line_index: int, section_type: SectionType) -> None:
        """Registra que el clasificador cambió de sección."""
        ...

    @abstractmethod
    def log_candidate_discarded(
        self, section_type: SectionType, line_index: int, line: str
    ) -> None:
        """Registra un disparador que no produjo partida.

        No es un error: la heurística falla a menudo y se sigue recorriendo.
        """
        ...

    @abstractmethod
    def log_extraction_complete(self, file_path: Path, num_lines: int, num_entries: int) -> None:
        """Registra el fin exitoso de la extracción."""
        ...

    @abstractmethod
    def log_error(self, file_path: Path, error: Exception) -> None:
        """Registra un error durante el procesamiento."""
        ...

    # --- Fase 3: Persistencia ---

    @abstractmethod
    def log_declaration_replaced(self, declaration_number: str, entries_deleted: int) -> None:
        """Registra que una declaración ya procesada se re-extrajo."""
        ...

    # --- Resumen ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de todo el procesamiento.

        Returns:
            Diccionario con métricas:
            {
                'archivos_recibidos': int,
                'archivos_procesados': int,
                'archivos_con_error': int,
                'total_partidas': int,
                'candidatos_descartados': int,
                'errores': List[dict],  # [{archivo, error}]
            }
        """
        ...
