"""
Adaptador de salida: Logger a consola.

Implementación simple de ProcessLogger que imprime eventos a stdout
con un formato consistente y un resumen final.

Los candidatos descartados (un monto ilegible junto a una moneda) son
frecuentes; por defecto solo se cuentan y se muestran en el resumen.
Con verbose=True se imprime cada uno, junto con los cambios de sección.
"""

from pathlib import Path

from src.domain.models.declaration import ExtractedDeclaration
from src.domain.models.person import ExtractedPerson
from src.domain.models.section_type import SectionType
from src.domain.ports.process_logger import ProcessLogger


class ConsoleLogger(ProcessLogger):
    """Logger que imprime eventos de procesamiento a consola."""

    def __init__(self, verbose: bool = False) -> None:
        self._verbose = verbose
        self._archivos_recibidos: int = 0
        self._archivos_procesados: int = 0
        self._total_partidas: int = 0
        self._candidatos_descartados: int = 0
        self._declaraciones_reemplazadas: int = 0
        self._errores: list[dict] = []

    # --- Fase 1: Lectura ---

    def log_file_received(self, file_path: Path, file_type: str) -> None:
        self._archivos_recibidos += 1
        print(f"  📄 Recibido: {file_path.name} ({file_type})")

    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        print(f"  ⏭️  {file_path.name} — {reason}")

    def log_extraction_start(self, file_path: Path, extractor_name: str) -> None:
        print(f"  🔍 Extrayendo texto ({extractor_name}): {file_path.name}")

    # --- Fase 2: Extracción ---

    def log_identity_extracted(self, file_name: str, person: ExtractedPerson) -> None:
        father = person.father_name or "-"
        print(f"  👤 Declarante: {person.full_name} (Padre: {father})")

    def log_declaration_header(self, file_name: str, declaration: ExtractedDeclaration) -> None:
        print(
            f"  🧾 Declaración: {declaration.declaration_number}, "
            f"Año: {declaration.year}"
        )
        if declaration.is_placeholder_number:
            print(f"  ⚠️  {file_name}: sin número de declaración, se usa uno sintético")

    def log_section_entered(self, line_index: int, section_type: SectionType) -> None:
        if self._verbose:
            print(f"    § Línea {line_index}: sección {section_type.value}")

    def log_candidate_discarded(
        self, section_type: SectionType, line_index: int, line: str
    ) -> None:
        self._candidatos_descartados += 1
        if self._verbose:
            print(f"    ✗ Descartado ({section_type.value}) línea {line_index}: {line!r}")

    def log_extraction_complete(self, file_path: Path, num_lines: int, num_entries: int) -> None:
        self._archivos_procesados += 1
        self._total_partidas += num_entries
        print(f"  ✅ Completado: {file_path.name} — {num_lines} líneas, {num_entries} partidas")

    def log_error(self, file_path: Path, error: Exception) -> None:
        self._errores.append({"archivo": str(file_path.name), "error": str(error)})
        print(f"  ❌ Error: {file_path.name} — {error}")

    # --- Fase 3: Persistencia ---

    def log_declaration_replaced(self, declaration_number: str, entries_deleted: int) -> None:
        self._declaraciones_reemplazadas += 1
        print(
            f"  ♻️  Declaración {declaration_number} ya procesada: "
            f"{entries_deleted} partidas anteriores reemplazadas"
        )

    # --- Resumen ---

    def get_summary(self) -> dict:
        return {
            "archivos_recibidos": self._archivos_recibidos,
            "archivos_procesados": self._archivos_procesados,
            "archivos_con_error": len(self._errores),
            "total_partidas": self._total_partidas,
            "candidatos_descartados": self._candidatos_descartados,
            "declaraciones_reemplazadas": self._declaraciones_reemplazadas,
            "errores": self._errores,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final del procesamiento."""
        print("\n" + "=" * 60)
        print("RESUMEN DE PROCESAMIENTO")
        print("=" * 60)
        print(f"  Archivos recibidos:     {self._archivos_recibidos}")
        print(f"  Archivos procesados:    {self._archivos_procesados}")
        print(f"  Archivos con error:     {len(self._errores)}")
        print(f"  Total partidas:         {self._total_partidas}")
        print(f"  Candidatos descartados: {self._candidatos_descartados}")
        print(f"  Declaraciones reemplazadas: {self._declaraciones_reemplazadas}")

        if self._errores:
            print("\n  ERRORES:")
            for err in self._errores:
                print(f"    - {err['archivo']}: {err['error']}")

        print("=" * 60)
