"""
Punto de entrada CLI: pothen-parser.

Uso:
    # Procesar una declaración
    pothen-parser /ruta/PAPADOPOULOS_GIORGOS_2024.pdf

    # Procesar todas las declaraciones de una carpeta y generar Excel
    pothen-parser /ruta/declaraciones --excel -o /ruta/salida

    # Ver las líneas normalizadas (para ajustar las heurísticas)
    pothen-parser /ruta/declaracion.pdf --dump-text

Este módulo es el ÚNICO lugar donde se ensamblan los componentes:
- Crea las instancias concretas (PdfplumberExtractor, ExcelWriter, etc.)
- Las inyecta en el DeclarationProcessor, junto con un almacén en memoria:
  dentro de una corrida, una declaración repetida (mismo número) se
  reemplaza y se reporta como ya procesada.
- Ejecuta el procesamiento.

No contiene lógica de negocio — solo "fontanería" (wiring).
"""

import argparse
import sys
from pathlib import Path

from src.adapters.input.text_extractors.ocr_extractor import OcrExtractor
from src.adapters.input.text_extractors.pdfplumber_extractor import PdfplumberExtractor
from src.adapters.input.text_extractors.plain_text_extractor import PlainTextExtractor
from src.adapters.output.loggers.console_logger import ConsoleLogger
from src.adapters.output.stores.memory_store import InMemoryDeclarationStore
from src.adapters.output.writers.excel_writer import ExcelWriter
from src.domain.models.extraction_result import ExtractionResult
from src.domain.models.section_type import SectionType
from src.domain.services.declaration_extractor import DeclarationExtractor
from src.domain.services.declaration_processor import DeclarationProcessor
from src.domain.shared.greek_number import format_amount
from src.domain.shared.text_cleaner import normalize_lines
from src.infrastructure.registry import create_default_registry

# Palabras clave para el análisis rápido de --dump-text
ANALYSIS_KEYWORDS = ["ΑΚΙΝΗΤΑ", "ΟΧΗΜΑΤΑ", "ΚΑΤΑΘΕΣΕΙΣ", "ΕΙΣΟΔΗΜΑΤΑ"]


def main() -> None:
    """Punto de entrada principal del CLI."""
    args = _parse_args()

    input_path = Path(args.input_path)
    output_dir = Path(args.output_dir) if args.output_dir else None

    if not input_path.exists():
        print(f"❌ La ruta no existe: {input_path}")
        sys.exit(1)

    # --- Ensamblar componentes ---
    logger = ConsoleLogger(verbose=args.verbose)

    text_extractors = [
        PdfplumberExtractor(),
        OcrExtractor(),
        PlainTextExtractor(),
    ]

    registry = create_default_registry()
    extractor = DeclarationExtractor(registry=registry, logger=logger)

    processor = DeclarationProcessor(
        text_extractors=text_extractors,
        extractor=extractor,
        logger=logger,
        store=InMemoryDeclarationStore(),
    )

    if args.dump_text:
        if not input_path.is_file():
            print(f"❌ --dump-text requiere un archivo: {input_path}")
            sys.exit(1)
        text = processor.read_text(input_path)
        if text is None:
            print("\n❌ No se pudo leer el documento.")
            sys.exit(1)
        _dump_text(text)
        return

    print("=" * 60)
    print("POTHEN DECLARATION PARSER")
    print("=" * 60)
    print(f"  Entrada:  {input_path}")
    print(f"  Secciones disponibles: {', '.join(registry.available_sections)}")
    print()

    # --- Procesar ---
    if input_path.is_file():
        result = processor.process_file(input_path)
        if result is None:
            print("\n❌ No se pudo procesar el archivo.")
            sys.exit(1)
        results = [result]
    else:
        results = processor.process_directory(input_path)
        if not results:
            print("\n❌ No se procesó ningún archivo.")
            sys.exit(1)

    for result in results:
        _print_result(result)

    # --- Excel ---
    if args.excel:
        if output_dir is None:
            output_dir = input_path.parent if input_path.is_file() else input_path
        output_dir.mkdir(parents=True, exist_ok=True)

        excel_writer = ExcelWriter()
        for result in results:
            output_file = output_dir / f"declaracion_{Path(result.source_file).stem}.xlsx"
            excel_writer.write_single(result, output_file)
            print(f"\n📁 Excel generado: {output_file}")

        if len(results) > 1:
            consolidado_path = output_dir / "consolidado.xlsx"
            excel_writer.write_consolidated(results, consolidado_path)
            print(f"\n📁 Consolidado generado: {consolidado_path}")

    # --- Resumen final ---
    logger.print_summary()


def _print_result(result: ExtractionResult) -> None:
    """Imprime el análisis de una declaración."""
    summary = result.summary
    person = result.person

    print("\n--- ANALYSIS RESULT ---")
    print(f"  Declarante:   {person.full_name} (Padre: {person.father_name or '-'})")
    print(
        f"  Declaración:  {result.declaration.declaration_number} "
        f"({result.declaration.year})"
    )
    print(
        f"  Total Income: {format_amount(summary.total_income)} "
        f"[{len(result.entries_of(SectionType.INCOME))} partidas]"
    )
    print(
        f"  Total Deposits: {format_amount(summary.total_deposits)} "
        f"[{len(result.entries_of(SectionType.BANK_ACCOUNT))} partidas]"
    )
    print(
        f"  Total Investments (Est. Valuation): {format_amount(summary.total_investments)} "
        f"[{len(result.entries_of(SectionType.SECURITY))} partidas]"
    )
    print(f"  Real Estate Items: {summary.real_estate_count}")


def _dump_text(text: str) -> None:
    """Imprime las líneas normalizadas con su índice y un chequeo de palabras clave."""
    lines = normalize_lines(text)
    print(f"\n--- Líneas normalizadas ({len(lines)}) ---")
    for index, line in enumerate(lines):
        print(f"{index:5d}  {line}")

    print("\n--- Keyword Check ---")
    for keyword in ANALYSIS_KEYWORDS:
        found = keyword in text
        print(f"{keyword}: {'FOUND' if found else 'NOT FOUND'}")


def _parse_args() -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        prog="pothen-parser",
        description="Extractor de declaraciones patrimoniales (πόθεν έσχες)",
        epilog="Ejemplo: pothen-parser /ruta/declaracion_2024.pdf --excel",
    )

    parser.add_argument(
        "input_path",
        help="Ruta a una declaración (PDF o TXT) o a un directorio",
    )

    parser.add_argument(
        "-o",
        "--output-dir",
        dest="output_dir",
        help="Directorio de salida para los Excel generados. "
        "Si no se especifica, se usa el mismo directorio de la entrada.",
    )

    parser.add_argument(
        "--excel",
        action="store_true",
        help="Generar un Excel por declaración (y un consolidado si hay varias).",
    )

    parser.add_argument(
        "--dump-text",
        dest="dump_text",
        action="store_true",
        help="Imprimir las líneas normalizadas del documento y salir.",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Mostrar cambios de sección y candidatos descartados.",
    )

    return parser.parse_args()


if __name__ == "__main__":
    main()
