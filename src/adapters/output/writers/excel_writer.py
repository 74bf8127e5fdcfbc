"""
Adaptador de salida: Escritor de Excel.

Genera archivos Excel con un layout de 2 hojas:
- Hoja 1 (Resumen): una fila por declaración con declarante, número,
  año y totales.
- Hoja 2 (Partidas): una fila por partida, en orden de documento, con
  las líneas de origen para poder auditarla contra el texto.
"""

from pathlib import Path

import pandas as pd

from src.domain.exceptions import OutputError
from src.domain.models.extraction_result import ExtractionResult
from src.domain.ports.output_writer import OutputWriter


class ExcelWriter(OutputWriter):
    """Genera archivos Excel con formato estandarizado."""

    def write_single(self, result: ExtractionResult, output_path: Path) -> Path:
        """Escribe una sola declaración a Excel.

        Args:
            result: Resultado de la extracción.
            output_path: Ruta donde crear el archivo. Si no termina en .xlsx,
                        se le agrega la extensión.

        Returns:
            Ruta del archivo creado.
        """
        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_suffix(".xlsx")

        output_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            self._escribir_excel([result], output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e))

        return output_path

    def write_consolidated(self, results: list[ExtractionResult], output_path: Path) -> Path:
        """Escribe varias declaraciones en las mismas 2 hojas."""
        if not results:
            raise OutputError(str(output_path), "No hay resultados para consolidar")

        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_suffix(".xlsx")

        output_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            self._escribir_excel(results, output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e))

        return output_path

    # =================================================================
    # MÉTODO PRIVADO: Generación del Excel
    # =================================================================

    def _escribir_excel(self, results: list[ExtractionResult], output_path: Path) -> None:
        """Genera el archivo Excel con las 2 hojas."""
        filas_partidas = []
        for result in results:
            for entry in result.entries:
                first, last = entry.provenance
                filas_partidas.append(
                    {
                        "Declaración": result.declaration.declaration_number,
                        "Sección": entry.section_type.value,
                        "Titular": entry.holder_role.value,
                        "Monto": float(entry.amount) if entry.amount is not None else None,
                        "Moneda": entry.currency_label,
                        "Descripción": entry.auxiliary_data.get(
                            "description", entry.auxiliary_data.get("raw", "")
                        ),
                        "Líneas": f"{first}-{last}",
                        "Notas": entry.notes,
                    }
                )

        df_partidas = pd.DataFrame(
            filas_partidas,
            columns=[
                "Declaración",
                "Sección",
                "Titular",
                "Monto",
                "Moneda",
                "Descripción",
                "Líneas",
                "Notas",
            ],
        )

        filas_resumen = []
        for result in results:
            summary = result.summary
            filas_resumen.append(
                {
                    "Apellido": result.person.last_name,
                    "Nombre": result.person.first_name,
                    "Padre": result.person.father_name or "",
                    "Declaración": result.declaration.declaration_number,
                    "Año": result.declaration.year,
                    "Total Ingresos": float(summary.total_income),
                    "Total Depósitos": float(summary.total_deposits),
                    "Total Inversiones": float(summary.total_investments),
                    "Inmuebles": summary.real_estate_count,
                    "Archivo": result.source_file,
                }
            )

        df_resumen = pd.DataFrame(filas_resumen)

        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            df_resumen.to_excel(writer, index=False, sheet_name="Resumen")
            df_partidas.to_excel(writer, index=False, sheet_name="Partidas")

            workbook = writer.book
            ws_resumen = writer.sheets["Resumen"]
            ws_partidas = writer.sheets["Partidas"]

            # Formato para texto (el número de declaración no es numérico)
            text_format = workbook.add_format({"num_format": "@"})

            # Formato para montos (2 decimales con separador de miles)
            money_format = workbook.add_format({"num_format": "#,##0.00"})

            # --- Formato Hoja Resumen ---
            ws_resumen.set_column("A:C", 20)  # Apellido, Nombre, Padre
            ws_resumen.set_column("D:D", 18, text_format)  # Declaración
            ws_resumen.set_column("E:E", 8)  # Año
            ws_resumen.set_column("F:H", 18, money_format)  # Totales
            ws_resumen.set_column("I:I", 10)  # Inmuebles
            ws_resumen.set_column("J:J", 40)  # Archivo

            # --- Formato Hoja Partidas ---
            ws_partidas.set_column("A:A", 18, text_format)  # Declaración
            ws_partidas.set_column("B:C", 14)  # Sección, Titular
            ws_partidas.set_column("D:D", 15, money_format)  # Monto
            ws_partidas.set_column("E:E", 12)  # Moneda
            ws_partidas.set_column("F:F", 50)  # Descripción
            ws_partidas.set_column("G:H", 22)  # Líneas, Notas
