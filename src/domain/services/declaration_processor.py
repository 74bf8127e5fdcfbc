"""
Servicio de dominio: Procesador de declaraciones.

Orquesta el procesamiento de un documento:
1. Recibe una ruta a un archivo (PDF o .txt).
2. Selecciona el TextExtractor adecuado (can_handle), con fallback a OCR.
3. Une el texto de las páginas y lo pasa al DeclarationExtractor.
4. Opcionalmente guarda el resultado en un DeclarationStore.

¿Por qué no poner esta lógica en el CLI?
Porque "dado un documento, producir una declaración" es una regla del
dominio. El CLI solo decide QUÉ archivos procesar y DÓNDE escribir.

Errores fatales (documento ilegible, declarante sin nombre) se registran
en la bitácora y el archivo se devuelve como None: no hay escrituras
parciales en el almacén.
"""

from collections.abc import Sequence
from pathlib import Path

from src.domain.exceptions import DeclarationParserError, ExtractionError, InvalidFormatError
from src.domain.models.extraction_result import ExtractionResult
from src.domain.models.page_text import PageText
from src.domain.ports.declaration_store import DeclarationStore
from src.domain.ports.process_logger import ProcessLogger
from src.domain.ports.text_extractor import TextExtractor
from src.domain.services.declaration_extractor import DeclarationExtractor


class DeclarationProcessor:
    """Procesa un archivo y produce un ExtractionResult.

    Recibe sus dependencias por constructor (Dependency Injection).
    """

    def __init__(
        self,
        text_extractors: Sequence[TextExtractor],
        extractor: DeclarationExtractor,
        logger: ProcessLogger,
        store: DeclarationStore | None = None,
    ) -> None:
        """
        Args:
            text_extractors: Extractores de texto disponibles, en orden de
                            prioridad. Se usa el primero cuyo can_handle
                            devuelva True y que produzca texto.
            extractor: Extractor de declaraciones.
            logger: Logger para la bitácora de procesamiento.
            store: Almacén opcional. Sin almacén solo se extrae.
        """
        self._extractors = text_extractors
        self._extractor = extractor
        self._logger = logger
        self._store = store

    def read_text(self, file_path: Path) -> str | None:
        """Extrae el texto completo del documento (páginas unidas por \\n).

        Returns:
            El texto, o None si ningún extractor pudo leerlo.
        """
        pages = self._extract_with_fallback(file_path)
        if pages is None:
            return None
        return "\n".join(p.text for p in pages)

    def process_file(self, file_path: Path) -> ExtractionResult | None:
        """Procesa un archivo y devuelve el resultado.

        Args:
            file_path: Ruta al archivo a procesar.

        Returns:
            ExtractionResult si el procesamiento fue exitoso.
            None si el documento no se pudo leer o no tiene declarante.
        """
        self._logger.log_file_received(file_path, file_path.suffix)

        if not file_path.is_file():
            self._logger.log_error(
                file_path,
                InvalidFormatError(str(file_path), "archivo", "El archivo no existe"),
            )
            return None

        text = self.read_text(file_path)
        if text is None:
            return None

        try:
            result = self._extractor.extract_text(text, file_name=file_path.name)
        except DeclarationParserError as e:
            self._logger.log_error(file_path, e)
            return None

        if self._store is not None:
            stored = self._store.save(result)
            if stored.replaced:
                self._logger.log_declaration_replaced(
                    result.declaration.declaration_number, stored.entries_deleted
                )

        self._logger.log_extraction_complete(file_path, result.num_lines, len(result.entries))
        return result

    def process_directory(self, dir_path: Path) -> list[ExtractionResult]:
        """Procesa todos los documentos soportados de un directorio.

        Returns:
            Lista de ExtractionResult (solo los exitosos), en orden de nombre.
        """
        if not dir_path.is_dir():
            raise ValueError(f"No es un directorio: {dir_path}")

        archivos = sorted(
            p
            for p in dir_path.glob("**/*")
            if p.is_file() and any(e.can_handle(p) for e in self._extractors)
        )

        results: list[ExtractionResult] = []
        for archivo in archivos:
            result = self.process_file(archivo)
            if result is not None:
                results.append(result)

        return results

    def _extract_with_fallback(self, file_path: Path) -> list[PageText] | None:
        """Intenta extraer texto probando extractores en orden.

        Si el primer extractor (pdfplumber) devuelve páginas vacías,
        intenta con el siguiente (OCR). Muchas declaraciones son escaneos
        sin capa de texto.

        CASO ESPECIAL — PDFs HÍBRIDOS:
        Si pdfplumber devuelve ALGUNAS páginas vacías (anexos escaneados
        pegados a una declaración digital), se guarda el resultado parcial
        y el OCR rellena solo las páginas vacías.

        Returns:
            Lista de PageText si algún extractor tuvo éxito.
            None si ningún extractor pudo extraer texto.
        """
        extractores_compatibles = [e for e in self._extractors if e.can_handle(file_path)]

        if not extractores_compatibles:
            self._logger.log_file_skipped(
                file_path,
                f"Ningún extractor puede manejar '{file_path.suffix}'",
            )
            return None

        first_result: list[PageText] | None = None

        for extractor in extractores_compatibles:
            self._logger.log_extraction_start(file_path, extractor.name)

            try:
                pages = extractor.extract(file_path)
            except (ExtractionError, InvalidFormatError) as e:
                self._logger.log_error(file_path, e)
                continue  # Probar siguiente extractor

            if first_result is not None and pages:
                merged = self._merge_hybrid_pages(first_result, pages)
                if merged and not all(p.is_empty for p in merged):
                    return merged
                first_result = merged
                continue

            # Caso 1: TODAS las páginas tienen texto → éxito total
            if pages and not any(p.is_empty for p in pages):
                return pages

            # Caso 2: ALGUNAS páginas tienen texto (PDF híbrido)
            if pages and not all(p.is_empty for p in pages):
                empty_count = sum(1 for p in pages if p.is_empty)
                first_result = pages
                self._logger.log_file_skipped(
                    file_path,
                    f"PDF híbrido: {empty_count}/{len(pages)} páginas "
                    f"sin texto con {extractor.name}, "
                    f"intentando OCR en páginas vacías...",
                )
                continue

            # Caso 3: TODAS las páginas vacías → intentar siguiente extractor
            self._logger.log_file_skipped(
                file_path,
                f"Sin texto con {extractor.name}, intentando siguiente...",
            )

        if first_result is not None and not all(p.is_empty for p in first_result):
            return first_result

        self._logger.log_file_skipped(file_path, "Documento sin texto extraíble (ni nativo ni OCR)")
        return None

    @staticmethod
    def _merge_hybrid_pages(
        primary: list[PageText],
        secondary: list[PageText],
    ) -> list[PageText]:
        """Mezcla páginas de dos extractores para PDFs híbridos.

        Para cada página usa el texto del extractor primario (pdfplumber)
        si está disponible; si está vacía, usa el del secundario (OCR).

        Returns:
            Lista de PageText mezcladas. Misma longitud que primary.
        """
        merged: list[PageText] = []

        for i, page in enumerate(primary):
            if not page.is_empty:
                merged.append(page)
            elif i < len(secondary) and not secondary[i].is_empty:
                merged.append(secondary[i])
            else:
                merged.append(page)

        return merged
