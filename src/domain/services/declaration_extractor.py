"""
Servicio de dominio: Extractor de declaraciones.

Convierte la secuencia de líneas normalizadas en un ExtractionResult:
1. Identidad del declarante (fatal si falta).
2. Encabezado: número y año.
3. Recorrido de secciones: un solo pase hacia adelante.
4. Resumen: fold de las partidas.

RECORRIDO DE SECCIONES:
El recorrido es un fold explícito. Cada línea produce un ScanState
NUEVO a partir del anterior; no hay contadores mutables escondidos en
el cuerpo del loop. Esto permite probar el recorrido con secuencias
parciales y comparar estados intermedios.

Por cada línea:
- Si es un título de sección → cambia la sección actual y la línea se
  CONSUME (no llega a ningún extractor).
- Si la sección actual es NONE o no tiene extractor → se salta.
- Si la línea dispara la heurística de la sección → se intenta extraer.
  Sin partida, el candidato se descarta y se reporta a la bitácora.

El clasificador nunca mira hacia adelante ni retrocede: la sección solo
cambia al encontrar otro título (incluso si se repite uno ya visto).
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from datetime import datetime

from src.domain.models.extraction_result import ExtractionResult
from src.domain.models.financial_entry import FinancialEntry
from src.domain.models.section_type import SectionType
from src.domain.ports.process_logger import ProcessLogger
from src.domain.services.aggregator import summarize
from src.domain.services.header_extractor import extract_declaration
from src.domain.services.identity_extractor import extract_person
from src.domain.services.section_classifier import SectionClassifier
from src.domain.shared.line_window import LineWindow
from src.domain.shared.text_cleaner import normalize_lines, strip_lines
from src.infrastructure.registry import SectionExtractorRegistry


@dataclass(frozen=True)
class ScanState:
    """Estado del recorrido de secciones después de una línea."""

    current_section: SectionType = SectionType.NONE
    entries: tuple[FinancialEntry, ...] = ()
    discarded: int = 0


class DeclarationExtractor:
    """Extrae una declaración completa a partir de sus líneas.

    No hace I/O ni guarda estado entre documentos: la misma instancia
    puede procesar documentos uno tras otro (o en paralelo).
    """

    def __init__(
        self,
        registry: SectionExtractorRegistry,
        classifier: SectionClassifier | None = None,
        logger: ProcessLogger | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """
        Args:
            registry: Extractores de sección disponibles.
            classifier: Clasificador de títulos. Por defecto el estándar.
            logger: Bitácora opcional para cambios de sección y descartes.
            clock: Hora actual, para el número sintético y el año por defecto.
        """
        self._registry = registry
        self._classifier = classifier or SectionClassifier()
        self._logger = logger
        self._clock = clock

    def extract_text(self, text: str, file_name: str = "") -> ExtractionResult:
        """Normaliza el texto crudo y extrae la declaración."""
        return self.extract(normalize_lines(text), file_name)

    def extract(self, lines: Sequence[str], file_name: str = "") -> ExtractionResult:
        """Extrae declarante, encabezado, partidas y resumen.

        Args:
            lines: Líneas del documento. Se recortan y se descartan las
                   vacías antes de extraer (ver strip_lines).
            file_name: Nombre del archivo original (año y trazabilidad).

        Raises:
            MissingIdentityError: Si falta nombre o apellido del declarante.
        """
        lines = strip_lines(lines)
        person = extract_person(lines, file_name)
        declaration = extract_declaration(lines, file_name, clock=self._clock)

        if self._logger is not None:
            self._logger.log_identity_extracted(file_name, person)
            self._logger.log_declaration_header(file_name, declaration)

        state = self.scan(lines)

        return ExtractionResult(
            person=person,
            declaration=declaration,
            entries=state.entries,
            summary=summarize(state.entries),
            source_file=file_name,
            num_lines=len(lines),
            discarded=state.discarded,
        )

    def scan(self, lines: Sequence[str]) -> ScanState:
        """Recorre las líneas y devuelve el estado final."""
        state = ScanState()
        for index in range(len(lines)):
            state = self.step(state, lines, index)
        return state

    def step(self, state: ScanState, lines: Sequence[str], index: int) -> ScanState:
        """Aplica una línea al estado y devuelve el estado siguiente."""
        line = lines[index]

        section_type = self._classifier.classify(line)
        if section_type is not None:
            if self._logger is not None:
                self._logger.log_section_entered(index, section_type)
            return replace(state, current_section=section_type)

        if state.current_section is SectionType.NONE:
            return state

        extractor = self._registry.get(state.current_section)
        if extractor is None or not extractor.is_trigger(line):
            return state

        entry = extractor.extract(LineWindow(lines, index))
        if entry is None:
            if self._logger is not None:
                self._logger.log_candidate_discarded(state.current_section, index, line)
            return replace(state, discarded=state.discarded + 1)

        return replace(state, entries=state.entries + (entry,))
