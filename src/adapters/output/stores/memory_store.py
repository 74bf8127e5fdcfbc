"""
Adaptador de salida: Almacén de declaraciones en memoria.

Implementación de referencia del contrato de persistencia. Sirve para
tests y para procesar lotes sin base de datos. Las "tablas" son
diccionarios indexados por id, con las mismas reglas que una base
relacional:

- person: upsert por (nombre, apellido, nombre del padre).
- declaration: clave única por número de declaración.
- entries: se borran TODAS las de la declaración antes de insertar.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from src.domain.models.extraction_result import ExtractionResult
from src.domain.models.financial_entry import FinancialEntry
from src.domain.models.summary import DeclarationSummary
from src.domain.ports.declaration_store import DeclarationStore, StoredDeclaration


@dataclass
class PersonRow:
    id: int
    first_name: str
    last_name: str
    father_name: str | None


@dataclass
class DeclarationRow:
    id: int
    person_id: int
    declaration_number: str
    year: int
    total_income: Decimal = Decimal("0")
    total_deposits: Decimal = Decimal("0")
    total_investments: Decimal = Decimal("0")
    real_estate_count: int = 0
    entries: list[FinancialEntry] = field(default_factory=list)

    @property
    def summary(self) -> DeclarationSummary:
        return DeclarationSummary(
            total_income=self.total_income,
            total_deposits=self.total_deposits,
            total_investments=self.total_investments,
            real_estate_count=self.real_estate_count,
        )


class InMemoryDeclarationStore(DeclarationStore):
    """Almacén en memoria con semántica de re-extracción idempotente."""

    def __init__(self) -> None:
        self._persons: dict[int, PersonRow] = {}
        self._declarations: dict[int, DeclarationRow] = {}
        self._next_person_id = 1
        self._next_declaration_id = 1

    def save(self, result: ExtractionResult) -> StoredDeclaration:
        person, person_created = self._upsert_person(result)

        declaration = self.find_declaration(result.declaration.declaration_number)
        replaced = declaration is not None
        entries_deleted = 0

        if declaration is None:
            declaration = DeclarationRow(
                id=self._next_declaration_id,
                person_id=person.id,
                declaration_number=result.declaration.declaration_number,
                year=result.declaration.year,
            )
            self._declarations[declaration.id] = declaration
            self._next_declaration_id += 1
        else:
            # Ya procesada: se purgan las partidas anteriores
            entries_deleted = len(declaration.entries)
            declaration.year = result.declaration.year

        declaration.entries = list(result.entries)

        summary = result.summary
        declaration.total_income = summary.total_income
        declaration.total_deposits = summary.total_deposits
        declaration.total_investments = summary.total_investments
        declaration.real_estate_count = summary.real_estate_count

        return StoredDeclaration(
            person_id=person.id,
            declaration_id=declaration.id,
            person_created=person_created,
            replaced=replaced,
            entries_deleted=entries_deleted,
        )

    def find_declaration(self, declaration_number: str) -> DeclarationRow | None:
        """Busca una declaración por número."""
        for row in self._declarations.values():
            if row.declaration_number == declaration_number:
                return row
        return None

    def get_person(self, person_id: int) -> PersonRow | None:
        return self._persons.get(person_id)

    @property
    def person_count(self) -> int:
        return len(self._persons)

    @property
    def declaration_count(self) -> int:
        return len(self._declarations)

    def _upsert_person(self, result: ExtractionResult) -> tuple[PersonRow, bool]:
        extracted = result.person
        for row in self._persons.values():
            if (
                row.first_name == extracted.first_name
                and row.last_name == extracted.last_name
                and row.father_name == extracted.father_name
            ):
                return row, False

        row = PersonRow(
            id=self._next_person_id,
            first_name=extracted.first_name,
            last_name=extracted.last_name,
            father_name=extracted.father_name,
        )
        self._persons[row.id] = row
        self._next_person_id += 1
        return row, True
