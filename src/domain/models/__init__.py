"""
Modelos de dominio del proyecto pothen-parser.

Todos los modelos son dataclasses inmutables (frozen=True) que representan
los datos del negocio sin dependencias externas.

Uso:
    from src.domain.models import FinancialEntry, ExtractionResult, SectionType
"""

from src.domain.models.declaration import ExtractedDeclaration
from src.domain.models.extraction_result import ExtractionResult
from src.domain.models.financial_entry import FinancialEntry
from src.domain.models.page_text import PageText
from src.domain.models.person import ExtractedPerson
from src.domain.models.section_type import HolderRole, SectionType
from src.domain.models.summary import DeclarationSummary

__all__ = [
    "DeclarationSummary",
    "ExtractedDeclaration",
    "ExtractedPerson",
    "ExtractionResult",
    "FinancialEntry",
    "HolderRole",
    "PageText",
    "SectionType",
]
