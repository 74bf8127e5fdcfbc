"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from src.domain.ports import TextExtractor, SectionExtractor, OutputWriter
"""

from src.domain.ports.declaration_store import DeclarationStore, StoredDeclaration
from src.domain.ports.output_writer import OutputWriter
from src.domain.ports.process_logger import ProcessLogger
from src.domain.ports.section_extractor import SectionExtractor
from src.domain.ports.text_extractor import TextExtractor

__all__ = [
    "DeclarationStore",
    "OutputWriter",
    "ProcessLogger",
    "SectionExtractor",
    "StoredDeclaration",
    "TextExtractor",
]
