"""
Registro de extractores de sección disponibles.

Centraliza la relación sección → extractor.
Agregar una heurística nueva requiere solo 2 pasos:
1. Crear la clase que implemente SectionExtractor.
2. Registrarla aquí con register() o agregarla a create_default_registry().

¿Por qué un registro separado y no hardcodear en el extractor de
declaraciones? Porque el recorrido de secciones no debe saber qué
heurísticas existen. Solo pide "dame el extractor para INCOME".
Una sección sin extractor registrado (OTHER) simplemente se salta.
"""

from src.domain.models.section_type import SectionType
from src.domain.ports.section_extractor import SectionExtractor


class SectionExtractorRegistry:
    """Registro de extractores por sección."""

    def __init__(self) -> None:
        self._extractors: dict[SectionType, SectionExtractor] = {}

    def register(self, extractor: SectionExtractor) -> None:
        """Registra un extractor. La clave es extractor.section_type.

        Raises:
            ValueError: Si ya existe un extractor para esa sección, o si
                        se intenta registrar uno para NONE.
        """
        section_type = extractor.section_type
        if section_type is SectionType.NONE:
            raise ValueError("No se puede registrar un extractor para la sección NONE")
        if section_type in self._extractors:
            raise ValueError(
                f"Ya existe un extractor registrado para '{section_type.value}': "
                f"{type(self._extractors[section_type]).__name__}. "
                f"No se puede registrar {type(extractor).__name__}."
            )
        self._extractors[section_type] = extractor

    def get(self, section_type: SectionType) -> SectionExtractor | None:
        """Obtiene el extractor de una sección, o None si no hay."""
        return self._extractors.get(section_type)

    @property
    def available_sections(self) -> list[str]:
        """Secciones con extractor disponible."""
        return sorted(section_type.value for section_type in self._extractors)

    def __len__(self) -> int:
        return len(self._extractors)


def create_default_registry() -> SectionExtractorRegistry:
    """Crea un registro con las cuatro heurísticas de sección.

    Returns:
        SectionExtractorRegistry con ingresos, depósitos, valores e inmuebles.
    """
    registry = SectionExtractorRegistry()

    # Se importan aquí (no al inicio del archivo) para que el dominio
    # pueda importar el registro sin arrastrar los adaptadores.

    from src.adapters.input.section_extractors.income_extractor import IncomeExtractor

    registry.register(IncomeExtractor())

    from src.adapters.input.section_extractors.bank_deposit_extractor import (
        BankDepositExtractor,
    )

    registry.register(BankDepositExtractor())

    from src.adapters.input.section_extractors.security_extractor import SecurityExtractor

    registry.register(SecurityExtractor())

    from src.adapters.input.section_extractors.real_estate_counter import RealEstateCounter

    registry.register(RealEstateCounter())

    return registry
