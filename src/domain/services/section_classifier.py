"""
Servicio de dominio: Clasificador de secciones.

Las declaraciones no tienen un esquema estable: la única forma de saber
en qué sección está una línea es recordar el último título de sección
visto. Los títulos se reconocen por SUBCADENA (no por línea exacta)
para tolerar ruido alrededor (espacios, numeración, puntuación).

Los anclas se ordenan como una lista de tuplas (sección, [anclas]).
El orden importa: se evalúan de arriba a abajo y gana la primera
coincidencia.
"""

from src.domain.models.section_type import SectionType


class SectionClassifier:
    """Reconoce los títulos de sección de una declaración."""

    _SECTION_ANCHORS: list[tuple[SectionType, list[str]]] = [
        (SectionType.INCOME, ["Έσοδα από κάθε πηγή"]),
        (
            SectionType.SECURITY,
            [
                "Μετοχές ημεδαπών",
                # Cuenta de inversor en el depositario central de valores
                "ΕΠΕΝΔΥΤΗΣ",
            ],
        ),
        (SectionType.BANK_ACCOUNT, ["Καταθέσεις σε τράπεζες"]),
        (SectionType.REAL_ESTATE, ["Ακίνητα και εμπράγματα"]),
        # Vehículos: se reconoce la sección para cortar la anterior, pero
        # no hay extractor registrado para OTHER.
        (SectionType.OTHER, ["Οχήματα"]),
    ]

    def classify(self, line: str) -> SectionType | None:
        """Determina si la línea es un título de sección.

        Args:
            line: Línea normalizada.

        Returns:
            La sección que abre la línea, o None si no es un título.
        """
        for section_type, anchors in self._SECTION_ANCHORS:
            for anchor in anchors:
                if anchor in line:
                    return section_type
        return None

    @property
    def known_sections(self) -> list[SectionType]:
        """Secciones que este clasificador puede abrir, en orden de prioridad."""
        return [section_type for section_type, _ in self._SECTION_ANCHORS]
