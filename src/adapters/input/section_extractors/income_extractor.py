"""
Adaptador de entrada: Extractor de ingresos (Έσοδα από κάθε πηγή).

LÓGICA DE EXTRACCIÓN:
1. El disparador es una línea de moneda (ΕΥΡΩ, ΔΟΛΑΡΙΟ...).
2. El monto se busca en la línea anterior (i-1). Si no es un número,
   se reintenta en i-2 (tolera una línea de ruido entre monto y moneda).
   Si tampoco, el candidato se descarta.
3. La descripción se busca hasta 5 líneas por encima del monto, en la
   primera línea que contenga un rol: "ΥΠΟΧΡΕΟΣ" (declarante) o
   "ΣΥΖΥΓΟΣ" (cónyuge). Se le concatena la línea siguiente, salvo que
   esa línea sea el propio monto. Sin rol, la descripción es "Income".

Ejemplo típico:

    ΥΠΟΧΡΕΟΣ                      ← rol (i-4)
    Μισθωτές υπηρεσίες            ← completa la descripción (i-3)
    1                             ← ruido
    45.200,00                     ← monto (i-1)
    ΕΥΡΩ                          ← disparador (i)

Este es el ÚNICO extractor que distingue titular: si el rol encontrado
es ΣΥΖΥΓΟΣ, la partida se asigna al cónyuge.
"""

from src.adapters.input.section_extractors.currency import is_currency_line
from src.domain.models.financial_entry import FinancialEntry
from src.domain.models.section_type import HolderRole, SectionType
from src.domain.ports.section_extractor import SectionExtractor
from src.domain.shared.greek_number import parse_greek_number
from src.domain.shared.line_window import LineWindow


class IncomeExtractor(SectionExtractor):
    """Extrae ingresos a partir de líneas de moneda."""

    DECLARANT_ANCHOR = "ΥΠΟΧΡΕΟΣ"
    SPOUSE_ANCHOR = "ΣΥΖΥΓΟΣ"

    AMOUNT_OFFSETS: tuple[int, ...] = (-1, -2)
    """Posiciones relativas al disparador donde se busca el monto, en orden."""

    DESCRIPTION_DEPTH: int = 5
    """Líneas por encima del monto donde se busca el rol."""

    DEFAULT_DESCRIPTION = "Income"

    @property
    def section_type(self) -> SectionType:
        return SectionType.INCOME

    def is_trigger(self, line: str) -> bool:
        return is_currency_line(line)

    def extract(self, window: LineWindow) -> FinancialEntry | None:
        for offset in self.AMOUNT_OFFSETS:
            amount = parse_greek_number(window.at(offset))
            if amount is not None:
                break
        else:
            return None

        description, role, description_offset = self._buscar_descripcion(window, offset)
        first_offset = description_offset if description_offset is not None else offset

        return FinancialEntry(
            section_type=SectionType.INCOME,
            provenance=(window.absolute(first_offset), window.index),
            amount=amount,
            currency_label=window.current,
            holder_role=role,
            auxiliary_data={"description": description},
            notes="Auto-extracted",
        )

    def _buscar_descripcion(
        self, window: LineWindow, amount_offset: int
    ) -> tuple[str, HolderRole, int | None]:
        """Busca hacia atrás desde el monto una línea con rol.

        Returns:
            (descripción, titular, offset de la línea de rol o None).
        """
        amount_line = window.at(amount_offset)

        for offset, line in window.backward(amount_offset - 1, self.DESCRIPTION_DEPTH):
            if self.DECLARANT_ANCHOR not in line and self.SPOUSE_ANCHOR not in line:
                continue

            # La línea siguiente al rol completa la descripción, salvo que
            # sea la línea del monto (se compara por contenido).
            following = window.at(offset + 1)
            suffix = following if following != amount_line else ""
            description = f"{line} {suffix}"

            role = HolderRole.SPOUSE if self.SPOUSE_ANCHOR in line else HolderRole.DECLARANT
            return description, role, offset

        return self.DEFAULT_DESCRIPTION, HolderRole.DECLARANT, None
