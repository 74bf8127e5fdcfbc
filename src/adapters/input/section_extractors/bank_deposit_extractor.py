"""
Adaptador de entrada: Extractor de depósitos bancarios (Καταθέσεις σε τράπεζες).

Mismo disparador que los ingresos (línea de moneda), pero el monto se toma
del ÚLTIMO token de la línea inmediatamente anterior. En la tabla de
depósitos el número de fila (o cantidad) comparte línea con el monto:

    3             183,20          ← "3" es la fila, "183,20" el monto
    ΕΥΡΩ                          ← disparador

Si el último token no es un número, el candidato se descarta.
No se intenta distinguir titular: todas las partidas son del declarante.
"""

from src.adapters.input.section_extractors.currency import is_currency_line
from src.domain.models.financial_entry import FinancialEntry
from src.domain.models.section_type import SectionType
from src.domain.ports.section_extractor import SectionExtractor
from src.domain.shared.greek_number import parse_greek_number
from src.domain.shared.line_window import LineWindow


class BankDepositExtractor(SectionExtractor):
    """Extrae saldos de depósitos bancarios."""

    @property
    def section_type(self) -> SectionType:
        return SectionType.BANK_ACCOUNT

    def is_trigger(self, line: str) -> bool:
        return is_currency_line(line)

    def extract(self, window: LineWindow) -> FinancialEntry | None:
        previous = window.at(-1)
        if not previous:
            return None

        tokens = previous.split()
        if not tokens:
            return None

        amount = parse_greek_number(tokens[-1])
        if amount is None:
            return None

        return FinancialEntry(
            section_type=SectionType.BANK_ACCOUNT,
            provenance=(window.absolute(-1), window.index),
            amount=amount,
            currency_label=window.current,
            auxiliary_data={"raw": previous},
            notes="Deposit",
        )
