"""
Heurística de moneda compartida por los extractores de ingresos y depósitos.

En las declaraciones el monto y la moneda aparecen en líneas separadas:

    1.500,00
    ΕΥΡΩ

La línea de moneda es el DISPARADOR: cuando aparece, el monto está
en alguna de las líneas anteriores.
"""

CURRENCY_TOKENS: tuple[str, ...] = ("ΕΥΡΩ", "ΔΟΛΑΡΙΟ", "ΛΙΡΑ", "ΕΛΒΕΤΙΚΟ")
"""Subcadenas de nombres de moneda. ΕΛΒΕΤΙΚΟ cubre 'ΕΛΒΕΤΙΚΟ ΦΡΑΓΚΟ'."""


def is_currency_line(line: str) -> bool:
    """Indica si la línea contiene alguno de los nombres de moneda.

    Ejemplos:
        >>> is_currency_line("ΕΥΡΩ")
        True
        >>> is_currency_line("ΔΟΛΑΡΙΟ ΗΠΑ")
        True
        >>> is_currency_line("1.500,00")
        False
    """
    return any(token in line for token in CURRENCY_TOKENS)
