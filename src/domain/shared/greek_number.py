"""
Utilidades para montos en formato griego.

Las declaraciones usan el formato numérico griego: punto como separador
de miles y coma como separador decimal ("1.234,56").

Este módulo es la ÚNICA fuente de parseo numérico del proyecto: todos los
extractores de sección pasan por `parse_greek_number` para que el manejo
del formato sea consistente.

A diferencia de un parser estricto, un texto no numérico NO es un error:
devuelve None, que los extractores interpretan como "aquí no hay monto".
"""

import re
from decimal import Decimal, InvalidOperation

# Prefijo numérico tras la limpieza: "1234.56", "-0.5", ".75", "12."
_NUMERIC_PREFIX = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")


def parse_greek_number(text: str | None) -> Decimal | None:
    """Convierte un token en formato griego a Decimal.

    Algoritmo:
    1. Quitar todos los "." (separadores de miles).
    2. Reemplazar "," por "." (separador decimal).
    3. Leer el prefijo numérico más largo, ignorando espacios iniciales
       y cualquier basura posterior ("183,20 ΕΥΡΩ" → 183.20).

    No se reconoce notación exponencial (a diferencia de parseFloat):
    "1e3" se lee como 1, porque la "e" cuenta como basura posterior.

    Args:
        text: Token a convertir. None se acepta y devuelve None, para que
              los extractores puedan pasar directamente líneas fuera de rango.

    Returns:
        Decimal con el valor, o None si el texto no empieza con un número.

    Ejemplos:
        >>> parse_greek_number("1.234,56")
        Decimal('1234.56')
        >>> parse_greek_number("0,00")
        Decimal('0.00')
        >>> parse_greek_number("12")
        Decimal('12')
        >>> parse_greek_number("abc") is None
        True
    """
    if not text:
        return None

    cleaned = text.replace(".", "").replace(",", ".").lstrip()

    match = _NUMERIC_PREFIX.match(cleaned)
    if match is None:
        return None

    try:
        return Decimal(match.group(0))
    except InvalidOperation:
        return None


def format_amount(amount: Decimal | None) -> str:
    """Formatea un Decimal en formato griego con 2 decimales.

    Útil para la consola y el resumen final.

    Ejemplos:
        >>> format_amount(Decimal("1234567.891"))
        '1.234.567,89'
        >>> format_amount(Decimal("0"))
        '0,00'
        >>> format_amount(None)
        '-'
    """
    if amount is None:
        return "-"
    amount = amount.quantize(Decimal("0.01"))
    # Formato inglés y luego intercambio de separadores
    english = f"{amount:,.2f}"
    return english.replace(",", "_").replace(".", ",").replace("_", ".")
