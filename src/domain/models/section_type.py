"""
Modelo de dominio: Tipos de sección y roles del titular.

Una declaración patrimonial se divide en secciones (ingresos, depósitos,
valores, inmuebles...). El clasificador recorre las líneas y mantiene
una sola "sección actual", que siempre es uno de estos valores.
"""

from enum import Enum


class SectionType(str, Enum):
    """Categoría de una sección del documento.

    NONE es el estado inicial, antes de ver cualquier título de sección.
    Las líneas vistas en NONE (y en OTHER) no llegan a ningún extractor.
    """

    INCOME = "INCOME"
    BANK_ACCOUNT = "BANK_ACCOUNT"
    SECURITY = "SECURITY"
    REAL_ESTATE = "REAL_ESTATE"
    OTHER = "OTHER"
    NONE = "NONE"


class HolderRole(str, Enum):
    """Titular de una partida financiera.

    Por defecto es el declarante. Solo el extractor de ingresos intenta
    distinguir al cónyuge (ancla "ΣΥΖΥΓΟΣ").
    """

    DECLARANT = "DECLARANT"
    SPOUSE = "SPOUSE"
