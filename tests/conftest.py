"""
Fixtures compartidas.

DECLARACION_COMPLETA simula el texto que pdfplumber extrae de una
declaración: etiquetas y valores en líneas separadas, líneas vacías,
espacios sobrantes y una sección de vehículos sin extractor.
"""

from datetime import datetime, timezone

import pytest

from src.domain.services.declaration_extractor import DeclarationExtractor
from src.domain.shared.text_cleaner import normalize_lines
from src.infrastructure.registry import create_default_registry

DECLARACION_COMPLETA = """
ΔΗΛΩΣΗ ΠΕΡΙΟΥΣΙΑΚΗΣ ΚΑΤΑΣΤΑΣΗΣ
  ΑΡΙΘΜΟΣ ΔΗΛΩΣΗΣ :
123456
Επώνυμο :
ΠΑΠΑΔΟΠΟΥΛΟΣ
Όνομα :
ΓΙΩΡΓΟΣ
Όνομα πατρός :
ΝΙΚΟΛΑΟΣ

Έσοδα από κάθε πηγή
ΥΠΟΧΡΕΟΣ
Μισθωτές υπηρεσίες
45.200,00
ΕΥΡΩ
ΣΥΖΥΓΟΣ
Ενοίκια
1
3.600,00
ΕΥΡΩ

Καταθέσεις σε τράπεζες
ΕΘΝΙΚΗ ΤΡΑΠΕΖΑ
3             183,20
ΕΥΡΩ
ΠΕΙΡΑΙΩΣ
1    10.000,00
ΕΥΡΩ
Μετοχές ημεδαπών
ΟΤΕ Α.Ε.
0,00 7.838,02 0,00
Ακίνητα και εμπράγματα
ΑΚΙΝΗΤΟ 1 ΔΙΑΜΕΡΙΣΜΑ
ΑΚΙΝΗΤΟ 2 ΑΠΟΘΗΚΗ
Οχήματα
ΕΠΙΒΑΤΙΚΟ 1.600 ΕΥΡΩ
"""

HORA_FIJA = datetime(2024, 3, 15, 12, 0, 0, tzinfo=timezone.utc)
"""Reloj fijo: 1710504000000 ms desde epoch."""


@pytest.fixture
def lineas_completas() -> list[str]:
    return normalize_lines(DECLARACION_COMPLETA)


@pytest.fixture
def extractor() -> DeclarationExtractor:
    return DeclarationExtractor(
        registry=create_default_registry(),
        clock=lambda: HORA_FIJA,
    )


@pytest.fixture
def texto_completo() -> str:
    return DECLARACION_COMPLETA
