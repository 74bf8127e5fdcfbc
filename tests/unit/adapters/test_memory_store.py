"""
Tests para el almacén en memoria (re-extracción idempotente).
"""

from decimal import Decimal

import pytest

from src.adapters.output.stores.memory_store import InMemoryDeclarationStore


@pytest.fixture
def resultado(extractor, lineas_completas):
    return extractor.extract(lineas_completas, "PAPADOPOULOS_GIORGOS_2024.pdf")


class TestInMemoryDeclarationStore:
    def test_primera_vez_crea_persona_y_declaracion(self, resultado):
        store = InMemoryDeclarationStore()

        stored = store.save(resultado)

        assert stored.person_created
        assert not stored.replaced
        assert stored.entries_deleted == 0
        person = store.get_person(stored.person_id)
        assert person.last_name == "ΠΑΠΑΔΟΠΟΥΛΟΣ"
        assert person.father_name == "ΝΙΚΟΛΑΟΣ"

        row = store.find_declaration("123456")
        assert row.year == 2024
        assert row.total_income == Decimal("48800.00")
        assert row.real_estate_count == 2
        assert row.summary == resultado.summary
        assert len(row.entries) == 7

    def test_reproceso_reemplaza_sin_duplicar(self, resultado):
        store = InMemoryDeclarationStore()
        primera = store.save(resultado)

        segunda = store.save(resultado)

        assert not segunda.person_created
        assert segunda.replaced
        assert segunda.entries_deleted == 7
        assert segunda.person_id == primera.person_id
        assert segunda.declaration_id == primera.declaration_id
        assert store.person_count == 1
        assert store.declaration_count == 1
        assert len(store.find_declaration("123456").entries) == 7

    def test_mismo_nombre_otro_padre_es_otra_persona(self, extractor, lineas_completas):
        store = InMemoryDeclarationStore()
        store.save(extractor.extract(lineas_completas, "a_2024.pdf"))

        otras = [
            "ΚΩΣΤΑΣ" if line == "ΝΙΚΟΛΑΟΣ" else "654321" if line == "123456" else line
            for line in lineas_completas
        ]
        stored = store.save(extractor.extract(otras, "b_2024.pdf"))

        assert stored.person_created
        assert store.person_count == 2
        assert store.declaration_count == 2

    def test_declaracion_inexistente(self):
        assert InMemoryDeclarationStore().find_declaration("1") is None
