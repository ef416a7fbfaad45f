"""Descriptor schema validation — file records and API responses.

Invariants:
    - camelCase file keys and snake_case names both accepted
    - id/name required, stripped, non-empty
    - Unknown keys rejected (typos in descriptor files surface early)
    - DescriptorResponse.display_name comes from render_descriptor_name
"""

import pytest
from pydantic import ValidationError

from app.core.descriptor_catalog import DATA_STRUCTURE_DATA
from app.schemas.descriptor import DescriptorRecord, DescriptorResponse


# --- DescriptorRecord ---------------------------------------------------------

def test_record_accepts_camel_case_keys():
    record = DescriptorRecord.model_validate({
        "id": "array",
        "name": "Arranjo",
        "alternateName": "Array",
        "alsoKnownAs": ["Vetor", "Lista"],
        "searchKeywords": ["contíguo"],
        "description": "Itens do mesmo tipo",
    })
    assert record.alternate_name == "Array"
    assert record.also_known_as == ["Vetor", "Lista"]
    assert record.search_keywords == ["contíguo"]


def test_record_accepts_snake_case_names():
    record = DescriptorRecord.model_validate({
        "id": "record", "name": "Registro", "description": "Itens", "also_known_as": ["Struct"],
    })
    assert record.also_known_as == ["Struct"]


def test_record_optional_fields_default_empty():
    record = DescriptorRecord.model_validate({
        "id": "linked-list", "name": "Lista encadeada", "description": "Nós",
    })
    assert record.alternate_name is None
    assert record.also_known_as == []
    assert record.search_keywords == []


def test_record_null_optional_fields_match_missing():
    record = DescriptorRecord.model_validate({
        "id": "linked-list",
        "name": "Lista encadeada",
        "description": "Nós",
        "alternateName": None,
        "alsoKnownAs": None,
        "searchKeywords": None,
    })
    assert record.alternate_name is None
    assert record.also_known_as == []
    assert record.search_keywords == []


def test_record_requires_description():
    with pytest.raises(ValidationError):
        DescriptorRecord.model_validate({"id": "array", "name": "Arranjo"})


def test_record_strips_name():
    record = DescriptorRecord.model_validate({"id": " array ", "name": "  Arranjo ", "description": "Itens"})
    assert record.id == "array"
    assert record.name == "Arranjo"


@pytest.mark.parametrize("name", ["", "   "])
def test_record_rejects_blank_name(name):
    with pytest.raises(ValidationError):
        DescriptorRecord.model_validate({"id": "array", "name": name, "description": "Itens"})


def test_record_rejects_missing_id():
    with pytest.raises(ValidationError):
        DescriptorRecord.model_validate({"name": "Arranjo", "description": "Itens"})


def test_record_rejects_unknown_keys():
    with pytest.raises(ValidationError):
        DescriptorRecord.model_validate({"id": "a", "name": "A", "description": "Itens", "aliases": ["x"]})


def test_record_converts_to_core_descriptor():
    descriptor = DescriptorRecord.model_validate({
        "id": "array", "name": "Arranjo", "description": "Itens", "alsoKnownAs": ["Vetor"],
    }).to_descriptor()
    assert descriptor.id == "array"
    assert descriptor.also_known_as == ("Vetor",)


# --- DescriptorResponse -------------------------------------------------------

def test_response_renders_display_name():
    resp = DescriptorResponse.from_descriptor(DATA_STRUCTURE_DATA[1])
    assert resp.display_name == "Registro (Record)"
    assert resp.also_known_as == ["Struct", "Structure", "Estrutura"]


def test_response_without_alternate_name():
    resp = DescriptorResponse.from_descriptor(DATA_STRUCTURE_DATA[2])
    assert resp.display_name == "Lista encadeada"
    assert resp.alternate_name is None
