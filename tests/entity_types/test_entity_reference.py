from uuid import UUID

import pytest

from record_url_resolution.entity_types.entity_reference import EntityReference
from record_url_resolution.entity_types.output_slot import OutputSlot
from record_url_resolution.entity_types.parsed_url import ParsedUrl

ID = UUID("7d3f4a1e-2b6c-4f0a-9e51-0c8d2a6b1f33")
OTHER_ID = UUID("a0b1c2d3-e4f5-4a6b-8c7d-9e0f1a2b3c4d")


def test_equality_uses_both_fields():
    assert EntityReference("quote", ID) == EntityReference("quote", ID)
    assert EntityReference("quote", ID) != EntityReference("invoice", ID)
    assert EntityReference("quote", ID) != EntityReference("quote", OTHER_ID)


def test_reference_is_hashable_and_immutable():
    ref = EntityReference("quote", ID)
    assert {ref, EntityReference("quote", ID)} == {ref}
    with pytest.raises(AttributeError):
        ref.type_name = "account"


def test_to_dict_stringifies_id():
    assert EntityReference("account", ID).to_dict() == {
        "type_name": "account",
        "record_id": "7d3f4a1e-2b6c-4f0a-9e51-0c8d2a6b1f33",
    }


def test_parsed_url_is_frozen():
    parsed = ParsedUrl(raw_url="https://h/p?etc=1&id=x", type_code=1, record_id=ID)
    with pytest.raises(AttributeError):
        parsed.type_code = 2


def test_output_slots_are_the_closed_set():
    assert len(OutputSlot) == 10
    assert OutputSlot("device") is OutputSlot.DEVICE
