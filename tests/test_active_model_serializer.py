from __future__ import annotations

import pytest

from adapters.active_model_serializer import ActiveModelSerializer
from core.domain.errors import InvalidArgumentError, MalformedErrorPayload


@pytest.fixture
def serializer() -> ActiveModelSerializer:
    return ActiveModelSerializer()


def test_keys(serializer):
    assert serializer.payload_key_for_type("famousPerson") == "famous_person"
    assert serializer.key_for_attribute("firstName") == "first_name"
    assert serializer.key_for_relationship("occupation", "belongs_to") == "occupation_id"
    assert serializer.key_for_relationship("people", "has_many") == "person_ids"
    assert serializer.key_for_relationship("homeAddresses", "has_many") == "home_address_ids"


def test_unknown_relationship_kind(serializer):
    with pytest.raises(InvalidArgumentError):
        serializer.key_for_relationship("occupation", "has_one")  # type: ignore[arg-type]


def test_model_name_for_payload_key(serializer):
    assert serializer.model_name_for_payload_key("famous_people") == "famousPerson"
    assert serializer.model_name_for_payload_key("famous_person") == "famousPerson"
    assert serializer.model_name_for_payload_key("occupations") == "occupation"


def test_serialize_with_root(serializer):
    body = serializer.serialize(
        "famousPerson",
        {"firstName": "Barack", "lastName": "Obama"},
        {"occupation": 1},
    )
    assert body == {
        "famous_person": {
            "first_name": "Barack",
            "last_name": "Obama",
            "occupation_id": 1,
        }
    }


def test_serialize_without_root(serializer):
    body = serializer.serialize("occupation", {"name": "President"}, {"people": (1, 2)}, include_root=False)
    assert body == {"name": "President", "person_ids": [1, 2]}


def test_normalize_sideloaded_payload(serializer):
    payload = {
        "people": [
            {"id": 1, "first_name": "Barack", "last_name": "Obama", "occupation_id": 1},
        ],
        "occupations": [
            {"id": 1, "name": "President", "salary": 100000, "person_ids": [1]},
        ],
        "meta": {"total": 1},
    }

    assert serializer.normalize_payload(payload) == {
        "person": [{"id": 1, "firstName": "Barack", "lastName": "Obama", "occupation": 1}],
        "occupation": [{"id": 1, "name": "President", "salary": 100000, "people": [1]}],
        "meta": {"total": 1},
    }


def test_normalize_singular_root(serializer):
    payload = {"famous_person": {"id": 1, "first_name": "Barack"}}
    assert serializer.normalize_payload(payload) == {"famousPerson": [{"id": 1, "firstName": "Barack"}]}


def test_extract_errors(serializer):
    payload = {"errors": {"first_name": ["can't be blank"], "base": ["is locked"]}}
    assert serializer.extract_errors(payload) == {
        "firstName": ["can't be blank"],
        "base": ["is locked"],
    }


@pytest.mark.parametrize("payload", [{}, {"errors": None}, {"errors": ["first_name is blank"]}, None])
def test_extract_errors_rejects_malformed_payload(serializer, payload):
    with pytest.raises(MalformedErrorPayload):
        serializer.extract_errors(payload)
