"""Payload key conventions for ActiveModel::Serializers backends.

Client side (camelCase)           Server side (underscored)
- model `famousPerson`            root key `famous_person` / `famous_people`
- attribute `firstName`           `first_name`
- belongs-to `occupation`         `occupation_id`
- has-many `people`               `person_ids`

Sideloaded example accepted by `normalize_payload`:

    {
      "people": [{"id": 1, "first_name": "Barack", "occupation_id": 1}],
      "occupations": [{"id": 1, "name": "President", "person_ids": [1]}]
    }
"""

from __future__ import annotations

from typing import Any, Literal, Mapping

from core.domain.errors import InvalidArgumentError, MalformedErrorPayload
from core.inflector import Inflector, default_inflector
from core.strings import camelize, decamelize, underscore

RelationshipKind = Literal["belongs_to", "has_many"]

_ID_SUFFIX = "_id"
_IDS_SUFFIX = "_ids"


class ActiveModelSerializer:
    """Translate record dicts to and from underscored payloads."""

    def __init__(self, inflector: Inflector | None = None) -> None:
        self.inflector = inflector or default_inflector

    def payload_key_for_type(self, model_name: str) -> str:
        """`famousPerson` -> `famous_person`."""

        return underscore(decamelize(model_name))

    def model_name_for_payload_key(self, key: str) -> str:
        """`famous_people` / `famous_person` -> `famousPerson`."""

        return camelize(self.inflector.singularize(key))

    def key_for_attribute(self, attr: str) -> str:
        return underscore(decamelize(attr))

    def key_for_relationship(self, relationship: str, kind: RelationshipKind) -> str:
        key = underscore(decamelize(relationship))
        if kind == "belongs_to":
            return key + _ID_SUFFIX
        if kind == "has_many":
            return self.inflector.singularize(key) + _IDS_SUFFIX
        raise InvalidArgumentError(f"unknown relationship kind: {kind!r}")

    def serialize(
        self,
        model_name: str,
        attributes: Mapping[str, Any],
        relationships: Mapping[str, Any] | None = None,
        *,
        include_root: bool = True,
    ) -> dict[str, Any]:
        """Build a request body.

        `relationships` maps a relationship name to an id (belongs-to) or a
        list of ids (has-many); the kind is inferred from the value.
        """

        data: dict[str, Any] = {self.key_for_attribute(k): v for k, v in attributes.items()}
        for name, value in (relationships or {}).items():
            kind: RelationshipKind = "has_many" if isinstance(value, (list, tuple)) else "belongs_to"
            data[self.key_for_relationship(name, kind)] = list(value) if kind == "has_many" else value

        if not include_root:
            return data
        return {self.payload_key_for_type(model_name): data}

    def normalize_record(self, record: Mapping[str, Any]) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for key, value in record.items():
            if key.endswith(_IDS_SUFFIX) and isinstance(value, list):
                name = self.inflector.pluralize(key[: -len(_IDS_SUFFIX)])
                out[camelize(name)] = value
            elif key.endswith(_ID_SUFFIX):
                out[camelize(key[: -len(_ID_SUFFIX)])] = value
            else:
                out[camelize(key)] = value
        return out

    def normalize_payload(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        """Group every root key of a response by model name.

        Singular roots (`famous_person: {...}`) and plural roots
        (`people: [...]`) both end up as a list under the model name. `meta`
        is passed through untouched.
        """

        out: dict[str, Any] = {}
        for key, value in payload.items():
            if key == "meta":
                out["meta"] = value
                continue
            records = value if isinstance(value, list) else [value]
            model_name = self.model_name_for_payload_key(key)
            out.setdefault(model_name, []).extend(self.normalize_record(r) for r in records)
        return out

    def extract_errors(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        """Camelize the field names of an `errors` hash (`first_name` -> `firstName`).

        Raises `MalformedErrorPayload` when `errors` is missing or not a mapping.
        """

        errors = payload.get("errors") if isinstance(payload, Mapping) else None
        if not isinstance(errors, Mapping):
            raise MalformedErrorPayload("expected an 'errors' mapping", payload=payload)
        return {camelize(field): messages for field, messages in errors.items()}
