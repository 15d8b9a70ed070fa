"""String casing helpers used to translate between model names and API keys.

Rules (fixed, no acronym detection):
- `decamelize` only splits where a lowercase letter or digit is followed by
  an uppercase letter, so `APIKey` becomes `apikey` and `famousPerson`
  becomes `famous_person`.
- `underscore` and `camelize` share one separator set: runs of `-`, `_`, `.`
  and whitespace. `underscore` collapses each run to a single `_` and drops
  leading/trailing separators.
"""

from __future__ import annotations

import re

_DECAMELIZE_RE = re.compile(r"([a-z\d])([A-Z])")
_UNDERSCORE_CAMEL_RE = re.compile(r"([a-z\d])([A-Z]+)")
_SEPARATORS = r"[-_.\s]+"
_UNDERSCORE_SEPARATOR_RE = re.compile(_SEPARATORS)
_CAMELIZE_SEPARATOR_RE = re.compile(_SEPARATORS + r"(.)?")
_CAMELIZE_HEAD_RE = re.compile(r"(^|/)([A-Z])")


def decamelize(value: str) -> str:
    """`famousPerson` -> `famous_person`."""

    return _DECAMELIZE_RE.sub(r"\1_\2", value).lower()


def underscore(value: str) -> str:
    """`famous-person`, ` famous - person `, `famousPerson` -> `famous_person`."""

    value = _UNDERSCORE_CAMEL_RE.sub(r"\1_\2", value)
    return _UNDERSCORE_SEPARATOR_RE.sub("_", value).strip("_").lower()


def camelize(value: str) -> str:
    """`famous_person`, `famous-person` -> `famousPerson`."""

    value = _CAMELIZE_SEPARATOR_RE.sub(lambda m: (m.group(1) or "").upper(), value)
    return _CAMELIZE_HEAD_RE.sub(lambda m: m.group(0).lower(), value)


def classify(value: str) -> str:
    """`famous_person` -> `FamousPerson`."""

    camel = camelize(value)
    return camel[:1].upper() + camel[1:]
