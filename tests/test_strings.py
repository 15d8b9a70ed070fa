from __future__ import annotations

import pytest

from core.strings import camelize, classify, decamelize, underscore


@pytest.mark.parametrize(
    "value, expected",
    [
        ("famousPerson", "famous_person"),
        ("occupation", "occupation"),
        ("innerHTML", "inner_html"),
        ("version2Update", "version2_update"),
        # Consecutive capitals are not split.
        ("APIKey", "apikey"),
    ],
)
def test_decamelize(value, expected):
    assert decamelize(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("famous_person", "famous_person"),
        ("famous-person", "famous_person"),
        ("famous   person", "famous_person"),
        ("famousPerson", "famous_person"),
        ("innerHTML", "inner_html"),
        ("famous - person", "famous_person"),
        ("famous--person", "famous_person"),
        ("famous_-person", "famous_person"),
        ("famous.person", "famous_person"),
        ("  famous person  ", "famous_person"),
        ("person_", "person"),
        ("_person", "person"),
        ("--", ""),
    ],
)
def test_underscore(value, expected):
    assert underscore(value) == expected


def test_camelize():
    assert camelize("famous_person") == "famousPerson"
    assert camelize("famous-person") == "famousPerson"
    assert camelize("FamousPerson") == "famousPerson"
    assert camelize("occupation_id") == "occupationId"
    assert camelize("famous.person") == "famousPerson"
    assert camelize("famous - person") == "famousPerson"


def test_classify():
    assert classify("famous_person") == "FamousPerson"
    assert classify("occupation") == "Occupation"
