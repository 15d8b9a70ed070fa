"""
Tests for core.inflector.

Covers:
  1. Rails default plural/singular rules
  2. Irregulars and uncountables (including first-letter case)
  3. Only the last word of compound names is inflected
  4. Registering rules on one instance never affects another
  5. Settings-driven irregulars/uncountables
"""

from __future__ import annotations

import pytest

from core.config import AppSettings
from core.inflector import Inflector, pluralize, singularize


@pytest.mark.parametrize(
    "singular, plural",
    [
        ("occupation", "occupations"),
        ("person", "people"),
        ("child", "children"),
        ("status", "statuses"),
        ("quiz", "quizzes"),
        ("octopus", "octopi"),
        ("wife", "wives"),
        ("half", "halves"),
        ("category", "categories"),
        ("box", "boxes"),
        ("matrix", "matrices"),
        ("mouse", "mice"),
        ("ox", "oxen"),
        ("address", "addresses"),
    ],
)
def test_pluralize_defaults(singular, plural):
    assert pluralize(singular) == plural


@pytest.mark.parametrize(
    "plural, singular",
    [
        ("occupations", "occupation"),
        ("people", "person"),
        ("categories", "category"),
        ("statuses", "status"),
        ("matrices", "matrix"),
        ("analyses", "analysis"),
        ("wives", "wife"),
        ("news", "news"),
        ("buses", "bus"),
    ],
)
def test_singularize_defaults(plural, singular):
    assert singularize(plural) == singular


@pytest.mark.parametrize("word", ["sheep", "equipment", "police", "series", "fish"])
def test_uncountables_are_untouched(word):
    assert pluralize(word) == word
    assert singularize(word) == word


def test_irregular_plural_is_idempotent():
    assert pluralize("people") == "people"
    assert singularize("person") == "person"


def test_only_last_word_is_inflected():
    assert pluralize("famous_person") == "famous_people"
    assert pluralize("famous-person") == "famous-people"
    assert pluralize("famousPerson") == "famousPeople"
    assert pluralize("black_sheep") == "black_sheep"
    assert singularize("famous_people") == "famous_person"


def test_irregular_keeps_leading_capital():
    assert pluralize("Person") == "People"
    assert singularize("People") == "Person"


def test_blank_input_is_returned_as_is():
    assert pluralize("") == ""
    assert pluralize("   ") == "   "


class TestRegistration:
    def test_irregular_registration_is_per_instance(self):
        custom = Inflector()
        custom.irregular("formula", "formulae")

        assert custom.pluralize("formula") == "formulae"
        assert custom.singularize("formulae") == "formula"
        assert Inflector().pluralize("formula") == "formulas"
        assert pluralize("formula") == "formulas"

    def test_custom_rule_wins_over_defaults(self):
        custom = Inflector()
        custom.plural(r"(camp)us$", r"\1i")
        assert custom.pluralize("campus") == "campi"

    def test_uncountable_registration(self):
        custom = Inflector()
        custom.uncountable("Advice")
        assert custom.is_uncountable("advice")
        assert custom.pluralize("advice") == "advice"
        assert pluralize("advice") == "advices"

    def test_empty_inflector_has_no_rules(self):
        bare = Inflector(load_defaults=False)
        assert bare.pluralize("person") == "person"

    def test_from_settings(self):
        settings = AppSettings(
            _env_file=None,
            irregular_plurals={"formula": "formulae"},
            uncountable_words=["advice"],
        )
        inflector = Inflector.from_settings(settings)
        assert inflector.pluralize("formula") == "formulae"
        assert inflector.pluralize("advice") == "advice"
        assert inflector.pluralize("person") == "people"
