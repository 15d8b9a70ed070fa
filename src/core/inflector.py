"""English inflection (pluralize/singularize) with an extensible rule set.

The default rules follow the Rails/ActiveSupport inflections, which is what a
Rails backend uses to name its resources. Callers register domain-specific
words on an `Inflector` instance:

    inflector = Inflector()
    inflector.irregular("formula", "formulae")
    inflector.uncountable("advice")

Only the last word of an underscored, dashed, spaced or camelized string is
inflected (`famous_person` -> `famous_people`, `famousPerson` ->
`famousPeople`).
"""

from __future__ import annotations

import re
from typing import Iterable

from core.config import AppSettings

Rule = tuple[re.Pattern[str], str]

DEFAULT_PLURALS: tuple[tuple[str, str], ...] = (
    (r"$", "s"),
    (r"s$", "s"),
    (r"^(ax|test)is$", r"\1es"),
    (r"(octop|vir)us$", r"\1i"),
    (r"(octop|vir)i$", r"\1i"),
    (r"(alias|status)$", r"\1es"),
    (r"(bu)s$", r"\1ses"),
    (r"(buffal|tomat)o$", r"\1oes"),
    (r"([ti])um$", r"\1a"),
    (r"([ti])a$", r"\1a"),
    (r"sis$", "ses"),
    (r"(?:([^f])fe|([lr])f)$", r"\1\2ves"),
    (r"(hive)$", r"\1s"),
    (r"([^aeiouy]|qu)y$", r"\1ies"),
    (r"(x|ch|ss|sh)$", r"\1es"),
    (r"(matr|vert|ind)(?:ix|ex)$", r"\1ices"),
    (r"^(m|l)ouse$", r"\1ice"),
    (r"^(m|l)ice$", r"\1ice"),
    (r"^(ox)$", r"\1en"),
    (r"^(oxen)$", r"\1"),
    (r"(quiz)$", r"\1zes"),
)

DEFAULT_SINGULARS: tuple[tuple[str, str], ...] = (
    (r"s$", ""),
    (r"(ss)$", r"\1"),
    (r"(n)ews$", r"\1ews"),
    (r"([ti])a$", r"\1um"),
    (r"((a)naly|(b)a|(d)iagno|(p)arenthe|(p)rogno|(s)ynop|(t)he)(sis|ses)$", r"\1sis"),
    (r"(^analy)(sis|ses)$", r"\1sis"),
    (r"([^f])ves$", r"\1fe"),
    (r"(hive)s$", r"\1"),
    (r"(tive)s$", r"\1"),
    (r"([lr])ves$", r"\1f"),
    (r"([^aeiouy]|qu)ies$", r"\1y"),
    (r"(s)eries$", r"\1eries"),
    (r"(m)ovies$", r"\1ovie"),
    (r"(x|ch|ss|sh)es$", r"\1"),
    (r"^(m|l)ice$", r"\1ouse"),
    (r"(bus)(es)?$", r"\1"),
    (r"(o)es$", r"\1"),
    (r"(shoe)s$", r"\1"),
    (r"(cris|test)(is|es)$", r"\1is"),
    (r"^(a)x[ie]s$", r"\1xis"),
    (r"(octop|vir)(us|i)$", r"\1us"),
    (r"(alias|status)(es)?$", r"\1"),
    (r"^(ox)en", r"\1"),
    (r"(vert|ind)ices$", r"\1ex"),
    (r"(matr)ices$", r"\1ix"),
    (r"(quiz)zes$", r"\1"),
    (r"(database)s$", r"\1"),
)

DEFAULT_IRREGULARS: tuple[tuple[str, str], ...] = (
    ("person", "people"),
    ("man", "men"),
    ("child", "children"),
    ("sex", "sexes"),
    ("move", "moves"),
    ("cow", "kine"),
    ("zombie", "zombies"),
)

DEFAULT_UNCOUNTABLES: tuple[str, ...] = (
    "equipment",
    "information",
    "rice",
    "money",
    "species",
    "series",
    "fish",
    "sheep",
    "jeans",
    "police",
)

_LAST_WORD_DASHED_RE = re.compile(r"^(.*[_/\s-])([^_/\s-]+)$")
_LAST_WORD_CAMELIZED_RE = re.compile(r"^(.+?)([A-Z][a-z\d]*)$")


def _compile(rule: str | re.Pattern[str]) -> re.Pattern[str]:
    if isinstance(rule, str):
        return re.compile(rule, re.IGNORECASE)
    return rule


def _split_last_word(word: str) -> tuple[str, str]:
    match = _LAST_WORD_DASHED_RE.match(word) or _LAST_WORD_CAMELIZED_RE.match(word)
    if match:
        return match.group(1), match.group(2)
    return "", word


class Inflector:
    """Ordered pluralization/singularization rules.

    Rules added later take precedence over earlier ones. Each instance owns its
    own copy of the rules, so registering words never leaks across instances.
    """

    def __init__(self, *, load_defaults: bool = True) -> None:
        self._plurals: list[Rule] = []
        self._singulars: list[Rule] = []
        self._irregular_plurals: dict[str, str] = {}
        self._irregular_singulars: dict[str, str] = {}
        self._uncountables: set[str] = set()

        if load_defaults:
            for rule, replacement in DEFAULT_PLURALS:
                self.plural(rule, replacement)
            for rule, replacement in DEFAULT_SINGULARS:
                self.singular(rule, replacement)
            for singular, plural in DEFAULT_IRREGULARS:
                self.irregular(singular, plural)
            self.uncountable(*DEFAULT_UNCOUNTABLES)

    @classmethod
    def from_settings(cls, settings: AppSettings | None = None) -> "Inflector":
        """Default rules plus the irregular/uncountable words from configuration."""

        settings = settings or AppSettings()
        inflector = cls()
        for singular, plural in settings.irregular_plurals.items():
            inflector.irregular(singular, plural)
        inflector.uncountable(*settings.uncountable_words)
        return inflector

    def plural(self, rule: str | re.Pattern[str], replacement: str) -> None:
        self._plurals.append((_compile(rule), replacement))

    def singular(self, rule: str | re.Pattern[str], replacement: str) -> None:
        self._singulars.append((_compile(rule), replacement))

    def irregular(self, singular: str, plural: str) -> None:
        singular, plural = singular.lower(), plural.lower()
        self._irregular_plurals[singular] = plural
        self._irregular_plurals[plural] = plural
        self._irregular_singulars[plural] = singular
        self._irregular_singulars[singular] = singular

    def uncountable(self, *words: str) -> None:
        self._uncountables.update(w.lower() for w in words)

    def is_uncountable(self, word: str) -> bool:
        return word.lower() in self._uncountables

    def pluralize(self, word: str) -> str:
        return self._inflect(word, self._plurals, self._irregular_plurals)

    def singularize(self, word: str) -> str:
        return self._inflect(word, self._singulars, self._irregular_singulars)

    def _inflect(self, word: str, rules: Iterable[Rule], irregulars: dict[str, str]) -> str:
        if not word or word.isspace():
            return word

        head, last = _split_last_word(word)
        if self.is_uncountable(word) or self.is_uncountable(last):
            return word

        replacement = irregulars.get(last.lower())
        if replacement is not None:
            if last[:1].isupper():
                replacement = replacement[:1].upper() + replacement[1:]
            return head + replacement

        for rule, substitution in reversed(list(rules)):
            if rule.search(last):
                return head + rule.sub(substitution, last, count=1)
        return word


default_inflector = Inflector()


def pluralize(word: str) -> str:
    return default_inflector.pluralize(word)


def singularize(word: str) -> str:
    return default_inflector.singularize(word)
