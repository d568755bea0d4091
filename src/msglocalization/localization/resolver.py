"""Message key composition, fallback search and interpolation.

Resolution pipeline used by MsgLocalization.t():

1. compose_message_key() folds the call options into a suffixed key and a
   variable mapping. Options are told apart structurally:
       Mapping            -> variable bindings (later keys win)
       Gender             -> 'Female' / 'Male' / 'Other' suffix
       PluralRuleSelector -> title-cased CLDR category suffix, binds 'number'
       str                -> free-form suffix, first letter uppercased
   Suffix order is: string modifiers (argument order), gender, plural.
2. find_template() walks the fallback chain over one store snapshot.
3. interpolate() substitutes ``$name`` tokens and unescapes ``$$``.

None of these functions raise on bad input; failures degrade to
placeholders and are logged.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING

from msglocalization.constants import UNBOUND_VARIABLE
from msglocalization.enums import Gender
from msglocalization.localization.store import lookup_message
from msglocalization.runtime.plural_rules import PluralRule, resolve_plural_rule

if TYPE_CHECKING:
    from msglocalization.identity import Locale
    from msglocalization.localization.types import AssetTree

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Option types
    "PluralRuleSelector",
    "MessageOption",
    # Pipeline
    "ComposedMessage",
    "compose_message_key",
    "find_template",
    "interpolate",
]

logger = logging.getLogger(__name__)

# $$ or $name, name = letters, digits, underscore, hyphen
_TOKEN_PATTERN = re.compile(r"\$(\$|[A-Za-z0-9_-]+)")

# Bound to the selector's value whenever a PluralRuleSelector is given
PLURAL_VARIABLE = "number"


@dataclass(frozen=True, slots=True)
class PluralRuleSelector:
    """Plural-category modifier for message lookup.

    Attributes:
        rule: Callable returning the CLDR category of a number. Babel's
            ``Locale.plural_form`` and ``babel.plural.PluralRule`` qualify.
        value: The number to categorize; also bound as ``$number``.

    Example:
        >>> from babel import Locale
        >>> selector = PluralRuleSelector(Locale.parse("en").plural_form, 1)
        >>> selector.category()
        'one'
    """

    rule: PluralRule
    value: int | float | Decimal

    def category(self) -> str:
        """CLDR category of ``value`` under ``rule``."""
        return self.rule(self.value)

    @classmethod
    def for_locales(
        cls,
        locales: Iterable[str | Locale],
        value: int | float | Decimal,
    ) -> PluralRuleSelector:
        """Selector using the plural rules of the first locale Babel knows.

        Args:
            locales: Locales in preference order (e.g., the current locale
                sequence of a MsgLocalization)
            value: Number to categorize
        """
        return cls(rule=resolve_plural_rule(str(locale) for locale in locales), value=value)


type MessageOption = Mapping[str, object] | Gender | PluralRuleSelector | str
"""Anything accepted in the variadic options of MsgLocalization.t()."""


@dataclass(frozen=True, slots=True)
class ComposedMessage:
    """Suffixed lookup key plus the variables to interpolate.

    Attributes:
        key: Message key with all suffixes applied
        variables: Variable name -> value (stringified on interpolation)
    """

    key: str
    variables: Mapping[str, object] = field(default_factory=dict)

    @property
    def segments(self) -> tuple[str, ...]:
        """Key split on '.' for tree lookup."""
        return tuple(self.key.split("."))


def _capitalize_first(text: str) -> str:
    """Uppercase the first character only ('one' -> 'One', 'formal' -> 'Formal')."""
    return text[:1].upper() + text[1:]


def _plural_suffix(selector: PluralRuleSelector) -> str:
    try:
        category = selector.category()
    except (ArithmeticError, TypeError, ValueError) as e:
        logger.warning(
            "Plural rule failed for value %r: %s. Using category 'other'", selector.value, e
        )
        category = "other"
    return _capitalize_first(str(category))


def compose_message_key(key: str, options: Iterable[object]) -> ComposedMessage:
    """Fold message options into a suffixed key and variable bindings.

    Args:
        key: Dotted message key
        options: Mix of mappings, Gender, PluralRuleSelector and str

    Returns:
        ComposedMessage with the suffixed key and merged variables

    Example:
        >>> composed = compose_message_key("inbox", [{"user": "Sam"}, Gender.FEMALE])
        >>> composed.key, dict(composed.variables)
        ('inboxFemale', {'user': 'Sam'})
    """
    variables: dict[str, object] = {}
    modifiers: list[str] = []
    gender: Gender | None = None
    plural: PluralRuleSelector | None = None

    for option in options:
        match option:
            case Gender():
                gender = option
            case PluralRuleSelector():
                plural = option
            case str():
                modifiers.append(_capitalize_first(option))
            case Mapping():
                for name, value in option.items():
                    variables[str(name)] = value
            case _:
                logger.warning(
                    "Ignoring unsupported message option of type %s for '%s'",
                    type(option).__name__,
                    key,
                )

    suffixed = key + "".join(modifiers)
    if gender is not None:
        suffixed += gender.suffix
    if plural is not None:
        suffixed += _plural_suffix(plural)
        variables[PLURAL_VARIABLE] = plural.value

    return ComposedMessage(key=suffixed, variables=variables)


def find_template(
    trees: Mapping[Locale, AssetTree],
    chain: Sequence[Locale],
    segments: Sequence[str],
) -> tuple[str, Locale] | None:
    """Find the first locale in ``chain`` whose tree holds a string at ``segments``.

    Returns:
        (template, locale) or None if no locale in the chain has the key
    """
    for locale in chain:
        template = lookup_message(trees.get(locale), segments)
        if template is not None:
            return template, locale
    return None


def interpolate(template: str, variables: Mapping[str, object]) -> str:
    """Substitute ``$name`` tokens and unescape ``$$``.

    Unbound variables render as the literal text 'undefined'. A '$' not
    followed by token characters is left as-is.

    Example:
        >>> interpolate("Hello $name, $$5 off", {"name": "Sam"})
        'Hello Sam, $5 off'
        >>> interpolate("Hi $who", {})
        'Hi undefined'
    """

    def substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        if name == "$":
            return "$"
        if name not in variables:
            return UNBOUND_VARIABLE
        return str(variables[name])

    return _TOKEN_PATTERN.sub(substitute, template)
