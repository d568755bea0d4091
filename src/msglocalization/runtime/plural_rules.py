"""CLDR plural rules implementation using Babel.

Provides plural category selection for all locales using Babel's CLDR data.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from collections.abc import Callable, Iterable
from decimal import Decimal

from babel.core import UnknownLocaleError

from msglocalization.locale_utils import get_babel_locale

__all__ = ["PluralRule", "default_plural_rule", "resolve_plural_rule", "select_plural_category"]

type PluralRule = Callable[[int | float | Decimal], str]
"""Maps a number to its CLDR category ('zero', 'one', 'two', 'few', 'many', 'other')."""


def default_plural_rule(n: int | float | Decimal) -> str:
    """Fallback rule for unknown locales: n == 1 -> 'one', else 'other'."""
    return "one" if abs(n) == 1 else "other"


def resolve_plural_rule(locales: Iterable[str]) -> PluralRule:
    """Pick the plural rule of the first locale Babel knows.

    Mirrors how platform plural-rule objects accept a locale list and use
    the first supported entry.

    Args:
        locales: Locale codes in preference order (e.g., ['pt-BR', 'en-US'])

    Returns:
        Babel's plural rule for the first known locale, or
        default_plural_rule if none is known

    Example:
        >>> rule = resolve_plural_rule(["xx", "ru-RU"])
        >>> rule(5)
        'many'
    """
    for locale in locales:
        try:
            return get_babel_locale(locale).plural_form
        except (UnknownLocaleError, ValueError):
            continue
    return default_plural_rule


def select_plural_category(n: int | float | Decimal, locale: str) -> str:
    """Select CLDR plural category for number using Babel's CLDR data.

    Args:
        n: Number to categorize
        locale: Locale code (e.g., "lv_LV", "en_US", "ar-SA")

    Returns:
        Plural category: "zero", "one", "two", "few", "many", or "other"

    Examples:
        >>> select_plural_category(1, "en_US")
        'one'
        >>> select_plural_category(5, "ru_RU")
        'many'
        >>> select_plural_category(42, "ja_JP")
        'other'

    If locale parsing fails, falls back to simple one/other rule.
    """
    return resolve_plural_rule((locale,))(n)
