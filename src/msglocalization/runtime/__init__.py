"""Runtime helpers backed by CLDR data.

Python 3.13+.
"""

from .plural_rules import (
    PluralRule,
    default_plural_rule,
    resolve_plural_rule,
    select_plural_category,
)

__all__ = [
    "PluralRule",
    "default_plural_rule",
    "resolve_plural_rule",
    "select_plural_category",
]
