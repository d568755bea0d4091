"""Enumerations for msglocalization type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class TextDirection(StrEnum):
    """Writing direction of a language.

    StrEnum provides automatic string conversion:
    str(TextDirection.LEFT_TO_RIGHT) == "leftToRight"
    """

    LEFT_TO_RIGHT = "leftToRight"
    """Latin, Cyrillic, CJK and most other scripts."""

    RIGHT_TO_LEFT = "rightToLeft"
    """Arabic, Hebrew, Persian, Urdu, ..."""


class Gender(StrEnum):
    """Grammatical gender selector for message lookup.

    Passing a Gender to MsgLocalization.t() appends its suffix to the
    message key before lookup: t("greeting", Gender.FEMALE) looks up
    "greetingFemale".
    """

    FEMALE = "female"
    MALE = "male"
    OTHER = "other"

    @property
    def suffix(self) -> str:
        """Key suffix for this gender ("Female", "Male", "Other")."""
        return self.value.capitalize()


class AssetTransport(StrEnum):
    """Transport used to fetch JSON asset documents.

    Values match the ``loadAssetsVia`` configuration key.
    """

    HTTP = "http"
    """HTTP GET returning parsed JSON (default)."""

    FILE_SYSTEM = "fileSystem"
    """Read and parse a file from the local filesystem."""


class LoadStatus(StrEnum):
    """Outcome of fetching a single asset document.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Document fetched and decoded."""

    NOT_FOUND = "not_found"
    """Document does not exist at the derived path."""

    ERROR = "error"
    """Transport failure, invalid JSON, or empty content."""


__all__ = [
    "AssetTransport",
    "Gender",
    "LoadStatus",
    "TextDirection",
]
