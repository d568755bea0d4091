"""Exception hierarchy for msglocalization.

Only configuration errors are meant to reach application code: they signal
caller misuse that is discoverable before deployment. Asset fetch errors are
raised by transports and converted into a ``False`` load result by the
engine; identity failures and lookup misses never raise at all.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "AssetFetchError",
    "AssetNotFoundError",
    "ConfigurationError",
    "LocalizationError",
    "UnsupportedLocaleError",
]


class LocalizationError(Exception):
    """Base exception for all msglocalization errors."""


class ConfigurationError(LocalizationError, ValueError):
    """Invalid configuration or misuse of the engine.

    Examples:
    - load() without a locale and without a configured default
    - A fallback locale that is not a supported locale
    - Malformed asset options
    """


class UnsupportedLocaleError(ConfigurationError):
    """Requested locale is not in the supported-locales set.

    Attributes:
        locale: The requested locale (Locale instance or the raw text)
    """

    def __init__(self, locale: object) -> None:
        """Initialize UnsupportedLocaleError.

        Args:
            locale: The locale that was requested
        """
        super().__init__(f"Unsupported locale: {locale}")
        self.locale = locale


class AssetFetchError(LocalizationError):
    """An asset document could not be fetched or decoded.

    Attributes:
        path: Path or URL of the document
    """

    def __init__(self, message: str, *, path: str) -> None:
        """Initialize AssetFetchError.

        Args:
            message: Human-readable failure description
            path: Path or URL of the document
        """
        super().__init__(message)
        self.path = path


class AssetNotFoundError(AssetFetchError):
    """The asset document does not exist (file missing, HTTP 404)."""
