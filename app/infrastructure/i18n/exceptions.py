"""Custom exceptions for the i18n system.

Build-time failures (missing source tree, malformed fragment, strict key
collision) abort the build of one locale and surface to the caller.
Resolve-time anomalies never raise: a missing key or a missing placeholder
value degrade to visible text instead.
"""

from typing import Any, Optional


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            catalog = builder.build(Path("lang/en"))
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class SourceUnavailableError(I18nError):
    """Raised when a locale source root is missing or cannot be enumerated.

    Example:
        >>> builder.build(Path("lang/xx"))
        Traceback (most recent call last):
        ...
        SourceUnavailableError: Source 'lang/xx' unavailable: not found
    """

    def __init__(self, locator: Any, reason: str):
        self.locator = locator
        self.reason = reason
        super().__init__(f"Source '{locator}' unavailable: {reason}")


class FragmentParseError(I18nError):
    """Raised when a fragment reader cannot parse a fragment.

    The whole locale build aborts; other locales are not affected.
    """

    def __init__(self, locator: Any, reason: str):
        self.locator = locator
        self.reason = reason
        super().__init__(f"Failed to parse fragment '{locator}': {reason}")


class KeyCollisionError(I18nError):
    """Raised in strict mode when two fragments produce the same dotted key."""

    def __init__(self, key: str, locator: Any):
        self.key = key
        self.locator = locator
        super().__init__(f"Duplicate translation key '{key}' from '{locator}'")


class InvalidLocaleError(I18nError, ValueError):
    """Raised when a locale identifier is not safe to address storage with."""

    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(f"Invalid locale identifier: {locale!r}")


class CatalogNotFoundError(I18nError):
    """Raised when no persisted catalog exists for a locale."""

    def __init__(self, locale: str, location: Optional[Any] = None):
        self.locale = locale
        self.location = location
        super().__init__(f"No catalog found for locale '{locale}'")


class CatalogFormatError(I18nError):
    """Raised when a persisted catalog cannot be decoded."""

    def __init__(self, locale: str, reason: str):
        self.locale = locale
        self.reason = reason
        super().__init__(f"Malformed catalog for locale '{locale}': {reason}")
