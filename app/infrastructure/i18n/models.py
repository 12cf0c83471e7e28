"""Translation models for i18n system.

Defines core data structures for catalogs, source trees and the variable
shapes accepted when rendering a message.
"""

import re
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple, Union

from infrastructure.i18n.exceptions import InvalidLocaleError

KEY_SEPARATOR = "."

_LOCALE_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


def validate_locale(locale: str) -> str:
    """Ensure a locale identifier is safe to use as a storage name.

    Args:
        locale: Locale identifier (e.g., "en", "fr", "pt_BR").

    Returns:
        The identifier unchanged.

    Raises:
        InvalidLocaleError: If the identifier contains anything other than
            letters, digits, underscores or hyphens.
    """
    if not isinstance(locale, str) or not _LOCALE_PATTERN.match(locale):
        raise InvalidLocaleError(str(locale))
    return locale


def join_key(*parts: str) -> str:
    """Join key segments with the dotted-key separator, skipping empty ones."""
    return KEY_SEPARATOR.join(part for part in parts if part)


def flatten_messages(data: Mapping[str, Any], prefix: str = "") -> Dict[str, Any]:
    """Flatten nested mappings into a single dotted-key mapping.

    Args:
        data: Possibly nested mapping.
        prefix: Dotted prefix for every produced key.

    Returns:
        Dict of dotted key -> leaf value. Leaf values are returned as-is.
    """
    flat: Dict[str, Any] = {}
    for key, value in data.items():
        dotted = join_key(prefix, str(key))
        if isinstance(value, Mapping):
            flat.update(flatten_messages(value, dotted))
        else:
            flat[dotted] = value
    return flat


@dataclass(frozen=True)
class Catalog:
    """Immutable merged translations for a single locale.

    Keys are dotted paths (e.g., "auth.failed", "admin.users.created") and
    values are message templates.

    Attributes:
        locale: Locale identifier this catalog is for.
        messages: Read-only mapping of dotted key -> template.
        built_at: Timestamp (ISO 8601) when the catalog was built or loaded.
    """

    locale: str
    messages: Mapping[str, str] = field(default_factory=dict)
    built_at: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))

    def get(self, key: str) -> Optional[str]:
        """Retrieve a template by dotted key.

        Args:
            key: Dotted key (e.g., "auth.failed").

        Returns:
            Template string, or None if not found.
        """
        return self.messages.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.messages

    def __len__(self) -> int:
        return len(self.messages)

    def __iter__(self) -> Iterator[str]:
        return iter(self.messages)

    def to_dict(self) -> Dict[str, str]:
        """Return a mutable copy of the messages, preserving key order."""
        return dict(self.messages)

    @classmethod
    def from_mapping(
        cls,
        locale: str,
        data: Mapping[str, Any],
        built_at: Optional[str] = None,
    ) -> "Catalog":
        """Create a Catalog from a flat or nested mapping.

        Nested objects are flattened to dotted keys and leaf values are
        converted to strings.

        Args:
            locale: Locale identifier.
            data: Flat (dotted) or nested mapping of messages.
            built_at: Optional timestamp.

        Returns:
            Catalog instance.
        """
        messages = {
            key: value if isinstance(value, str) else str(value)
            for key, value in flatten_messages(data).items()
        }
        return cls(locale=locale, messages=messages, built_at=built_at)


@dataclass(frozen=True)
class SourceEntry:
    """One entry returned by a source enumerator.

    Attributes:
        name: Entry name (directory name or fragment file name).
        is_segment: True for namespace segments (directories).
    """

    name: str
    is_segment: bool


@dataclass(frozen=True)
class Fragment:
    """Leaf of a locale source tree.

    Attributes:
        name: Fragment name including its format suffix (e.g., "auth.yml").
        locator: Locator handed to the fragment reader.
    """

    name: str
    locator: Any


@dataclass(frozen=True)
class Segment:
    """Namespace-contributing node of a locale source tree.

    The root segment of a locale has an empty name and contributes no prefix.

    Attributes:
        name: Segment name, used as one dotted-key part.
        locator: Locator of the segment in the source tree.
        children: Child segments and fragments in enumeration order.
    """

    name: str
    locator: Any
    children: Tuple[Union["Segment", Fragment], ...] = ()


SourceNode = Union[Segment, Fragment]

Scalar = Union[str, int, float, Decimal]


@dataclass(frozen=True)
class VariableMap:
    """Named placeholder values."""

    values: Mapping[str, Any]


@dataclass(frozen=True)
class ScalarVariable:
    """A single unnamed value passed instead of a mapping."""

    value: Scalar


@dataclass(frozen=True)
class NoVariables:
    """No variables were supplied."""


Variables = Union[VariableMap, ScalarVariable, NoVariables]


def as_variables(raw: Any) -> Variables:
    """Normalize caller-supplied variables into the Variables variant.

    Args:
        raw: A mapping, a single scalar, None, or an existing variant.

    Returns:
        VariableMap, ScalarVariable or NoVariables.
    """
    if isinstance(raw, (VariableMap, ScalarVariable, NoVariables)):
        return raw
    if raw is None:
        return NoVariables()
    if isinstance(raw, Mapping):
        return VariableMap(values=dict(raw))
    return ScalarVariable(value=raw)


def is_number(value: Any) -> bool:
    """Check whether a value is numeric (booleans excluded)."""
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)
