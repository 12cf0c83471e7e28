"""Source tree access: enumeration and fragment readers.

Defines the contracts the catalog builder consumes (a source enumerator and
fragment readers) and provides filesystem, YAML and JSON implementations.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import yaml

from infrastructure.i18n.exceptions import FragmentParseError, SourceUnavailableError
from infrastructure.i18n.models import Fragment, Segment, SourceEntry, join_key
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class SourceEnumerator(ABC):
    """Abstract base for source tree enumerators."""

    @abstractmethod
    def list(self, locator: Any) -> Sequence[SourceEntry]:
        """List the direct children of a segment.

        Args:
            locator: Locator of the segment to list.

        Returns:
            Ordered sequence of SourceEntry.

        Raises:
            SourceUnavailableError: If the locator cannot be enumerated.
        """
        pass

    @abstractmethod
    def child(self, locator: Any, name: str) -> Any:
        """Return the locator of a named child of a segment."""
        pass


class FileSystemEnumerator(SourceEnumerator):
    """Enumerates a directory tree on the local filesystem.

    Entries are returned in lexicographic order so that repeated builds of
    an unchanged tree merge colliding keys identically on every platform.
    Hidden entries (names starting with ".") are skipped.
    """

    def list(self, locator: Any) -> Sequence[SourceEntry]:
        path = Path(locator)
        if not path.is_dir():
            raise SourceUnavailableError(path, "not a directory")
        try:
            children = sorted(path.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise SourceUnavailableError(path, str(e)) from e

        return [
            SourceEntry(name=child.name, is_segment=child.is_dir())
            for child in children
            if not child.name.startswith(".")
        ]

    def child(self, locator: Any, name: str) -> Path:
        return Path(locator) / name


class FragmentReader(ABC):
    """Abstract base for fragment readers.

    A reader turns one fragment into a flat mapping of leaf key -> template.

    Attributes:
        suffixes: File suffixes (lowercase, with leading dot) this reader handles.
    """

    suffixes: Tuple[str, ...] = ()

    def supports(self, name: str) -> bool:
        """Check whether this reader handles a fragment name."""
        return self.suffix_of(name) is not None

    def suffix_of(self, name: str) -> Optional[str]:
        """Return the matching format suffix of a fragment name, if any."""
        lowered = name.lower()
        for suffix in self.suffixes:
            if lowered.endswith(suffix) and len(name) > len(suffix):
                return name[-len(suffix) :]
        return None

    def read(self, locator: Any) -> Dict[str, str]:
        """Read a fragment into a flat key -> template mapping.

        Args:
            locator: Fragment locator.

        Returns:
            Dict of leaf key -> template string.

        Raises:
            FragmentParseError: If the fragment cannot be read or parsed.
        """
        data = self._decode(locator)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise FragmentParseError(locator, "expected a mapping at top level")

        messages: Dict[str, str] = {}
        self._collect(locator, data, "", messages)
        return messages

    @abstractmethod
    def _decode(self, locator: Any) -> Any:
        """Decode the raw fragment content."""
        pass

    def _collect(
        self,
        locator: Any,
        data: Dict[Any, Any],
        prefix: str,
        messages: Dict[str, str],
    ) -> None:
        for raw_key, value in data.items():
            key = str(raw_key).strip() if raw_key is not None else ""
            if not key:
                raise FragmentParseError(locator, "empty translation key")
            dotted = join_key(prefix, key)
            if isinstance(value, dict):
                self._collect(locator, value, dotted, messages)
            elif isinstance(value, str):
                messages[dotted] = value
            elif isinstance(value, bool):
                messages[dotted] = "true" if value else "false"
            elif isinstance(value, (int, float)):
                messages[dotted] = str(value)
            else:
                raise FragmentParseError(
                    locator,
                    f"unsupported value for key '{dotted}': {type(value).__name__}",
                )


class YAMLFragmentReader(FragmentReader):
    """Reader for YAML fragments (*.yml, *.yaml).

    Expected format:
        key1: message1
        group:
          key2: message2
    """

    suffixes = (".yml", ".yaml")

    def _decode(self, locator: Any) -> Any:
        try:
            with open(locator, "r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(locator), error=str(e))
            raise FragmentParseError(locator, str(e)) from e
        except (OSError, UnicodeDecodeError) as e:
            raise FragmentParseError(locator, str(e)) from e


class JSONFragmentReader(FragmentReader):
    """Reader for JSON fragments (*.json)."""

    suffixes = (".json",)

    def _decode(self, locator: Any) -> Any:
        try:
            with open(locator, "r", encoding="utf-8") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FragmentParseError(locator, str(e)) from e
        if not content.strip():
            return None
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            logger.error("json_parse_error", file=str(locator), error=str(e))
            raise FragmentParseError(locator, str(e)) from e


class ReaderRegistry:
    """Selects the fragment reader for a fragment name by its suffix."""

    def __init__(self, readers: Optional[Iterable[FragmentReader]] = None):
        self.readers: List[FragmentReader] = (
            list(readers)
            if readers is not None
            else [YAMLFragmentReader(), JSONFragmentReader()]
        )

    def reader_for(self, name: str) -> Optional[FragmentReader]:
        """Return the first reader supporting the name, or None."""
        for reader in self.readers:
            if reader.supports(name):
                return reader
        return None

    def supports(self, name: str) -> bool:
        return self.reader_for(name) is not None

    def strip_suffix(self, name: str) -> str:
        """Strip the format suffix from a fragment name.

        Only the suffix is removed, so "a.b.yml" becomes "a.b".
        """
        reader = self.reader_for(name)
        if reader is None:
            return name
        suffix = reader.suffix_of(name) or ""
        return name[: len(name) - len(suffix)]


def scan_tree(
    root: Any,
    enumerator: SourceEnumerator,
    registry: ReaderRegistry,
    name: str = "",
) -> Segment:
    """Build the explicit source tree of one locale.

    Entries no registered reader supports are skipped.

    Args:
        root: Locator of the segment to scan.
        enumerator: Source enumerator.
        registry: Reader registry used to recognize fragments.
        name: Name of the segment being scanned ("" for a locale root).

    Returns:
        Segment with its children in enumeration order.

    Raises:
        SourceUnavailableError: If any segment cannot be enumerated.
    """
    children = []
    for entry in enumerator.list(root):
        locator = enumerator.child(root, entry.name)
        if entry.is_segment:
            children.append(scan_tree(locator, enumerator, registry, entry.name))
        elif registry.supports(entry.name):
            children.append(Fragment(name=entry.name, locator=locator))
        else:
            logger.debug("skipped_unsupported_entry", entry=str(locator))
    return Segment(name=name, locator=root, children=tuple(children))
