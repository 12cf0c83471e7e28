"""Catalog builder.

Walks a per-locale source tree depth-first, reads every fragment and merges
the entries into one immutable Catalog keyed by dotted path.
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from infrastructure.i18n.exceptions import (
    FragmentParseError,
    InvalidLocaleError,
    KeyCollisionError,
    SourceUnavailableError,
)
from infrastructure.i18n.models import Catalog, Fragment, Segment, join_key
from infrastructure.i18n.persistence import validate_catalog_locale
from infrastructure.i18n.sources import (
    FileSystemEnumerator,
    ReaderRegistry,
    SourceEnumerator,
    scan_tree,
)
from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult

logger = get_module_logger()

DEFAULT_RESERVED_SEGMENTS = ("vendor",)


class CatalogBuilder:
    """Builds one Catalog per locale source root.

    The builder holds no per-build state; every call to build() owns its own
    accumulator, so one instance can build several locales concurrently.

    Attributes:
        enumerator: Source enumerator used to walk the tree.
        registry: Fragment readers, selected by fragment suffix.
        strict: Raise KeyCollisionError instead of overwriting duplicate keys.
    """

    def __init__(
        self,
        enumerator: Optional[SourceEnumerator] = None,
        registry: Optional[ReaderRegistry] = None,
        strict: bool = False,
    ):
        self.enumerator = enumerator or FileSystemEnumerator()
        self.registry = registry or ReaderRegistry()
        self.strict = strict

    def build(self, locale_source_root: Any, locale: str = "") -> Catalog:
        """Build the catalog for one locale source root.

        Args:
            locale_source_root: Locator of the locale's root segment.
            locale: Locale identifier recorded on the catalog.

        Returns:
            Catalog with one entry per fragment leaf key.

        Raises:
            SourceUnavailableError: If the root is missing or not enumerable.
            FragmentParseError: If any fragment cannot be parsed.
            KeyCollisionError: In strict mode, if two fragments share a key.
        """
        tree = scan_tree(locale_source_root, self.enumerator, self.registry)
        messages: Dict[str, str] = {}
        self._walk(tree, "", messages)

        logger.info(
            "built_catalog",
            locale=locale,
            source=str(locale_source_root),
            key_count=len(messages),
        )
        return Catalog(
            locale=locale,
            messages=messages,
            built_at=datetime.now(timezone.utc).isoformat(),
        )

    def _walk(self, segment: Segment, prefix: str, messages: Dict[str, str]) -> None:
        for node in segment.children:
            if isinstance(node, Segment):
                self._walk(node, join_key(prefix, node.name), messages)
            else:
                self._merge_fragment(node, prefix, messages)

    def _merge_fragment(
        self, fragment: Fragment, prefix: str, messages: Dict[str, str]
    ) -> None:
        reader = self.registry.reader_for(fragment.name)
        if reader is None:
            raise FragmentParseError(fragment.locator, "no reader for fragment")

        basename = self.registry.strip_suffix(fragment.name)
        for leaf_key, template in reader.read(fragment.locator).items():
            key = join_key(prefix, basename, leaf_key)
            if key in messages:
                if self.strict:
                    raise KeyCollisionError(key, fragment.locator)
                logger.warning(
                    "translation_key_overwritten",
                    key=key,
                    fragment=str(fragment.locator),
                )
            messages[key] = template


def discover_locales(
    root: Any,
    enumerator: Optional[SourceEnumerator] = None,
    reserved: Iterable[str] = DEFAULT_RESERVED_SEGMENTS,
) -> List[str]:
    """List the locales defined under a source root.

    Every top-level segment is a locale except reserved (vendor) names.

    Args:
        root: Locator of the source root (e.g., the "lang" directory).
        enumerator: Source enumerator (default: filesystem).
        reserved: Segment names that are not locales.

    Returns:
        Locale identifiers in enumeration order.

    Raises:
        SourceUnavailableError: If the root cannot be enumerated.
    """
    enumerator = enumerator or FileSystemEnumerator()
    reserved_names = set(reserved)
    return [
        entry.name
        for entry in enumerator.list(root)
        if entry.is_segment and entry.name not in reserved_names
    ]


def build_locale(builder: CatalogBuilder, root: Any, locale: str) -> OperationResult:
    """Build one locale and wrap the outcome in an OperationResult.

    Args:
        builder: CatalogBuilder to use.
        root: Locator of the source root containing the locale segment.
        locale: Locale identifier.

    Returns:
        OperationResult whose data is the Catalog on success. Locale names
        that cannot be stored as a catalog fail with INVALID_LOCALE.
    """
    try:
        validate_catalog_locale(locale)
    except InvalidLocaleError as e:
        logger.error("invalid_locale_name", locale=locale, error=str(e))
        return OperationResult.permanent_error(str(e), error_code="INVALID_LOCALE")

    locale_root = builder.enumerator.child(root, locale)
    try:
        catalog = builder.build(locale_root, locale=locale)
    except FragmentParseError as e:
        logger.error("fragment_parse_failed", locale=locale, error=str(e))
        return OperationResult.permanent_error(str(e), error_code="FRAGMENT_PARSE_ERROR")
    except KeyCollisionError as e:
        logger.error("translation_key_collision", locale=locale, error=str(e))
        return OperationResult.permanent_error(str(e), error_code="KEY_COLLISION")
    except SourceUnavailableError as e:
        logger.error("locale_source_unavailable", locale=locale, error=str(e))
        return OperationResult.permanent_error(str(e), error_code="SOURCE_UNAVAILABLE")
    return OperationResult.success(data=catalog, message=f"built {locale}")


def build_all(
    root: Any,
    locales: Optional[Iterable[str]] = None,
    builder: Optional[CatalogBuilder] = None,
    reserved: Iterable[str] = DEFAULT_RESERVED_SEGMENTS,
    max_workers: int = 4,
) -> Dict[str, OperationResult]:
    """Build every locale under a source root, in parallel.

    A failure in one locale never affects the others.

    Args:
        root: Locator of the source root.
        locales: Locales to build (default: discover_locales()).
        builder: CatalogBuilder to use (default: filesystem, non-strict).
        reserved: Segment names excluded from discovery.
        max_workers: Maximum number of worker threads.

    Returns:
        Dict of locale -> OperationResult, in locale order.

    Raises:
        SourceUnavailableError: If the root itself cannot be enumerated.
    """
    builder = builder or CatalogBuilder()
    if locales is None:
        locale_list = discover_locales(root, builder.enumerator, reserved)
    else:
        locale_list = list(locales)

    if not locale_list:
        logger.warning("no_locales_found", root=str(root))
        return {}

    workers = max(1, min(max_workers, len(locale_list)))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {
            locale: executor.submit(build_locale, builder, root, locale)
            for locale in locale_list
        }
        return {locale: future.result() for locale, future in futures.items()}
