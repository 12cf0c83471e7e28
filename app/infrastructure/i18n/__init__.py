"""i18n system - translation catalogs and message rendering.

Builds one merged catalog per locale from a tree of translation fragments
and renders messages with pluralization and ":name" placeholders.

Main components:
- models: Catalog, Segment, Fragment and the Variables variant
- sources: source enumerators and YAML/JSON fragment readers
- builder: CatalogBuilder, discover_locales, build_all
- resolver: resolve() with plural selection and interpolation
- persistence: CatalogStore (one JSON catalog per locale)
- publisher: publish_catalogs() build-and-write pipeline
- translator: Translator holding the active locale
"""

from infrastructure.i18n.builder import CatalogBuilder, build_all, discover_locales
from infrastructure.i18n.exceptions import (
    CatalogFormatError,
    CatalogNotFoundError,
    FragmentParseError,
    I18nError,
    InvalidLocaleError,
    KeyCollisionError,
    SourceUnavailableError,
)
from infrastructure.i18n.models import (
    Catalog,
    Fragment,
    NoVariables,
    ScalarVariable,
    Segment,
    VariableMap,
    Variables,
)
from infrastructure.i18n.persistence import CatalogStore
from infrastructure.i18n.publisher import publish_catalogs
from infrastructure.i18n.resolver import resolve
from infrastructure.i18n.sources import (
    FileSystemEnumerator,
    FragmentReader,
    JSONFragmentReader,
    ReaderRegistry,
    SourceEnumerator,
    YAMLFragmentReader,
)
from infrastructure.i18n.translator import Translator

__all__ = [
    "Catalog",
    "Segment",
    "Fragment",
    "Variables",
    "VariableMap",
    "ScalarVariable",
    "NoVariables",
    "SourceEnumerator",
    "FileSystemEnumerator",
    "FragmentReader",
    "YAMLFragmentReader",
    "JSONFragmentReader",
    "ReaderRegistry",
    "CatalogBuilder",
    "discover_locales",
    "build_all",
    "resolve",
    "CatalogStore",
    "publish_catalogs",
    "Translator",
    "I18nError",
    "SourceUnavailableError",
    "FragmentParseError",
    "KeyCollisionError",
    "InvalidLocaleError",
    "CatalogNotFoundError",
    "CatalogFormatError",
]
