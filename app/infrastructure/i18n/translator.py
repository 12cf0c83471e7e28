"""Translation service holding the active locale and its catalog.

The Translator is an explicit, caller-owned state cell: it loads the default
locale on start(), falls back to a configured locale when a load fails, and
renders messages through the resolver.
"""

from threading import Lock
from typing import Any, List, Optional

from infrastructure.i18n.exceptions import I18nError
from infrastructure.i18n.models import Catalog
from infrastructure.i18n.persistence import CatalogStore
from infrastructure.i18n.resolver import Count, resolve
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class Translator:
    """Service for translating messages in the active locale.

    Attributes:
        store: CatalogStore catalogs are loaded from.
        default_locale: Locale loaded by start().
        fallback_locale: Locale loaded when another locale fails to load.
    """

    def __init__(
        self,
        store: CatalogStore,
        default_locale: str = "en",
        fallback_locale: str = "en",
    ):
        """Initialize Translator.

        Args:
            store: CatalogStore instance for loading catalogs.
            default_locale: Locale to load on start (default: en).
            fallback_locale: Locale to use when loading fails (default: en).
        """
        self.store = store
        self.default_locale = default_locale
        self.fallback_locale = fallback_locale
        self._locale: Optional[str] = None
        self._catalog: Optional[Catalog] = None
        self._lock = Lock()
        logger.info(
            "initialized_translator",
            default_locale=default_locale,
            fallback_locale=fallback_locale,
        )

    @property
    def locale(self) -> Optional[str]:
        """Currently active locale, or None before a successful load."""
        return self._locale

    @property
    def catalog(self) -> Optional[Catalog]:
        """Currently active catalog, or None before a successful load."""
        return self._catalog

    def start(self, locale: Optional[str] = None) -> Optional[str]:
        """Load the initial locale (default_locale unless given).

        Returns:
            The active locale after loading, or None if nothing could be loaded.
        """
        return self.load_locale(locale or self.default_locale)

    def close(self) -> None:
        """Drop the active locale and catalog."""
        with self._lock:
            self._locale = None
            self._catalog = None
        logger.info("closed_translator")

    def load_locale(self, locale: str) -> Optional[str]:
        """Load a locale, falling back to fallback_locale on failure.

        When the fallback also fails, the previously active catalog is kept.

        Args:
            locale: Locale to load.

        Returns:
            The active locale after the attempt.
        """
        try:
            catalog = self.store.read(locale)
        except (I18nError, OSError) as e:
            logger.error("locale_load_failed", locale=locale, error=str(e))
            if locale != self.fallback_locale:
                logger.info(
                    "using_fallback_locale",
                    requested_locale=locale,
                    fallback_locale=self.fallback_locale,
                )
                return self.load_locale(self.fallback_locale)
            return self._locale

        with self._lock:
            self._catalog = catalog
            self._locale = locale
        logger.info("loaded_locale", locale=locale, key_count=len(catalog))
        return locale

    def switch_locale(self, locale: str) -> Optional[str]:
        """Switch to another locale if it differs from the active one.

        Returns:
            The active locale after the switch.
        """
        if locale == self._locale:
            return self._locale
        return self.load_locale(locale)

    def translate(
        self,
        key: str,
        variables: Any = None,
        count: Optional[Count] = None,
    ) -> str:
        """Render a message from the active catalog.

        Args:
            key: Dotted translation key.
            variables: Mapping of placeholder values, a single scalar, or None.
            count: Optional count for plural selection.

        Returns:
            Rendered message, or the key when it is not translated.
        """
        return resolve(self._catalog, key, variables, count)

    t = translate

    def available_locales(self) -> List[str]:
        """Return the available locales from the store, or [] on failure."""
        try:
            return self.store.available_locales()
        except OSError as e:
            logger.error("available_locales_failed", error=str(e))
            return []
