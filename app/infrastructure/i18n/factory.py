"""Factory functions for creating i18n components.

Provides convenience functions for initializing builders, stores and
translators from application settings.
"""

from pathlib import Path
from typing import Optional

from infrastructure.configuration import I18nSettings
from infrastructure.i18n.builder import CatalogBuilder
from infrastructure.i18n.persistence import CatalogStore
from infrastructure.i18n.translator import Translator
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def create_builder(i18n_settings: Optional[I18nSettings] = None) -> CatalogBuilder:
    """Create a filesystem CatalogBuilder honoring the strict-collision setting."""
    i18n_settings = i18n_settings or I18nSettings()
    return CatalogBuilder(strict=i18n_settings.STRICT_KEY_COLLISIONS)


def create_store(i18n_settings: Optional[I18nSettings] = None) -> CatalogStore:
    """Create a CatalogStore rooted at the configured catalog path."""
    i18n_settings = i18n_settings or I18nSettings()
    return CatalogStore(Path(i18n_settings.catalog_path))


def create_translator(
    i18n_settings: Optional[I18nSettings] = None,
    store: Optional[CatalogStore] = None,
    preload: bool = True,
) -> Translator:
    """Create and configure a Translator instance.

    Args:
        i18n_settings: Settings to use (default: loaded from environment).
        store: CatalogStore to load from (default: create_store()).
        preload: Whether to load the default locale immediately (default: True).

    Returns:
        Translator: Configured translator instance

    Usage:
        translator = create_translator()
        translator.t("auth.failed")

        # Lazy loading
        translator = create_translator(preload=False)
        translator.start("fr")
    """
    i18n_settings = i18n_settings or I18nSettings()
    translator = Translator(
        store=store or create_store(i18n_settings),
        default_locale=i18n_settings.DEFAULT_LOCALE,
        fallback_locale=i18n_settings.FALLBACK_LOCALE,
    )

    if preload:
        translator.start()
        logger.info("translator_created_with_preload", locale=translator.locale)
    else:
        logger.info("translator_created_lazy")

    return translator
