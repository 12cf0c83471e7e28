"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n.factory import create_store
from infrastructure.i18n.persistence import CatalogStore


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_catalog_store() -> CatalogStore:
    """
    Get application-scoped catalog store singleton.

    Returns:
        CatalogStore: Store rooted at the configured catalog directory.

    Usage:
        @router.get("/lang/{locale}")
        def get_catalog(locale: str, store: CatalogStoreDep):
            return store.read(locale).to_dict()
    """
    return create_store(get_settings().i18n)
