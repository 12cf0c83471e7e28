"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import CatalogStoreDep
from infrastructure.services.providers import get_catalog_store, get_settings

__all__ = [
    "CatalogStoreDep",
    "get_settings",
    "get_catalog_store",
]
