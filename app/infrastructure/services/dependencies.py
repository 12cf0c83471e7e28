"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.i18n.persistence import CatalogStore
from infrastructure.services.providers import get_catalog_store

# Catalog store dependency - reads built <locale>.json catalogs
CatalogStoreDep = Annotated[CatalogStore, Depends(get_catalog_store)]

__all__ = [
    "CatalogStoreDep",
]
