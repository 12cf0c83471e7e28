"""FastAPI routes serving built translation catalogs."""

from typing import Dict, List

from fastapi import APIRouter, HTTPException

from api.schemas import TranslateRequest, TranslateResponse
from infrastructure.i18n.exceptions import (
    CatalogFormatError,
    CatalogNotFoundError,
    InvalidLocaleError,
)
from infrastructure.i18n.models import Catalog
from infrastructure.i18n.persistence import CatalogStore
from infrastructure.i18n.resolver import resolve
from infrastructure.logging import get_module_logger
from infrastructure.services import CatalogStoreDep

logger = get_module_logger()
router = APIRouter(prefix="/lang", tags=["Localization"])


def _load_catalog(store: CatalogStore, locale: str) -> Catalog:
    log = logger.bind(locale=locale)
    try:
        return store.read(locale)
    except InvalidLocaleError as e:
        log.warning("invalid_locale_requested")
        raise HTTPException(status_code=422, detail=str(e)) from e
    except CatalogNotFoundError as e:
        log.warning("catalog_not_found")
        raise HTTPException(status_code=404, detail=str(e)) from e
    except CatalogFormatError as e:
        log.error("catalog_unreadable", error=str(e))
        raise HTTPException(status_code=500, detail="Catalog unreadable") from e


@router.get("/available-locales", summary="List available locales")
def get_available_locales(store: CatalogStoreDep) -> List[str]:
    """Return the ordered list of published locale identifiers."""
    return store.available_locales()


@router.get("/{locale}", summary="Get a locale catalog")
def get_catalog(locale: str, store: CatalogStoreDep) -> Dict[str, str]:
    """Return the flat dotted-key catalog of a locale.

    Raises:
        HTTPException: 422 for an invalid identifier, 404 if not published
    """
    return _load_catalog(store, locale).to_dict()


@router.post(
    "/{locale}/translate",
    response_model=TranslateResponse,
    summary="Render a message",
)
def translate(
    locale: str, request: TranslateRequest, store: CatalogStoreDep
) -> TranslateResponse:
    """Render one message of a locale with variables and count."""
    catalog = _load_catalog(store, locale)
    text = resolve(catalog, request.key, request.variables, request.count)
    return TranslateResponse(locale=locale, key=request.key, text=text)
