"""Publish pipeline: build every locale and persist the resulting catalogs.

A locale that fails to build is reported and left unpublished; any catalog
previously written for it stays in place.
"""

from pathlib import Path
from typing import Dict, Iterable, Optional

from infrastructure.i18n.builder import (
    DEFAULT_RESERVED_SEGMENTS,
    CatalogBuilder,
    build_all,
)
from infrastructure.i18n.exceptions import I18nError
from infrastructure.i18n.persistence import CatalogStore
from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult

logger = get_module_logger()


def publish_catalogs(
    lang_path: Path,
    output_path: Optional[Path] = None,
    builder: Optional[CatalogBuilder] = None,
    reserved: Iterable[str] = DEFAULT_RESERVED_SEGMENTS,
    max_workers: int = 4,
) -> Dict[str, OperationResult]:
    """Build all locales under lang_path and write one JSON catalog each.

    Args:
        lang_path: Source root; each non-reserved directory is a locale.
        output_path: Directory for <locale>.json files (default: lang_path).
        builder: CatalogBuilder to use (default: filesystem, non-strict).
        reserved: Segment names that are not locales.
        max_workers: Maximum number of parallel locale builds.

    Returns:
        Dict of locale -> OperationResult. Successful results carry the
        written file path as data.

    Raises:
        SourceUnavailableError: If lang_path cannot be enumerated.
    """
    lang_path = Path(lang_path)
    store = CatalogStore(Path(output_path) if output_path else lang_path)

    results = build_all(
        lang_path,
        builder=builder,
        reserved=reserved,
        max_workers=max_workers,
    )

    published: Dict[str, OperationResult] = {}
    for locale, result in results.items():
        if not result.is_success:
            logger.error(
                "locale_build_failed",
                locale=locale,
                error=result.message,
                error_code=result.error_code,
            )
            published[locale] = result
            continue

        try:
            path = store.write(result.data)
        except (I18nError, OSError) as e:
            logger.error("locale_catalog_write_failed", locale=locale, error=str(e))
            published[locale] = OperationResult.permanent_error(
                str(e), error_code="WRITE_FAILED"
            )
            continue

        logger.info("published_locale_catalog", locale=locale, path=str(path))
        published[locale] = OperationResult.success(
            data=path, message=f'Successfully parsed "{locale}" translations.'
        )

    store.write_manifest(
        locale for locale, result in published.items() if result.is_success
    )
    return published
