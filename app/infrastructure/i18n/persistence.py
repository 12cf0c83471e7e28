"""Catalog persistence.

Stores one JSON object per locale (<output_dir>/<locale>.json), keyed by
dotted key, plus an optional manifest listing the published locales.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Iterable, List

from infrastructure.i18n.exceptions import (
    CatalogFormatError,
    CatalogNotFoundError,
    InvalidLocaleError,
)
from infrastructure.i18n.models import Catalog, flatten_messages, validate_locale
from infrastructure.logging import get_module_logger

logger = get_module_logger()

MANIFEST_NAME = "available-locales"
CATALOG_SUFFIX = ".json"


def validate_catalog_locale(locale: str) -> str:
    """Ensure a locale can name a catalog file.

    Raises:
        InvalidLocaleError: If the identifier is unsafe or is the manifest name.
    """
    validate_locale(locale)
    if locale == MANIFEST_NAME:
        raise InvalidLocaleError(locale)
    return locale


class CatalogStore:
    """JSON file store for built catalogs.

    Attributes:
        output_dir: Directory holding one <locale>.json per locale.
    """

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)

    def path_for(self, locale: str) -> Path:
        """Return the catalog file path for a locale.

        Raises:
            InvalidLocaleError: If the locale identifier is unsafe.
        """
        validate_catalog_locale(locale)
        return self.output_dir / f"{locale}{CATALOG_SUFFIX}"

    def write(self, catalog: Catalog) -> Path:
        """Persist a catalog as a flat JSON object.

        The file is written to a temporary name first and then moved into
        place, so readers never observe a partially written catalog.

        Args:
            catalog: Catalog to persist.

        Returns:
            Path of the written file.
        """
        path = self.path_for(catalog.locale)
        self._write_json(path, catalog.to_dict())
        logger.info(
            "wrote_catalog",
            locale=catalog.locale,
            path=str(path),
            key_count=len(catalog),
        )
        return path

    def read(self, locale: str) -> Catalog:
        """Load a persisted catalog.

        Both flat (dotted keys) and nested JSON objects are accepted.

        Args:
            locale: Locale identifier.

        Returns:
            Catalog for the locale.

        Raises:
            InvalidLocaleError: If the identifier is unsafe.
            CatalogNotFoundError: If no catalog file exists.
            CatalogFormatError: If the file is not a JSON object of scalar
                messages.
        """
        path = self.path_for(locale)
        if not path.is_file():
            raise CatalogNotFoundError(locale, path)

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error("catalog_decode_error", locale=locale, error=str(e))
            raise CatalogFormatError(locale, str(e)) from e

        if not isinstance(data, dict):
            raise CatalogFormatError(locale, "expected a JSON object")

        for key, value in flatten_messages(data).items():
            if not isinstance(value, (str, int, float)):
                raise CatalogFormatError(
                    locale, f"unsupported value for '{key}': {type(value).__name__}"
                )

        return Catalog.from_mapping(locale, data)

    def write_manifest(self, locales: Iterable[str]) -> Path:
        """Persist the ordered list of available locales."""
        path = self.output_dir / f"{MANIFEST_NAME}{CATALOG_SUFFIX}"
        self._write_json(path, [validate_locale(locale) for locale in locales])
        return path

    def available_locales(self) -> List[str]:
        """Return the available locales.

        Uses the manifest when present, otherwise the sorted catalog file names.
        """
        manifest = self.output_dir / f"{MANIFEST_NAME}{CATALOG_SUFFIX}"
        if manifest.is_file():
            try:
                with open(manifest, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except (json.JSONDecodeError, UnicodeDecodeError):
                data = None
            if isinstance(data, list):
                return [str(locale) for locale in data]
            logger.warning("invalid_locale_manifest", path=str(manifest))

        if not self.output_dir.is_dir():
            return []
        return sorted(
            path.stem
            for path in self.output_dir.glob(f"*{CATALOG_SUFFIX}")
            if path.stem != MANIFEST_NAME
        )

    def _write_json(self, path: Path, data) -> None:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.output_dir, prefix=f".{path.stem}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
