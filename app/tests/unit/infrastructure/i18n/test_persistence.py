"""Tests for infrastructure.i18n.persistence module."""

import json

import pytest

from infrastructure.i18n import (
    Catalog,
    CatalogFormatError,
    CatalogNotFoundError,
    CatalogStore,
    InvalidLocaleError,
)
from tests.factories.i18n import make_catalog


@pytest.mark.unit
class TestCatalogStore:
    """Tests for CatalogStore."""

    def test_write_creates_flat_json(self, tmp_path):
        """write() stores a flat object keyed by dotted key."""
        store = CatalogStore(tmp_path / "out")
        catalog = Catalog(locale="fr", messages={"auth.welcome": "Bonjour :name, ça va?"})

        path = store.write(catalog)

        assert path == tmp_path / "out" / "fr.json"
        text = path.read_text(encoding="utf-8")
        assert "ça va" in text
        assert json.loads(text) == {"auth.welcome": "Bonjour :name, ça va?"}

    def test_round_trip(self, tmp_path):
        """A written catalog reads back identical."""
        store = CatalogStore(tmp_path)
        catalog = make_catalog()

        store.write(catalog)
        loaded = store.read("en")

        assert loaded.locale == "en"
        assert loaded.to_dict() == catalog.to_dict()

    def test_read_nested_json(self, tmp_path):
        """Nested catalogs are flattened to dotted keys."""
        (tmp_path / "en.json").write_text(
            json.dumps({"auth": {"failed": "Nope"}}), encoding="utf-8"
        )
        assert CatalogStore(tmp_path).read("en").to_dict() == {"auth.failed": "Nope"}

    def test_read_missing_raises(self, tmp_path):
        with pytest.raises(CatalogNotFoundError):
            CatalogStore(tmp_path).read("de")

    def test_read_malformed_raises(self, tmp_path):
        (tmp_path / "en.json").write_text("{oops", encoding="utf-8")
        with pytest.raises(CatalogFormatError):
            CatalogStore(tmp_path).read("en")

    def test_read_non_object_raises(self, tmp_path):
        (tmp_path / "en.json").write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(CatalogFormatError):
            CatalogStore(tmp_path).read("en")

    @pytest.mark.parametrize("value", [None, ["a", "b"]])
    def test_read_non_scalar_leaf_raises(self, tmp_path, value):
        """Null or list messages are rejected instead of being stringified."""
        (tmp_path / "en.json").write_text(
            json.dumps({"auth": {"failed": value}}), encoding="utf-8"
        )
        with pytest.raises(CatalogFormatError):
            CatalogStore(tmp_path).read("en")

    @pytest.mark.parametrize("locale", ["../secret", "available-locales", ""])
    def test_invalid_locale_rejected(self, tmp_path, locale):
        with pytest.raises(InvalidLocaleError):
            CatalogStore(tmp_path).read(locale)

    def test_overwrite_replaces_file(self, tmp_path):
        store = CatalogStore(tmp_path)
        store.write(Catalog(locale="en", messages={"a": "1"}))
        store.write(Catalog(locale="en", messages={"b": "2"}))
        assert store.read("en").to_dict() == {"b": "2"}
        assert [p.name for p in tmp_path.iterdir()] == ["en.json"]


@pytest.mark.unit
class TestAvailableLocales:
    """Tests for the locale manifest."""

    def test_manifest_preserves_order(self, tmp_path):
        store = CatalogStore(tmp_path)
        store.write_manifest(["fr", "en"])
        assert store.available_locales() == ["fr", "en"]

    def test_falls_back_to_catalog_files(self, tmp_path):
        store = CatalogStore(tmp_path)
        store.write(Catalog(locale="fr"))
        store.write(Catalog(locale="en"))
        assert store.available_locales() == ["en", "fr"]

    def test_missing_directory(self, tmp_path):
        assert CatalogStore(tmp_path / "missing").available_locales() == []

    def test_invalid_manifest_falls_back(self, tmp_path):
        store = CatalogStore(tmp_path)
        store.write(Catalog(locale="en"))
        (tmp_path / "available-locales.json").write_text("{}", encoding="utf-8")
        assert store.available_locales() == ["en"]
