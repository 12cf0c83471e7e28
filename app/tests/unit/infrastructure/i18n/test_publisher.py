"""Tests for infrastructure.i18n.publisher module."""

import json
from unittest.mock import patch

import pytest

from infrastructure.i18n import CatalogStore, SourceUnavailableError, publish_catalogs
from tests.factories.i18n import write_fragment


@pytest.mark.unit
class TestPublishCatalogs:
    """Tests for publish_catalogs()."""

    def test_writes_one_catalog_per_locale(self, lang_dir):
        """Each locale is written to <lang_path>/<locale>.json by default."""
        results = publish_catalogs(lang_dir)

        assert set(results) == {"en", "fr"}
        assert results["en"].message == 'Successfully parsed "en" translations.'
        assert results["en"].data == lang_dir / "en.json"

        en = json.loads((lang_dir / "en.json").read_text(encoding="utf-8"))
        assert en["auth.welcome"] == "Hello :name"
        assert en["admin.users.created"] == "User :name created"
        assert not (lang_dir / "vendor.json").exists()

    def test_output_path(self, lang_dir, tmp_path):
        output = tmp_path / "public" / "lang"
        publish_catalogs(lang_dir, output_path=output)

        store = CatalogStore(output)
        assert store.available_locales() == ["en", "fr"]
        assert store.read("fr").get("auth.welcome") == "Bonjour :name"

    def test_failed_locale_not_published(self, lang_dir, tmp_path):
        """A failing locale is reported and its previous catalog stays in place."""
        output = tmp_path / "out"
        publish_catalogs(lang_dir, output_path=output)
        write_fragment(lang_dir / "fr" / "broken.yml", "key: [unclosed\n")
        write_fragment(lang_dir / "en" / "extra.yml", {"k": "new"})

        results = publish_catalogs(lang_dir, output_path=output)

        assert results["en"].is_success
        assert not results["fr"].is_success
        assert results["fr"].error_code == "FRAGMENT_PARSE_ERROR"

        store = CatalogStore(output)
        assert store.read("en").get("extra.k") == "new"
        assert store.read("fr").get("auth.welcome") == "Bonjour :name"
        assert store.available_locales() == ["en"]

    def test_invalid_locale_directory_fails_alone(self, tmp_path):
        """A directory that cannot name a catalog fails without stopping the run."""
        lang = tmp_path / "lang"
        for locale in ("en", "sr@latin", "zz"):
            write_fragment(lang / locale / "auth.yml", {"welcome": "Hi"})
        write_fragment(lang / "available-locales" / "auth.yml", {"welcome": "Hi"})

        results = publish_catalogs(lang)

        assert results["en"].is_success
        assert results["zz"].is_success
        assert results["sr@latin"].error_code == "INVALID_LOCALE"
        assert results["available-locales"].error_code == "INVALID_LOCALE"
        assert CatalogStore(lang).available_locales() == ["en", "zz"]
        assert not (lang / "sr@latin.json").exists()

    def test_write_failure_is_reported(self, lang_dir, tmp_path):
        output = tmp_path / "out"
        with patch.object(CatalogStore, "write", side_effect=OSError("disk full")):
            results = publish_catalogs(lang_dir, output_path=output)

        assert results["en"].error_code == "WRITE_FAILED"
        assert results["fr"].error_code == "WRITE_FAILED"
        assert CatalogStore(output).available_locales() == []

    def test_rebuild_from_written_output_is_stable(self, lang_dir):
        """Catalog files written into lang_path are not treated as locales."""
        publish_catalogs(lang_dir)
        results = publish_catalogs(lang_dir)
        assert list(results) == ["en", "fr"]

    def test_missing_lang_path_raises(self, tmp_path):
        with pytest.raises(SourceUnavailableError):
            publish_catalogs(tmp_path / "missing")
