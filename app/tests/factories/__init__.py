"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_catalog,
    make_lang_tree,
    write_fragment,
)

__all__ = [
    "make_catalog",
    "make_lang_tree",
    "write_fragment",
]
