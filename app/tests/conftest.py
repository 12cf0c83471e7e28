"""Shared pytest fixtures."""

import pytest

from tests.factories.i18n import make_lang_tree


@pytest.fixture
def lang_dir(tmp_path):
    """Create a lang directory with en/fr locales and a vendor directory.

    Layout:
    - en/auth.yml
    - en/admin/users.yml
    - en/messages.json
    - en/README.txt        (unsupported, ignored)
    - fr/auth.yml
    - vendor/package/en/x.yml (reserved, not a locale)
    """
    return make_lang_tree(tmp_path / "lang")
