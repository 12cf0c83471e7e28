"""Tests for infrastructure.i18n.sources module."""

import pytest

from infrastructure.i18n import (
    FileSystemEnumerator,
    FragmentParseError,
    JSONFragmentReader,
    ReaderRegistry,
    Segment,
    SourceUnavailableError,
    YAMLFragmentReader,
)
from infrastructure.i18n.models import Fragment, SourceEntry
from infrastructure.i18n.sources import scan_tree
from tests.factories.i18n import write_fragment


@pytest.mark.unit
class TestFileSystemEnumerator:
    """Tests for FileSystemEnumerator."""

    def test_lists_sorted_entries(self, tmp_path):
        """list() returns segments and files in lexicographic order."""
        write_fragment(tmp_path / "b.yml", {"k": "v"})
        write_fragment(tmp_path / "a" / "x.yml", {"k": "v"})
        write_fragment(tmp_path / "c.json", {"k": "v"})

        entries = FileSystemEnumerator().list(tmp_path)

        assert entries == [
            SourceEntry(name="a", is_segment=True),
            SourceEntry(name="b.yml", is_segment=False),
            SourceEntry(name="c.json", is_segment=False),
        ]

    def test_skips_hidden_entries(self, tmp_path):
        """Entries starting with a dot are not listed."""
        write_fragment(tmp_path / ".hidden.yml", {"k": "v"})
        assert FileSystemEnumerator().list(tmp_path) == []

    def test_missing_directory_raises(self, tmp_path):
        """list() raises SourceUnavailableError for a missing directory."""
        with pytest.raises(SourceUnavailableError) as exc_info:
            FileSystemEnumerator().list(tmp_path / "missing")
        assert exc_info.value.locator == tmp_path / "missing"


@pytest.mark.unit
class TestYAMLFragmentReader:
    """Tests for YAMLFragmentReader."""

    def test_reads_flat_mapping(self, tmp_path):
        path = write_fragment(tmp_path / "auth.yml", {"failed": "Nope", "welcome": "Hi :name"})
        assert YAMLFragmentReader().read(path) == {"failed": "Nope", "welcome": "Hi :name"}

    def test_flattens_nested_mapping(self, tmp_path):
        """Nested groups become dotted leaf keys."""
        path = write_fragment(tmp_path / "auth.yml", {"throttle": {"short": "Wait"}})
        assert YAMLFragmentReader().read(path) == {"throttle.short": "Wait"}

    def test_stringifies_scalars(self, tmp_path):
        path = write_fragment(tmp_path / "x.yml", "limit: 5\nenabled: true\n")
        assert YAMLFragmentReader().read(path) == {"limit": "5", "enabled": "true"}

    def test_empty_document(self, tmp_path):
        path = write_fragment(tmp_path / "empty.yml", "")
        assert YAMLFragmentReader().read(path) == {}

    def test_invalid_yaml_raises(self, tmp_path):
        """Malformed YAML raises FragmentParseError naming the fragment."""
        path = write_fragment(tmp_path / "bad.yml", "key: [unclosed\n")
        with pytest.raises(FragmentParseError) as exc_info:
            YAMLFragmentReader().read(path)
        assert exc_info.value.locator == path

    def test_top_level_list_raises(self, tmp_path):
        path = write_fragment(tmp_path / "list.yml", "- a\n- b\n")
        with pytest.raises(FragmentParseError):
            YAMLFragmentReader().read(path)

    def test_list_value_raises(self, tmp_path):
        path = write_fragment(tmp_path / "x.yml", {"items": ["a", "b"]})
        with pytest.raises(FragmentParseError):
            YAMLFragmentReader().read(path)

    def test_null_value_raises(self, tmp_path):
        path = write_fragment(tmp_path / "x.yml", "key:\n")
        with pytest.raises(FragmentParseError):
            YAMLFragmentReader().read(path)

    def test_supports_suffixes(self):
        reader = YAMLFragmentReader()
        assert reader.supports("auth.yml")
        assert reader.supports("auth.YAML")
        assert not reader.supports("auth.json")
        assert not reader.supports(".yml")


@pytest.mark.unit
class TestJSONFragmentReader:
    """Tests for JSONFragmentReader."""

    def test_reads_mapping(self, tmp_path):
        path = write_fragment(tmp_path / "m.json", {"apples": "apple|apples", "é": "ü"})
        assert JSONFragmentReader().read(path) == {"apples": "apple|apples", "é": "ü"}

    def test_invalid_json_raises(self, tmp_path):
        path = write_fragment(tmp_path / "m.json", "{not json")
        with pytest.raises(FragmentParseError):
            JSONFragmentReader().read(path)

    def test_empty_key_raises(self, tmp_path):
        path = write_fragment(tmp_path / "m.json", {"": "x"})
        with pytest.raises(FragmentParseError):
            JSONFragmentReader().read(path)


@pytest.mark.unit
class TestReaderRegistry:
    """Tests for ReaderRegistry."""

    def test_reader_for_suffix(self):
        registry = ReaderRegistry()
        assert isinstance(registry.reader_for("auth.yml"), YAMLFragmentReader)
        assert isinstance(registry.reader_for("auth.json"), JSONFragmentReader)
        assert registry.reader_for("auth.php") is None

    @pytest.mark.parametrize(
        "name,expected",
        [("auth.yml", "auth"), ("a.b.yaml", "a.b"), ("m.json", "m"), ("x.txt", "x.txt")],
    )
    def test_strip_suffix(self, name, expected):
        """Only the format suffix is stripped."""
        assert ReaderRegistry().strip_suffix(name) == expected

    def test_custom_readers(self):
        registry = ReaderRegistry([JSONFragmentReader()])
        assert not registry.supports("auth.yml")
        assert registry.supports("auth.json")


@pytest.mark.unit
class TestScanTree:
    """Tests for scan_tree."""

    def test_builds_explicit_tree(self, lang_dir):
        """scan_tree() returns nested Segments and Fragments, skipping other files."""
        root = lang_dir / "en"
        tree = scan_tree(root, FileSystemEnumerator(), ReaderRegistry())

        assert tree == Segment(
            name="",
            locator=root,
            children=(
                Segment(
                    name="admin",
                    locator=root / "admin",
                    children=(Fragment(name="users.yml", locator=root / "admin" / "users.yml"),),
                ),
                Fragment(name="auth.yml", locator=root / "auth.yml"),
                Fragment(name="messages.json", locator=root / "messages.json"),
            ),
        )
