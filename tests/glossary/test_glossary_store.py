# Tests for GlossaryStore
# =======================

import json

import pytest

from tinylingo import GlossaryError
from tinylingo.glossary import GlossaryStore
from tinylingo.settings import get_glossary_path


@pytest.fixture
def store():
    return GlossaryStore()


class TestGlossaryStoreRead:
    """Reading the glossary file."""

    def test_missing_file(self, store):
        """Test a missing file reads as an empty glossary."""
        assert store.read() == {}

    def test_default_path(self, store, tinylingo_home):
        """Test the store lives in the config dir."""
        assert store.path == tinylingo_home / "glossary.json"
        assert store.path == get_glossary_path()

    def test_malformed_json(self, store):
        """Test broken JSON raises GlossaryError."""
        store.path.write_text("{oops", encoding="utf-8")
        with pytest.raises(GlossaryError):
            store.read()

    def test_non_object(self, store):
        """Test a JSON list is rejected."""
        store.path.write_text('["a", "b"]', encoding="utf-8")
        with pytest.raises(GlossaryError):
            store.read()

    def test_non_string_explanation(self, store):
        """Test explanations must be strings."""
        store.path.write_text('{"提交": 1}', encoding="utf-8")
        with pytest.raises(GlossaryError):
            store.read()


class TestGlossaryStoreWrite:
    """Adding, updating and removing entries."""

    def test_add_and_read(self, store):
        """Test an added entry can be read back."""
        store.add("提交", "git commit only")
        assert store.read() == {"提交": "git commit only"}

    def test_add_strips_whitespace(self, store):
        """Test surrounding whitespace is dropped."""
        store.add("  提交 ", " git commit only  ")
        assert store.read() == {"提交": "git commit only"}

    def test_add_updates_existing(self, store):
        """Test adding an existing term replaces its explanation in place."""
        store.add("提交", "old")
        store.add("联调", "source debugging")
        store.add("提交", "git commit only")
        assert list(store.read().items()) == [
            ("提交", "git commit only"),
            ("联调", "source debugging"),
        ]

    def test_add_empty_term(self, store):
        """Test an empty term is rejected."""
        with pytest.raises(GlossaryError):
            store.add("   ", "nothing")

    def test_insertion_order(self, store):
        """Test entries keep the order they were recorded in."""
        for term in ["c", "a", "b"]:
            store.add(term, term.upper())
        assert list(store.list()) == ["c", "a", "b"]

    def test_non_ascii_written_verbatim(self, store):
        """Test CJK text is stored readable, not escaped."""
        store.add("智能抠图", "BGRemover module")
        text = store.path.read_text(encoding="utf-8")
        assert "智能抠图" in text
        assert json.loads(text) == {"智能抠图": "BGRemover module"}

    def test_remove_existing(self, store):
        """Test removing an entry reports True and deletes it."""
        store.add("提交", "git commit only")
        assert store.remove("提交") is True
        assert store.read() == {}

    def test_remove_missing(self, store):
        """Test removing an unknown term reports False."""
        store.add("提交", "git commit only")
        assert store.remove("联调") is False
        assert store.read() == {"提交": "git commit only"}

    def test_custom_path(self, tmp_path):
        """Test a store at an explicit path."""
        path = tmp_path / "nested" / "terms.json"
        store = GlossaryStore(path)
        store.add("godot", "game engine")
        assert path.exists()
        assert GlossaryStore(str(path)).read() == {"godot": "game engine"}
