"""
Unit tests for habitual.repository.key_value and habitual.repository.theme.
"""
import pytest

from conftest import UnreadableKeyValueStore
from habitual.error import PersistenceError, ValidationError
from habitual.repository.key_value import FileKeyValueStore, MemoryKeyValueStore
from habitual.repository.theme import THEME_KEY, ThemeRepository


class TestFileKeyValueStore:
    """Test the file-per-key store."""

    def test_missing_key_is_none(self, tmp_path):
        assert FileKeyValueStore(tmp_path).get_item("activities") is None

    def test_set_then_get(self, tmp_path):
        store = FileKeyValueStore(tmp_path / "store")

        store.set_item("activities", "[]")

        assert store.get_item("activities") == "[]"
        assert (tmp_path / "store" / "activities").read_text() == "[]"

    def test_overwrite_leaves_no_temp_files(self, tmp_path):
        store = FileKeyValueStore(tmp_path)

        store.set_item("theme", "light")
        store.set_item("theme", "dark")

        assert store.get_item("theme") == "dark"
        assert [path.name for path in tmp_path.iterdir()] == ["theme"]

    def test_invalid_key(self, tmp_path):
        with pytest.raises(ValueError):
            FileKeyValueStore(tmp_path).get_item("../escape")

    def test_unwritable_directory(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(PersistenceError):
            FileKeyValueStore(blocker).set_item("activities", "[]")


class TestThemeRepository:
    """Test the theme preference."""

    def test_default_is_light(self):
        assert ThemeRepository(MemoryKeyValueStore()).get_theme() == "light"

    def test_unknown_stored_value_reads_as_light(self):
        store = MemoryKeyValueStore({THEME_KEY: "sepia"})

        assert ThemeRepository(store).get_theme() == "light"

    def test_unreadable_store_reads_as_light(self):
        assert ThemeRepository(UnreadableKeyValueStore()).get_theme() == "light"

    def test_toggle(self):
        store = MemoryKeyValueStore()
        themes = ThemeRepository(store)

        assert themes.toggle_theme() == "dark"
        assert store.get_item(THEME_KEY) == "dark"
        assert themes.toggle_theme() == "light"

    def test_set_invalid(self):
        with pytest.raises(ValidationError):
            ThemeRepository(MemoryKeyValueStore()).set_theme("blue")
