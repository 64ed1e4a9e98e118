"""Tests for destination directory validation."""

from pathlib import Path

from create_luau_app.helpers.directory_check import is_empty


class TestIsEmpty:
    """A destination is usable only when missing or empty."""

    def test_missing_path_is_usable(self, tmp_path: Path) -> None:
        assert is_empty(tmp_path / "does-not-exist") is True

    def test_nested_missing_path_is_usable(self, tmp_path: Path) -> None:
        assert is_empty(tmp_path / "a" / "b" / "c") is True

    def test_empty_directory_is_usable(self, tmp_path: Path) -> None:
        target = tmp_path / "empty"
        target.mkdir()
        assert is_empty(target) is True

    def test_directory_with_file_is_not_usable(self, tmp_path: Path) -> None:
        (tmp_path / "existing.txt").write_text("data")
        assert is_empty(tmp_path) is False

    def test_hidden_entry_counts(self, tmp_path: Path) -> None:
        (tmp_path / ".git").mkdir()
        assert is_empty(tmp_path) is False

    def test_directory_with_subdirectory_is_not_usable(self, tmp_path: Path) -> None:
        (tmp_path / "src").mkdir()
        assert is_empty(tmp_path) is False

    def test_regular_file_is_not_usable(self, tmp_path: Path) -> None:
        target = tmp_path / "file.txt"
        target.write_text("data")
        assert is_empty(target) is False

    def test_accepts_string_paths(self, tmp_path: Path) -> None:
        assert is_empty(str(tmp_path)) is True

    def test_check_has_no_side_effects(self, tmp_path: Path) -> None:
        target = tmp_path / "missing"
        is_empty(target)
        assert not target.exists()
