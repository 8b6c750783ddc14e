"""Tests for path utilities."""

import pytest
from file_normalize import NormalizeTypeError
from file_normalize.path_utils import normalize_slash


class TestNormalizeSlash:
    """Tests for normalize_slash function."""

    def test_backslashes_converted(self):
        """Test that backslashes are converted to forward slashes."""
        assert normalize_slash("foo\\bar") == "foo/bar"

    def test_strips_trailing_slash_by_default(self):
        assert normalize_slash("foo\\bar\\") == "foo/bar"

    def test_keeps_trailing_slash_when_false(self):
        assert normalize_slash("foo\\bar\\", False) == "foo/bar/"
        assert normalize_slash("foo\\bar\\", trailing_slash=False) == "foo/bar/"

    def test_explicit_true_strips(self):
        assert normalize_slash("foo/bar/", True) == "foo/bar"

    def test_strips_only_one_trailing_slash(self):
        assert normalize_slash("foo\\\\") == "foo/"

    def test_no_separator_collapsing(self):
        """Test that repeated separators are left alone."""
        assert normalize_slash("foo\\\\bar") == "foo//bar"

    def test_drive_letters_untouched(self):
        """Test that drive letters are substituted literally."""
        assert normalize_slash(r"C:\Users\test\photos") == "C:/Users/test/photos"

    def test_unc_prefix_untouched(self):
        assert normalize_slash(r"\\server\share") == "//server/share"

    def test_root_is_kept(self):
        assert normalize_slash("\\") == "/"
        assert normalize_slash("/") == "/"

    def test_empty_string(self):
        assert normalize_slash("") == ""

    @pytest.mark.parametrize("path", ["foo/bar", "photos/2023/image.jpg", "a", "café/résumé.txt"])
    def test_already_normalized(self, path):
        """Test that already normalized paths are unchanged."""
        assert normalize_slash(path) == path

    @pytest.mark.parametrize("path", ["a\\b\\c", "\\\\x\\", "mixed/and\\back\\"])
    def test_result_has_no_backslashes(self, path):
        assert "\\" not in normalize_slash(path)

    @pytest.mark.parametrize("value", [None, 42, b"foo\\bar", ["foo"]])
    def test_rejects_non_string(self, value):
        with pytest.raises(NormalizeTypeError) as exc_info:
            normalize_slash(value)

        assert exc_info.value.context["operation"] == "normalize_slash"

    def test_type_error_is_builtin_type_error(self):
        with pytest.raises(TypeError):
            normalize_slash(123)
