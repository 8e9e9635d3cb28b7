"""Tests for path normalization helpers."""
import pytest

from chilipy.core.path import normalize_path, join_path, parent_path, split_path


class TestNormalizePath:
    """Test suite for normalize_path."""
    
    @pytest.mark.parametrize("raw", [
        "home/x",
        "/home/x",
        "//home//x//",
        "/home/x/",
    ])
    def test_equivalent_spellings(self, raw):
        """Test that slash variations collapse to one canonical form."""
        assert normalize_path(raw) == "/home/x"
    
    def test_root(self):
        """Test root and slash-only paths."""
        assert normalize_path("/") == "/"
        assert normalize_path("///") == "/"
    
    def test_dot_segments_are_kept(self):
        """Test that '.' and '..' are treated as ordinary names."""
        assert normalize_path("/a/../b/./c") == "/a/../b/./c"


class TestPathHelpers:
    """Test suite for split/join/parent helpers."""
    
    def test_split_path(self):
        assert split_path("//a/b//c/") == ["a", "b", "c"]
        assert split_path("/") == []
    
    def test_join_path_from_root(self):
        assert join_path("/", "home") == "/home"
    
    def test_join_path(self):
        assert join_path("/home", "user") == "/home/user"
    
    def test_parent_path(self):
        assert parent_path("/home/user/public") == "/home/user"
        assert parent_path("/home") == "/"
        assert parent_path("/") == "/"
