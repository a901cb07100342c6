"""Tests for relative path computation and segment-wise prefix checks."""

import logging

import pytest

from navpath.paths import (
    Dialect,
    PathTooLongError,
    canonicalize,
    join,
    path_starts_with,
    relative,
    strip_trailing_separator,
)

W = Dialect.WINDOWS


class TestRelative:
    """Test relative in the POSIX dialect."""

    def test_self_relative(self):
        assert relative("/a/b", "/a/b") == "."
        assert relative("/", "/") == "."

    def test_descendant(self):
        assert relative("/a/b/c", "/a/b") == "c"
        assert relative("/a", "/") == "a"

    def test_ancestor(self):
        assert relative("/", "/a") == ".."
        assert relative("/a", "/a/b/c") == "../.."

    def test_sibling_branches(self):
        assert relative("/a/x", "/a/b/c") == "../../x"

    def test_segment_wise_not_byte_prefix(self):
        assert relative("/foobar", "/foo") == "../foobar"
        assert relative("/foo", "/foobar") == "../foo"

    def test_inputs_are_canonicalized(self):
        assert relative("/a//b/", "/a/./c") == "../b"
        assert relative("/a/b/../c", "/a") == "c"

    def test_relative_inputs(self):
        assert relative("a/b", "a/c") == "../b"
        assert relative("a", "./b") == "../a"

    def test_base_climbing_above_its_start_falls_back(self):
        assert relative("c", "../b") == "c"
        assert relative("a/c", "a/../../b") == "a/c"
        assert relative("../x", "../b") == "../x"

    def test_absolute_against_relative_falls_back(self):
        assert relative("/a/b/", "x") == "/a/b"
        assert relative("a/b", "/x") == "a/b"

    def test_capacity(self):
        assert relative("/a/bbb", "/a", capacity=4) == "bbb"
        with pytest.raises(PathTooLongError):
            relative("/a/bbbb", "/a", capacity=4)

    @pytest.mark.parametrize(
        "path,base",
        [
            ("/a/b/c", "/a/b"),
            ("/a/x", "/a/b/c"),
            ("/", "/a/b"),
            ("/foobar/x", "/foo"),
            ("/a/b", "/a/b"),
            ("/usr/share/../lib", "/usr/local/bin"),
        ],
    )
    def test_round_trip(self, path, base):
        rel = relative(path, base)
        assert join(base, rel) == strip_trailing_separator(canonicalize(path))


class TestRelativeWindows:
    """Test relative with drive letters and UNC shares."""

    def test_same_drive(self):
        assert relative("C:/a/b", "C:/a/c", dialect=W) == "../b"
        assert relative("C:\\a", "C:/", dialect=W) == "a"

    def test_different_drives_fall_back(self):
        assert relative("D:/x/../y", "C:/y", dialect=W) == "D:/y"

    def test_drive_root_fallback_keeps_separator(self):
        assert relative("D:/", "C:/y", dialect=W) == "D:/"

    def test_drive_looking_name_stays_relative(self):
        assert relative("./C:x", ".", dialect=W) == "./C:x"
        assert relative("a/C:", "a", dialect=W) == "./C:"
        assert relative("C:x/y", "C:x", dialect=W) == "y"

    def test_same_unc_server(self):
        assert relative("//srv/share/x", "//srv/share/y/z", dialect=W) == "../../x"

    def test_different_unc_servers_fall_back(self):
        assert relative("//other/share/x", "//srv/share", dialect=W) == "//other/share/x"

    def test_drive_against_unc_falls_back(self):
        assert relative("C:/x", "//srv/share", dialect=W) == "C:/x"

    def test_fallback_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="navpath.paths.resolver"):
            relative("D:/x", "C:/y", dialect=W)
        assert "No common root" in caplog.text


class TestPathStartsWith:
    def test_ancestors(self):
        assert path_starts_with("/foo/bar", "/foo")
        assert path_starts_with("/foo/bar", "/foo/")
        assert path_starts_with("/foo", "/foo")
        assert path_starts_with("/foo", "/")

    def test_not_byte_prefix(self):
        assert not path_starts_with("/foobar", "/foo")
        assert not path_starts_with("/fo", "/foo")

    def test_anchor_must_match(self):
        assert not path_starts_with("foo/bar", "/foo")
        assert not path_starts_with("D:/a", "C:/", dialect=W)
        assert path_starts_with("C:\\a\\b", "C:/a", dialect=W)
