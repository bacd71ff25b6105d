"""
Summary: Tests for PurePath construction, derived attributes and edits.
Why: Pin the dotfile, multi-extension and root-path rules of the path value.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from decimal import Decimal

import pytest
from pytest_mock import MockerFixture

from purepath import (
    POSIX,
    PurePath,
    PurePathError,
    PurePathTypeError,
    PurePathValueError,
)


def make(*segments: str | PurePath) -> PurePath:
    """Build a POSIX path regardless of the host platform."""

    return PurePath(*segments, syntax=POSIX)


class TestConstruction:
    """Tests for building and normalizing paths."""

    def test_accepts_str(self) -> None:
        path = make("/path/to/file.txt")
        assert path.path == "/path/to/file.txt"
        assert isinstance(path.path, str)

    def test_accepts_pure_path(self) -> None:
        original = make("/path/to/file.txt")
        copy = PurePath(original)
        assert copy.path == original.path
        assert copy.syntax is POSIX

    def test_joins_multiple_segments(self) -> None:
        assert make("/path/", "to/file.txt").path == "/path/to/file.txt"

    def test_empty_segment_adds_no_separator(self) -> None:
        assert make("a", "", "b").path == "a/b"
        assert make("", "a").path == "a"

    def test_no_segments_is_current_directory(self) -> None:
        assert make().path == "."

    @pytest.mark.parametrize(
        ("segments", "expected"),
        [
            (("/path/", "/to/file.txt"), "/path/to/file.txt"),
            (("a", "/b", "//c"), "a/b/c"),
            (("", "/etc"), "/etc"),
        ],
        ids=["absolute-after-absolute", "absolute-after-relative", "leading-empty-segment"],
    )
    def test_later_roots_are_appended(self, segments: tuple[str, ...], expected: str) -> None:
        assert make(*segments).path == expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("/path//to/./file.txt", "/path/to/file.txt"),
            ("/path/to/../file.txt", "/path/file.txt"),
            ("/path/to/dir/", "/path/to/dir"),
            ("relative/./dir/", "relative/dir"),
            ("", "."),
        ],
        ids=["duplicate-separators", "parent-reference", "trailing", "relative", "empty"],
    )
    def test_normalizes(self, raw: str, expected: str) -> None:
        assert make(raw).path == expected

    @pytest.mark.parametrize(
        ("value", "type_name"),
        [(1, "int"), (Decimal("1.5"), "Decimal"), (date(1900, 1, 1), "date"), (None, "NoneType")],
        ids=["int", "Decimal", "date", "None"],
    )
    def test_rejects_other_types(self, value: object, type_name: str) -> None:
        with pytest.raises(PurePathTypeError) as exc_info:
            _ = PurePath(value, syntax=POSIX)  # pyright: ignore[reportArgumentType]

        assert str(exc_info.value) == (
            "Invalid type for argument path. "
            f"Expected one of (str, PurePath), got {type_name}"
        )
        assert isinstance(exc_info.value, TypeError)

    @pytest.mark.parametrize(
        "raw",
        ["/", "/path/to/file.tar.gz", "relative/.file", ".", "../up/./x", "//network/share"],
    )
    def test_round_trip_is_stable(self, raw: str) -> None:
        path = make(raw)
        assert make(str(path)).path == path.path
        assert str(path) == path.to_string() == path.path

    def test_is_immutable(self) -> None:
        path = make("/path/to/file.txt")
        with pytest.raises(AttributeError):
            path._path = "/other"  # pyright: ignore[reportAttributeAccessIssue]
        with pytest.raises(AttributeError):
            path.extra = 1  # pyright: ignore[reportAttributeAccessIssue]
        assert path.path == "/path/to/file.txt"

    def test_equality_and_hash(self) -> None:
        assert make("/a/b") == make("/a//b/")
        assert make("/a/b") != make("/a/c")
        assert make("/a/b") != "/a/b"
        assert len({make("/a/b"), make("/a/./b")}) == 1

    def test_repr(self) -> None:
        assert repr(make("/")) == "PurePath('/')"


class TestDerivedAttributes:
    """Tests for the accessors computed from the canonical string."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("/path/to/file.txt", "file.txt"),
            ("/path/to/file.tar.gz", "file.tar.gz"),
            ("/path/to/dir", "dir"),
            ("/", ""),
        ],
    )
    def test_name(self, raw: str, expected: str) -> None:
        assert make(raw).name == expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("/path/to/file.txt", "/path/to"),
            ("/path/to/dir", "/path/to"),
            ("/", "/"),
            ("file.txt", "."),
        ],
    )
    def test_parent(self, raw: str, expected: str) -> None:
        parent = make(raw).parent
        assert isinstance(parent, PurePath)
        assert parent.path == expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("/path/to/file.txt", ("/", "path", "to", "file.txt")),
            ("/path/to/dir", ("/", "path", "to", "dir")),
            ("/", ("/",)),
            ("path/to", ("path", "to")),
        ],
    )
    def test_parts(self, raw: str, expected: tuple[str, ...]) -> None:
        assert make(raw).parts == expected

    def test_parts_are_memoized(self) -> None:
        path = make("/path/to/file.txt")
        assert path.parts is path.parts

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("/path/to/file.txt", "/"), ("path/to", ""), ("/", "/")],
    )
    def test_root(self, raw: str, expected: str) -> None:
        assert make(raw).root == expected

    @pytest.mark.parametrize(
        ("raw", "stem", "suffix", "suffixes"),
        [
            ("/path/to/file.txt", "file", ".txt", [".txt"]),
            ("/path/to/file.tar.gz", "file.tar", ".gz", [".tar", ".gz"]),
            ("/path/to/.file", ".file", "", []),
            ("/path/to/.file.txt", ".file", ".txt", [".txt"]),
            ("/path/to/.file.tar.gz", ".file.tar", ".gz", [".tar", ".gz"]),
            ("/path/to/dir", "dir", "", []),
            ("/path/to/trailing.", "trailing.", "", []),
            ("/", "", "", []),
        ],
        ids=[
            "single-extension",
            "multiple-extensions",
            "dotfile",
            "dotfile-single-extension",
            "dotfile-multiple-extensions",
            "directory",
            "trailing-dot",
            "root",
        ],
    )
    def test_stem_and_suffixes(
        self, raw: str, stem: str, suffix: str, suffixes: list[str]
    ) -> None:
        path = make(raw)
        assert path.stem == stem
        assert path.suffix == suffix
        assert path.suffixes == suffixes
        assert path.name == path.stem + path.suffix

    def test_as_uri(self) -> None:
        assert make("/path/to/file.txt").as_uri() == "file:///path/to/file.txt"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("/path/to/file.txt", True),
            ("./path/to/file.txt", False),
            ("../path/to/file.txt", False),
        ],
    )
    def test_is_absolute(self, raw: str, expected: bool) -> None:
        assert make(raw).is_absolute() is expected


class TestJoin:
    """Tests for appending segments."""

    def test_single_segment(self) -> None:
        assert str(make("/path/to").join("file.txt")) == "/path/to/file.txt"

    def test_multiple_segments(self) -> None:
        assert str(make("/path/to").join("dir", "file.txt")) == "/path/to/dir/file.txt"

    def test_pure_path_segment(self) -> None:
        assert str(make("/path/to").join(make("dir"))) == "/path/to/dir"

    def test_slash_operator(self) -> None:
        base = make("/path")
        assert str(base / "to" / "file.txt") == "/path/to/file.txt"
        assert str("/root" / make("dir")) == "/root/dir"

    def test_absolute_segment_stays_beneath_receiver(self) -> None:
        base = make("/path")
        assert str(base.join("/etc")) == "/path/etc"
        assert str(base.join(make("/etc"), "passwd")) == "/path/etc/passwd"
        assert str(base / "/etc") == "/path/etc"

    def test_receiver_is_unchanged(self) -> None:
        base = make("/path/to")
        _ = base.join("dir")
        assert base.path == "/path/to"


class TestRelativeTo:
    """Tests for expressing a path relative to a base."""

    def test_parent_path(self) -> None:
        result = make("/usr/local/etc").relative_to(make("/usr"))
        assert str(result) == "local/etc"
        assert not result.is_absolute()

    def test_accepts_str(self) -> None:
        assert str(make("/usr/local/etc").relative_to("/usr/")) == "local/etc"

    def test_same_path_is_current_directory(self) -> None:
        assert str(make("/usr").relative_to("/usr")) == "."

    def test_relative_path_against_current_directory(self) -> None:
        assert str(make("a/b").relative_to(".")) == "a/b"

    @pytest.mark.parametrize(
        ("raw", "base", "message"),
        [
            ("/usr/local/bin", "/usr/bin/", "'/usr/local/bin' does not start with '/usr/bin'"),
            (
                "/usr/local/bin",
                "/usr/local/etc",
                "'/usr/local/bin' does not start with '/usr/local/etc'",
            ),
            (
                "/usr/local-old/bin",
                "/usr/local",
                "'/usr/local-old/bin' does not start with '/usr/local'",
            ),
        ],
        ids=["uncle", "sibling", "shared-string-prefix"],
    )
    def test_rejects_non_ancestor(self, raw: str, base: str, message: str) -> None:
        with pytest.raises(PurePathValueError) as exc_info:
            _ = make(raw).relative_to(make(base))
        assert str(exc_info.value) == message

    def test_is_relative_to(self) -> None:
        path = make("/usr/local/etc")
        assert path.is_relative_to("/usr")
        assert not path.is_relative_to("/usr/bin")


class TestWithName:
    """Tests for replacing the final segment."""

    @pytest.mark.parametrize(
        ("raw", "name", "expected"),
        [
            ("/path/to/file.txt", "file.md", "/path/to/file.md"),
            ("/path/to/dir", "directory", "/path/to/directory"),
            ("file.txt", "other.txt", "other.txt"),
        ],
    )
    def test_replaces_name(self, raw: str, name: str, expected: str) -> None:
        assert str(make(raw).with_name(name)) == expected

    def test_root_has_empty_name(self) -> None:
        with pytest.raises(PurePathValueError) as exc_info:
            _ = make("/").with_name("name")
        assert str(exc_info.value) == "PurePath('/') has an empty name"

    @pytest.mark.parametrize("name", ["", ".", "..", "a/b"])
    def test_rejects_invalid_name(self, name: str) -> None:
        with pytest.raises(PurePathValueError, match="Invalid name"):
            _ = make("/path/to/file.txt").with_name(name)

    def test_identity_rename(self) -> None:
        path = make("/path/to/.file.tar.gz")
        assert path.with_name(path.name) == path


class TestWithStem:
    """Tests for replacing the stem."""

    @pytest.mark.parametrize(
        ("raw", "stem", "expected"),
        [
            ("/path/to/file.txt", "report", "/path/to/report.txt"),
            ("/path/to/file.tar.gz", "backup", "/path/to/backup.gz"),
            ("/path/to/.file", "visible", "/path/to/visible"),
            ("/path/to/.file.txt", ".env", "/path/to/.env.txt"),
            ("/path/to/dir", "folder", "/path/to/folder"),
        ],
    )
    def test_replaces_stem(self, raw: str, stem: str, expected: str) -> None:
        assert str(make(raw).with_stem(stem)) == expected

    def test_root_has_empty_name(self) -> None:
        with pytest.raises(PurePathValueError, match="has an empty name"):
            _ = make("/").with_stem("stem")

    @pytest.mark.parametrize(
        ("raw", "stem"),
        [
            ("/path/to/file.txt", "a/b"),
            ("/path/to/dir", ""),
            ("/path/to/dir", ".."),
        ],
        ids=["separator", "empty-name", "parent-reference"],
    )
    def test_rejects_invalid_stem(self, raw: str, stem: str, mocker: MockerFixture) -> None:
        mock_logger = mocker.patch("purepath.features.path.domain.pure_path.logger")

        with pytest.raises(PurePathValueError) as exc_info:
            _ = make(raw).with_stem(stem)

        assert str(exc_info.value) == f"Invalid stem '{stem}'"
        extra = mock_logger.debug.call_args.kwargs["extra"]
        assert extra["operation"] == "with_stem"
        assert extra["error_message"] == f"Invalid stem '{stem}'"


class TestWithSuffix:
    """Tests for replacing the last suffix."""

    @pytest.mark.parametrize("suffix", ["md", ".&/", ".", ".tar.gz"])
    def test_rejects_invalid_suffix(self, suffix: str) -> None:
        with pytest.raises(PurePathValueError) as exc_info:
            _ = make("/path/to/file.txt").with_suffix(suffix)
        assert str(exc_info.value) == f"Invalid suffix '{suffix}'"

    def test_rejects_non_str(self) -> None:
        with pytest.raises(PurePathTypeError):
            _ = make("/path/to/file.txt").with_suffix(1)  # pyright: ignore[reportArgumentType]

    @pytest.mark.parametrize(
        ("raw", "suffix", "expected"),
        [
            ("/path/to/file.txt", ".md", "/path/to/file.md"),
            ("/path/to/file.tar.gz", ".zip", "/path/to/file.tar.zip"),
            ("/path/to/.file", ".zip", "/path/to/.file.zip"),
            ("/path/to/.file.txt", ".zip", "/path/to/.file.zip"),
            ("/path/to/.file.tar.gz", ".zip", "/path/to/.file.tar.zip"),
            ("/path/to/file", ".zip", "/path/to/file.zip"),
            ("/path/to/file.txt", "", "/path/to/file"),
        ],
        ids=[
            "single-extension",
            "multiple-extensions",
            "dotfile",
            "dotfile-single-extension",
            "dotfile-multiple-extensions",
            "directory",
            "remove",
        ],
    )
    def test_replaces_last_suffix(self, raw: str, suffix: str, expected: str) -> None:
        assert str(make(raw).with_suffix(suffix)) == expected

    def test_root_has_empty_suffix(self) -> None:
        with pytest.raises(PurePathValueError) as exc_info:
            _ = make("/").with_suffix(".txt")
        assert str(exc_info.value) == "PurePath('/') has an empty suffix"

    def test_identity_suffix(self) -> None:
        path = make("/path/to/file.tar.gz")
        assert path.with_suffix(path.suffix) == path


class TestWithSuffixes:
    """Tests for replacing the whole suffix chain."""

    @pytest.mark.parametrize(
        ("suffixes", "error_type", "message"),
        [
            (".tar.gz", PurePathTypeError, "suffixes should be a list or tuple of str, got str"),
            (["md"], PurePathValueError, "Invalid suffix 'md' at pos 0"),
            ([".&/"], PurePathValueError, "Invalid suffix '.&/' at pos 0"),
            ([".ok", "bad"], PurePathValueError, "Invalid suffix 'bad' at pos 1"),
        ],
        ids=["not-a-sequence", "missing-dot", "invalid-characters", "second-position"],
    )
    def test_rejects_invalid_suffixes(
        self, suffixes: object, error_type: type[PurePathError], message: str
    ) -> None:
        with pytest.raises(error_type) as exc_info:
            _ = make("/path/to/file.txt").with_suffixes(suffixes)  # pyright: ignore[reportArgumentType]
        assert str(exc_info.value) == message

    @pytest.mark.parametrize(
        ("raw", "suffixes", "expected"),
        [
            ("/path/to/file.txt", [".j2"], "/path/to/file.j2"),
            ("/path/to/file.sql", [".sql", ".j2"], "/path/to/file.sql.j2"),
            ("/path/to/file.tar.gz", [".zip"], "/path/to/file.zip"),
            ("/path/to/file.txt.tar.gz", (".md", ".zip"), "/path/to/file.md.zip"),
            ("/path/to/.file", [".zip"], "/path/to/.file.zip"),
            ("/path/to/.file.txt", [".zip"], "/path/to/.file.zip"),
            ("/path/to/.file.tar.gz", [".zip"], "/path/to/.file.zip"),
            ("/path/to/file", [".zip"], "/path/to/file.zip"),
            ("/path/to/file.tar.gz", [], "/path/to/file"),
        ],
    )
    def test_replaces_suffix_chain(
        self, raw: str, suffixes: list[str] | tuple[str, ...], expected: str
    ) -> None:
        assert str(make(raw).with_suffixes(suffixes)) == expected

    def test_root_has_empty_suffix(self) -> None:
        with pytest.raises(PurePathValueError) as exc_info:
            _ = make("/").with_suffixes([".txt"])
        assert str(exc_info.value) == "PurePath('/') has an empty suffix"

    def test_receiver_is_unchanged_on_failure(self) -> None:
        path = make("/path/to/file.txt")
        with pytest.raises(PurePathValueError):
            _ = path.with_suffixes([".ok", "bad"])
        assert path.path == "/path/to/file.txt"
        assert path.suffixes == [".txt"]


class TestPathsWithoutName:
    """Tests for edits on paths ending in a root, ``.`` or ``..``."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("/path/to/file.txt", True),
            ("/", False),
            (".", False),
            ("..", False),
            ("a/../..", False),
        ],
    )
    def test_has_name(self, raw: str, expected: bool) -> None:
        assert make(raw).has_name() is expected

    @pytest.mark.parametrize(
        ("raw", "edit", "message"),
        [
            (".", lambda path: path.with_suffix(".txt"), "PurePath('.') has an empty suffix"),
            (
                "../..",
                lambda path: path.with_suffix(".md"),
                "PurePath('../..') has an empty suffix",
            ),
            ("..", lambda path: path.with_suffixes([".md"]), "PurePath('..') has an empty suffix"),
            (".", lambda path: path.with_name("file.txt"), "PurePath('.') has an empty name"),
            ("../..", lambda path: path.with_stem("file"), "PurePath('../..') has an empty name"),
        ],
        ids=["suffix-curdir", "suffix-pardir", "suffixes-pardir", "name-curdir", "stem-pardir"],
    )
    def test_edits_are_rejected(
        self, raw: str, edit: Callable[[PurePath], PurePath], message: str
    ) -> None:
        with pytest.raises(PurePathValueError) as exc_info:
            _ = edit(make(raw))
        assert str(exc_info.value) == message
