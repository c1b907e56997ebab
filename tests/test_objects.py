"""Tests for the object store collectors."""

import os
import sys

import pytest

from git_bugreport.collectors import (
    AlternatesCollector,
    CollectionContext,
    LooseObjectCollector,
    ObjectInfoCollector,
    PackedObjectCollector,
)
from git_bugreport.collectors.objects import (
    alternates_summary,
    info_directory_listing,
    loose_object_counts,
    packed_object_listing,
)
from git_bugreport.git.repository import Repository
from git_bugreport.settings import BugreportSettings


def _touch(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x")


class TestLooseObjectCounts:
    """Tests for loose_object_counts."""

    def test_counts_hex_directories_only(self, object_dir):
        """Only two-hex-digit directories are listed, with file counts."""
        for name in ("1111", "2222", "3333"):
            _touch(object_dir / "ab" / name)
        (object_dir / "cd").mkdir()
        _touch(object_dir / "xy" / "4444")
        _touch(object_dir / "abc" / "5555")
        (object_dir / "pack").mkdir()
        (object_dir / "info").mkdir()

        body = loose_object_counts(object_dir)
        assert sorted(body.splitlines()) == ["ab: 3", "cd: 0"]
        assert "xy" not in body

    def test_hex_check_is_case_insensitive(self, object_dir):
        """Upper-case hex names qualify too."""
        _touch(object_dir / "AF" / "1")
        assert loose_object_counts(object_dir) == "AF: 1\n"

    def test_counts_regular_files_only(self, object_dir):
        """Nested directories are not counted."""
        _touch(object_dir / "0a" / "1")
        (object_dir / "0a" / "nested").mkdir()
        assert loose_object_counts(object_dir) == "0a: 1\n"

    def test_hex_named_file_skipped(self, object_dir):
        """A regular file with a hex name is not a fan-out directory."""
        _touch(object_dir / "ff")
        assert loose_object_counts(object_dir) == ""

    def test_unreachable_object_directory(self, tmp_path):
        """A missing directory gives one diagnostic line."""
        missing = tmp_path / "missing"
        assert loose_object_counts(missing) == f"could not open object directory '{missing}'\n"


class TestPackedObjectListing:
    """Tests for packed_object_listing."""

    def test_lists_every_entry(self, object_dir):
        """Every entry is listed by full path."""
        pack_dir = object_dir / "pack"
        _touch(pack_dir / "pack-1234.pack")
        _touch(pack_dir / "pack-1234.idx")
        (pack_dir / "tmp").mkdir()

        lines = packed_object_listing(object_dir).splitlines()
        assert sorted(lines) == sorted(
            str(pack_dir / name) for name in ("pack-1234.pack", "pack-1234.idx", "tmp")
        )

    def test_empty_pack_directory(self, object_dir):
        """An empty directory gives an empty section."""
        (object_dir / "pack").mkdir()
        assert packed_object_listing(object_dir) == ""

    def test_missing_pack_directory(self, object_dir):
        """A missing directory gives one diagnostic line."""
        expected = f"could not open directory '{object_dir / 'pack'}'\n"
        assert packed_object_listing(object_dir) == expected


class TestInfoDirectoryListing:
    """Tests for info_directory_listing."""

    def test_nested_directory_depth_first(self, object_dir):
        """A subdirectory with one file gives two lines, parent first."""
        info_dir = object_dir / "info"
        _touch(info_dir / "sub" / "file")

        assert info_directory_listing(object_dir).splitlines() == [
            str(info_dir / "sub"),
            str(info_dir / "sub" / "file"),
        ]

    def test_children_follow_their_directory(self, object_dir):
        """Each directory's contents come right after it."""
        info_dir = object_dir / "info"
        _touch(info_dir / "packs")
        _touch(info_dir / "a" / "b" / "c")

        lines = info_directory_listing(object_dir).splitlines()
        assert len(lines) == 4
        a_index = lines.index(str(info_dir / "a"))
        assert lines[a_index + 1] == str(info_dir / "a" / "b")
        assert lines[a_index + 2] == str(info_dir / "a" / "b" / "c")

    def test_missing_info_directory(self, object_dir):
        """A missing directory gives one diagnostic line."""
        expected = f"could not open directory '{object_dir / 'info'}'\n"
        assert info_directory_listing(object_dir) == expected

    def test_depth_limit(self, object_dir):
        """Directories past the limit are listed but not entered."""
        info_dir = object_dir / "info"
        _touch(info_dir / "a" / "b" / "c")

        lines = info_directory_listing(object_dir, max_depth=2).splitlines()
        assert lines == [str(info_dir / "a"), str(info_dir / "a" / "b")]

    @pytest.mark.skipif(sys.platform == "win32", reason="needs symlinks")
    def test_symlink_cycle_entered_once(self, object_dir):
        """A link back to an ancestor is listed but not followed."""
        info_dir = object_dir / "info"
        (info_dir / "sub").mkdir(parents=True)
        os.symlink(info_dir, info_dir / "sub" / "loop")

        lines = info_directory_listing(object_dir).splitlines()
        assert lines == [str(info_dir / "sub"), str(info_dir / "sub" / "loop")]


class TestAlternatesSummary:
    """Tests for alternates_summary."""

    def test_no_alternates_file(self, object_dir):
        """A missing file is reported plainly."""
        assert alternates_summary(object_dir) == "No alternates file found.\n"

    def test_working_and_broken(self, object_dir, tmp_path):
        """Reachable and unreachable paths are counted separately."""
        reachable = tmp_path / "other" / "objects"
        reachable.mkdir(parents=True)
        (object_dir / "info").mkdir()
        (object_dir / "info" / "alternates").write_text(
            f"{reachable}\n{tmp_path / 'gone' / 'objects'}\n"
        )
        assert alternates_summary(object_dir) == "2 alternates found (1 working, 1 broken)\n"

    def test_relative_paths_resolve_against_object_dir(self, object_dir, tmp_path):
        """Relative entries are taken from the object directory."""
        (tmp_path / "shared").mkdir()
        (object_dir / "info").mkdir()
        (object_dir / "info" / "alternates").write_text("../shared\n")
        assert alternates_summary(object_dir) == "1 alternates found (1 working, 0 broken)\n"

    def test_comments_and_blank_lines_skipped(self, object_dir, tmp_path):
        """Comments and blank lines are not alternates."""
        (object_dir / "info").mkdir()
        (object_dir / "info" / "alternates").write_text(
            f"# shared store\n\n{tmp_path / 'nowhere'}\n"
        )
        assert alternates_summary(object_dir) == "1 alternates found (0 working, 1 broken)\n"

    def test_empty_file(self, object_dir):
        """An empty file lists no alternates."""
        (object_dir / "info").mkdir()
        (object_dir / "info" / "alternates").write_text("")
        assert alternates_summary(object_dir) == "0 alternates found (0 working, 0 broken)\n"

    def test_nul_byte_counts_as_broken(self, object_dir, tmp_path):
        """A corrupt entry is broken, not an error."""
        (tmp_path / "shared").mkdir()
        (object_dir / "info").mkdir()
        (object_dir / "info" / "alternates").write_bytes(
            b"/tmp\x00bad\n" + os.fsencode(tmp_path / "shared") + b"\n"
        )
        assert alternates_summary(object_dir) == "2 alternates found (1 working, 1 broken)\n"

    @pytest.mark.skipif(not sys.platform.startswith("linux"), reason="needs byte file names")
    def test_non_utf8_path_is_checked_as_bytes(self, object_dir, tmp_path):
        """A directory whose name is not UTF-8 is still found."""
        target = os.fsencode(tmp_path) + b"/caf\xe9"
        os.mkdir(target)
        (object_dir / "info").mkdir()
        (object_dir / "info" / "alternates").write_bytes(target + b"\n")
        assert alternates_summary(object_dir) == "1 alternates found (1 working, 0 broken)\n"


class TestObjectStoreCollectors:
    """Tests for the collector classes."""

    COLLECTORS = [
        LooseObjectCollector,
        PackedObjectCollector,
        ObjectInfoCollector,
        AlternatesCollector,
    ]

    @pytest.mark.parametrize("collector_class", COLLECTORS)
    def test_outside_repository(self, collector_class, make_runner):
        """Each collector prints one line outside a repository."""
        context = CollectionContext(runner=make_runner(), repository=None)
        body = collector_class().collect(context)
        assert body == "not run from a git repository - no objects to show\n"

    def test_uses_repository_object_dir(self, make_runner, object_dir, tmp_path):
        """Collectors read the repository's object directory."""
        _touch(object_dir / "12" / "3456")
        repository = Repository(
            git_dir=tmp_path, object_dir=object_dir, hooks_dir=tmp_path / "hooks"
        )
        context = CollectionContext(runner=make_runner(), repository=repository)
        assert LooseObjectCollector().collect(context) == "12: 1\n"
        assert AlternatesCollector().collect(context) == "No alternates file found.\n"

    def test_info_collector_uses_depth_setting(self, make_runner, object_dir, tmp_path):
        """The info walk honours max_info_depth."""
        info_dir = object_dir / "info"
        _touch(info_dir / "a" / "b")
        repository = Repository(
            git_dir=tmp_path, object_dir=object_dir, hooks_dir=tmp_path / "hooks"
        )
        context = CollectionContext(
            runner=make_runner(),
            repository=repository,
            settings=BugreportSettings(max_info_depth=1),
        )
        assert ObjectInfoCollector().collect(context) == f"{info_dir / 'a'}\n"
