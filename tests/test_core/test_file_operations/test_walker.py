"""Tests for the source tree walker."""

import os
import stat
from unittest.mock import patch

import pytest

from fastpaste.core.errors import CopyError
from fastpaste.core.file_operations import CopyJob, TreeWalker


class TestTreeWalkerFileMode:
    """Walking a single file yields exactly one job."""

    def test_file_to_new_name(self, tmp_path):
        src = tmp_path / "note.txt"
        src.write_text("n")
        dst = tmp_path / "note_copy.txt"

        jobs = list(TreeWalker().walk(str(dst), str(src)))

        assert jobs == [CopyJob(to=str(dst), from_=str(src))]

    def test_file_into_existing_directory(self, tmp_path):
        src = tmp_path / "note.txt"
        src.write_text("n")
        target_dir = tmp_path / "backup"
        target_dir.mkdir()

        jobs = list(TreeWalker().walk(str(target_dir), str(src)))

        assert jobs == [CopyJob(to=str(target_dir / "note.txt"), from_=str(src))]

    def test_missing_source_yields_nothing(self, tmp_path):
        walker = TreeWalker()

        assert list(walker.walk(str(tmp_path / "out"), str(tmp_path / "gone"))) == []
        assert not (tmp_path / "out").exists()

    def test_same_path_yields_nothing(self, sample_tree):
        assert list(TreeWalker().walk(str(sample_tree), str(sample_tree))) == []


class TestTreeWalkerDirectoryMode:
    """Walking a directory creates directories and yields file jobs."""

    def test_into_existing_directory(self, sample_tree, tmp_path):
        """The tree lands under its own basename inside the destination."""
        dst = tmp_path / "dst"
        dst.mkdir()
        walker = TreeWalker()

        jobs = list(walker.walk(str(dst), str(sample_tree)))

        root = dst / "src"
        assert sorted(job.to for job in jobs) == sorted(
            [
                str(root / "a.txt"),
                str(root / "sub" / "b.txt"),
                str(root / "sub" / "deeper" / "c.bin"),
            ]
        )
        assert (root / "empty").is_dir()
        assert walker.directories_created == 4

    def test_to_missing_destination_renames_root(self, sample_tree, tmp_path):
        """A destination that does not exist becomes the root's new name."""
        dst = tmp_path / "renamed"

        jobs = list(TreeWalker().walk(str(dst), str(sample_tree)))

        assert CopyJob(to=str(dst / "a.txt"), from_=str(sample_tree / "a.txt")) in jobs
        assert (dst / "sub" / "deeper").is_dir()
        assert not (dst / "src").exists()

    def test_directories_exist_before_jobs(self, sample_tree, tmp_path):
        """Every job's parent directory exists when the job is yielded."""
        dst = tmp_path / "dst"

        for job in TreeWalker().walk(str(dst), str(sample_tree)):
            assert os.path.isdir(os.path.dirname(job.to))

    def test_existing_destination_directories_are_reused(self, sample_tree, tmp_path):
        """Re-walking into a populated destination does not fail."""
        dst = tmp_path / "dst"
        list(TreeWalker().walk(str(dst), str(sample_tree)))

        walker = TreeWalker()
        jobs = list(walker.walk(str(dst), str(sample_tree)))

        assert len(jobs) == 3
        assert walker.directories_created == 0

    def test_directory_mode_is_copied(self, tmp_path):
        src = tmp_path / "src"
        (src / "private").mkdir(parents=True)
        os.chmod(src / "private", 0o750)
        dst = tmp_path / "dst"

        list(TreeWalker().walk(str(dst), str(src)))

        assert stat.S_IMODE(os.stat(dst / "private").st_mode) == 0o750

    @pytest.mark.skipif(
        hasattr(os, "geteuid") and os.geteuid() == 0,
        reason="root ignores directory permissions",
    )
    def test_read_only_directory_mode_is_deferred(self, tmp_path):
        """A read-only directory stays writable until restore_modes runs."""
        src = tmp_path / "src"
        locked = src / "locked"
        locked.mkdir(parents=True)
        (locked / "inner.txt").write_text("x")
        os.chmod(locked, 0o555)
        dst = tmp_path / "dst"
        walker = TreeWalker()

        try:
            jobs = list(walker.walk(str(dst), str(src)))
            assert os.access(dst / "locked", os.W_OK)
            assert [job.to for job in jobs] == [str(dst / "locked" / "inner.txt")]

            walker.restore_modes()

            assert stat.S_IMODE(os.stat(dst / "locked").st_mode) == 0o555
        finally:
            os.chmod(locked, 0o755)
            if (dst / "locked").exists():
                os.chmod(dst / "locked", 0o755)

    def test_destination_inside_source_raises(self, sample_tree):
        """Copying a tree into its own subtree is refused."""
        with pytest.raises(CopyError, match="own subtree"):
            list(TreeWalker().walk(str(sample_tree / "sub"), str(sample_tree)))

    def test_file_in_place_of_directory_raises(self, sample_tree, tmp_path):
        """A file occupying a destination directory's name is an error."""
        dst = tmp_path / "dst"
        dst.mkdir()
        (dst / "src").write_text("in the way")

        with pytest.raises(CopyError, match="not a directory"):
            list(TreeWalker().walk(str(dst), str(sample_tree)))

    def test_unreadable_directory_raises(self, sample_tree, tmp_path):
        """A listing failure stops the walk with a CopyError."""
        with (
            patch(
                "fastpaste.core.file_operations.walker.os.scandir",
                side_effect=PermissionError("denied"),
            ),
            pytest.raises(CopyError, match="Cannot list directory") as exc_info,
        ):
            list(TreeWalker().walk(str(tmp_path / "dst"), str(sample_tree)))

        assert exc_info.value.path == str(sample_tree)


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not available")
class TestTreeWalkerSymlinks:
    """Symbolic links inside the tree."""

    def test_link_to_file_is_copied_as_file(self, tmp_path):
        src = tmp_path / "src"
        src.mkdir()
        (src / "real.txt").write_text("data")
        os.symlink(src / "real.txt", src / "link.txt")

        jobs = list(TreeWalker().walk(str(tmp_path / "dst"), str(src)))

        assert sorted(os.path.basename(job.to) for job in jobs) == [
            "link.txt",
            "real.txt",
        ]

    def test_link_to_directory_is_skipped(self, tmp_path):
        src = tmp_path / "src"
        (src / "real").mkdir(parents=True)
        (src / "real" / "inner.txt").write_text("data")
        os.symlink(src / "real", src / "loop")
        dst = tmp_path / "dst"

        jobs = list(TreeWalker().walk(str(dst), str(src)))

        assert [job.to for job in jobs] == [str(dst / "real" / "inner.txt")]
        assert not (dst / "loop").exists()

    def test_broken_link_is_skipped(self, tmp_path):
        src = tmp_path / "src"
        src.mkdir()
        (src / "real.txt").write_text("data")
        os.symlink(src / "nowhere", src / "dangling")
        dst = tmp_path / "dst"

        jobs = list(TreeWalker().walk(str(dst), str(src)))

        assert [job.to for job in jobs] == [str(dst / "real.txt")]


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="named pipes not available")
class TestTreeWalkerSpecialFiles:
    """Entries that are neither directories nor regular files."""

    def test_fifo_in_tree_is_skipped(self, tmp_path):
        src = tmp_path / "src"
        src.mkdir()
        (src / "real.txt").write_text("data")
        os.mkfifo(src / "pipe")
        dst = tmp_path / "dst"

        jobs = list(TreeWalker().walk(str(dst), str(src)))

        assert [job.to for job in jobs] == [str(dst / "real.txt")]
        assert not (dst / "pipe").exists()

    def test_fifo_as_source_yields_nothing(self, tmp_path):
        os.mkfifo(tmp_path / "pipe")

        jobs = list(TreeWalker().walk(str(tmp_path / "out"), str(tmp_path / "pipe")))

        assert jobs == []


class TestTreeWalkerRelativePaths:
    """Relative arguments resolve against the working directory."""

    def test_relative_root_into_directory(self, sample_tree, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "dst").mkdir()

        cwd = os.getcwd()

        jobs = list(TreeWalker().walk("dst", "src"))

        assert CopyJob(
            to=os.path.join(cwd, "dst", "src", "a.txt"),
            from_=os.path.join(cwd, "src", "a.txt"),
        ) in jobs
        assert (tmp_path / "dst" / "src" / "sub" / "deeper").is_dir()

    def test_relative_file_into_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "note.txt").write_text("n")
        (tmp_path / "backup").mkdir()

        cwd = os.getcwd()

        jobs = list(TreeWalker().walk("backup", "note.txt"))

        assert jobs == [
            CopyJob(
                to=os.path.join(cwd, "backup", "note.txt"),
                from_=os.path.join(cwd, "note.txt"),
            )
        ]
