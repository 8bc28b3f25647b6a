import os
import stat
import sys
import time

import pytest

from fsutils.core.error import AlreadyExistsError
from fsutils.core.error import NotADirectoryError
from fsutils.core.error import NotAFileError
from fsutils.core.error import NotFoundError
from fsutils.core.error import SameFileError
from fsutils.utils.filesystem import copy_file
from fsutils.utils.filesystem import dir_exists
from fsutils.utils.filesystem import file_exists
from fsutils.utils.filesystem import get_dir_list
from fsutils.utils.filesystem import get_file_list
from fsutils.utils.filesystem import get_list
from fsutils.utils.filesystem import mkdir
from fsutils.utils.filesystem import move_dir
from fsutils.utils.filesystem import move_file
from fsutils.utils.filesystem import mv
from fsutils.utils.filesystem import rmdir
from fsutils.utils.filesystem import symlink
from fsutils.utils.filesystem import touch


@pytest.fixture
def workspace(tmp_path):
    (tmp_path / "subdir").mkdir()
    (tmp_path / "other").mkdir()
    for index in range(1, 4):
        (tmp_path / "subdir" / f"file-{index}").touch()
    (tmp_path / "test.txt").write_text("content")
    return tmp_path


@pytest.mark.unit
class TestExists:
    def test_file_exists(self, workspace):
        assert file_exists(workspace / "test.txt") is True
        assert file_exists(workspace / "subdir") is False
        assert file_exists(workspace / "missing") is False

    def test_dir_exists(self, workspace):
        assert dir_exists(workspace / "subdir") is True
        assert dir_exists(workspace / "test.txt") is False
        assert dir_exists(workspace / "missing") is False


@pytest.mark.unit
class TestListing:
    def test_get_dir_list(self, workspace):
        assert get_dir_list(workspace) == ["other", "subdir"]

    def test_get_file_list(self, workspace):
        assert get_file_list(workspace / "subdir") == [
            "file-1",
            "file-2",
            "file-3",
        ]
        assert get_file_list(workspace) == ["test.txt"]

    def test_get_list(self, workspace):
        assert get_list(workspace) == ["other", "subdir", "test.txt"]

    def test_missing_directory(self, workspace):
        with pytest.raises(NotFoundError):
            get_list(workspace / "missing")

    def test_not_a_directory(self, workspace):
        with pytest.raises(NotADirectoryError):
            get_list(workspace / "test.txt")


@pytest.mark.integration
class TestCreateAndRemove:
    def test_mkdir_nested_and_idempotent(self, tmp_path):
        path = str(tmp_path / "a" / "b" / "c")
        assert mkdir(path) == path
        assert mkdir(path) == path
        assert os.path.isdir(path)

    def test_mkdir_over_file(self, workspace):
        with pytest.raises(AlreadyExistsError):
            mkdir(str(workspace / "test.txt"))

    def test_mkdir_and_touch_accept_pathlike(self, tmp_path):
        directory = tmp_path / "pathlike"
        assert mkdir(directory) == directory
        assert touch(directory / "new.txt") == directory / "new.txt"
        assert (directory / "new.txt").is_file()


    def test_touch_creates_empty_file(self, tmp_path):
        path = str(tmp_path / "new.txt")
        assert touch(path) == path
        assert os.path.getsize(path) == 0

    def test_touch_keeps_content_and_updates_mtime(self, workspace):
        path = workspace / "test.txt"
        past = time.time() - 3600
        os.utime(path, (past, past))
        touch(str(path))
        assert path.read_text() == "content"
        assert path.stat().st_mtime > past + 1800

    def test_touch_missing_parent(self, tmp_path):
        with pytest.raises(NotFoundError):
            touch(str(tmp_path / "missing" / "new.txt"))

    def test_rmdir(self, workspace):
        rmdir(workspace / "subdir")
        assert not (workspace / "subdir").exists()

    def test_rmdir_missing_is_noop(self, tmp_path):
        rmdir(tmp_path / "missing")

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX symlinks")
    def test_symlink(self, workspace):
        link = workspace / "link.txt"
        symlink("test.txt", link)
        assert os.readlink(link) == "test.txt"
        assert link.read_text() == "content"
        with pytest.raises(AlreadyExistsError):
            symlink("test.txt", link)


@pytest.mark.integration
class TestMove:
    def test_move_file(self, workspace):
        move_file(workspace / "test.txt", workspace / "moved.txt")
        assert not (workspace / "test.txt").exists()
        assert (workspace / "moved.txt").read_text() == "content"

    def test_move_file_rejects_directory(self, workspace):
        with pytest.raises(NotAFileError, match="use move_dir or mv"):
            move_file(workspace / "subdir", workspace / "moved")
        assert (workspace / "subdir").is_dir()

    def test_move_file_missing(self, workspace):
        with pytest.raises(NotFoundError):
            move_file(workspace / "missing", workspace / "moved")

    def test_move_dir(self, workspace):
        move_dir(workspace / "subdir", workspace / "moved")
        assert get_file_list(workspace / "moved") == [
            "file-1",
            "file-2",
            "file-3",
        ]

    def test_move_dir_rejects_file(self, workspace):
        with pytest.raises(NotADirectoryError, match="use move_file or mv"):
            move_dir(workspace / "test.txt", workspace / "moved")

    def test_mv(self, workspace):
        mv(workspace / "test.txt", workspace / "moved.txt")
        mv(workspace / "subdir", workspace / "moved")
        assert (workspace / "moved.txt").is_file()
        assert (workspace / "moved").is_dir()

    def test_mv_missing(self, workspace):
        with pytest.raises(NotFoundError):
            mv(workspace / "missing", workspace / "moved")


@pytest.mark.integration
class TestCopyFile:
    def test_copy(self, workspace):
        copy_file(workspace / "test.txt", workspace / "copy.txt")
        assert (workspace / "copy.txt").read_text() == "content"
        assert (workspace / "test.txt").read_text() == "content"

    def test_truncates_destination(self, workspace):
        (workspace / "copy.txt").write_text("a much longer previous content")
        copy_file(workspace / "test.txt", workspace / "copy.txt")
        assert (workspace / "copy.txt").read_text() == "content"

    def test_rejects_directory(self, workspace):
        with pytest.raises(NotAFileError):
            copy_file(workspace / "subdir", workspace / "copy")
        assert not (workspace / "copy").exists()

    def test_missing_source_leaves_no_destination(self, workspace):
        with pytest.raises(NotFoundError) as exc:
            copy_file(workspace / "missing", workspace / "copy.txt")
        assert exc.value.path == str(workspace / "missing")
        assert not (workspace / "copy.txt").exists()

    def test_missing_destination_parent(self, workspace):
        with pytest.raises(NotFoundError) as exc:
            copy_file(workspace / "test.txt", workspace / "no" / "copy.txt")
        assert exc.value.path == str(workspace / "no" / "copy.txt")

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX modes")
    def test_preserve_mode(self, workspace):
        os.chmod(workspace / "test.txt", 0o751)
        copy_file(workspace / "test.txt", workspace / "copy.txt")
        mode = stat.S_IMODE(os.stat(workspace / "copy.txt").st_mode)
        assert mode == 0o751

    def test_onto_itself(self, workspace):
        with pytest.raises(SameFileError) as exc:
            copy_file(workspace / "test.txt", workspace / "test.txt")
        assert exc.value.path == str(workspace / "test.txt")
        assert (workspace / "test.txt").read_text() == "content"

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX symlinks")
    def test_onto_link_to_itself(self, workspace):
        os.symlink(workspace / "test.txt", workspace / "alias.txt")
        with pytest.raises(SameFileError):
            copy_file(workspace / "test.txt", workspace / "alias.txt")
        assert (workspace / "test.txt").read_text() == "content"



if __name__ == "__main__":
    pytest.main([__file__])
