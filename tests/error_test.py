import builtins
import errno
import os

import pytest

from fsutils.core.error import AlreadyExistsError
from fsutils.core.error import BaseError
from fsutils.core.error import FilesystemError
from fsutils.core.error import IOFailureError
from fsutils.core.error import NotADirectoryError
from fsutils.core.error import NotAFileError
from fsutils.core.error import NotFoundError
from fsutils.core.error import PermissionDeniedError
from fsutils.core.error import SameFileError
from fsutils.core.error import reraise
from fsutils.core.error import translate


@pytest.mark.unit
class TestFilesystemError:
    def test_message_includes_path(self):
        error = NotFoundError("No such file or directory", path="a/x.txt")
        assert error.path == "a/x.txt"
        assert str(error) == "No such file or directory (Path: 'a/x.txt')"
        assert repr(error).startswith("<NotFoundError(message=")

    def test_message_without_path(self):
        error = FilesystemError("something broke")
        assert error.path is None
        assert str(error) == "something broke"

    def test_pathlike(self, tmp_path):
        error = IOFailureError("failed", path=tmp_path)
        assert error.path == os.fspath(tmp_path)

    @pytest.mark.parametrize(
        "klass, builtin",
        [
            (NotFoundError, FileNotFoundError),
            (NotADirectoryError, builtins.NotADirectoryError),
            (NotAFileError, IsADirectoryError),
            (PermissionDeniedError, PermissionError),
            (AlreadyExistsError, FileExistsError),
            (IOFailureError, OSError),
            (SameFileError, OSError),
        ],
    )
    def test_hierarchy(self, klass, builtin):
        error = klass("failed", path="p")
        assert isinstance(error, FilesystemError)
        assert isinstance(error, BaseError)
        assert isinstance(error, builtin)
        assert isinstance(error, OSError)


@pytest.mark.unit
class TestTranslate:
    @pytest.mark.parametrize(
        "code, expected",
        [
            (errno.ENOENT, NotFoundError),
            (errno.ENOTDIR, NotADirectoryError),
            (errno.EISDIR, NotAFileError),
            (errno.EACCES, PermissionDeniedError),
            (errno.EPERM, PermissionDeniedError),
            (errno.EEXIST, AlreadyExistsError),
            (errno.ENOSPC, IOFailureError),
        ],
    )
    def test_errno_mapping(self, code, expected):
        original = OSError(code, os.strerror(code), "some/path")
        translated = translate(original)
        assert type(translated) is expected
        assert translated.path == "some/path"
        assert os.strerror(code) in str(translated)
        assert translated.errno == code
        assert translated.strerror == os.strerror(code)

    def test_explicit_path_wins(self):
        original = OSError(errno.ENOENT, "missing", "inner")
        assert translate(original, "outer").path == "outer"

    def test_library_error_passes_through(self):
        error = NotFoundError("missing", path="p")
        assert translate(error) is error

    def test_without_errno(self):
        translated = translate(OSError("odd failure"))
        assert type(translated) is IOFailureError
        assert translated.path is None

    def test_caught_as_builtin_with_errno(self, tmp_path):
        with pytest.raises(PermissionError) as exc:
            with reraise(tmp_path):
                raise PermissionError(errno.EACCES, "denied", "p")
        assert isinstance(exc.value, PermissionDeniedError)
        assert exc.value.errno == errno.EACCES


@pytest.mark.unit
class TestReraise:
    def test_chains_original(self):
        with pytest.raises(NotFoundError) as exc:
            with reraise("a/b"):
                raise FileNotFoundError(errno.ENOENT, "missing", "a/b")
        assert exc.value.path == "a/b"
        assert isinstance(exc.value.__cause__, FileNotFoundError)

    def test_library_errors_untouched(self):
        error = NotAFileError("is a directory", path="inner")
        with pytest.raises(NotAFileError) as exc:
            with reraise("outer"):
                raise error
        assert exc.value is error

    def test_other_exceptions_untouched(self):
        with pytest.raises(ValueError):
            with reraise("p"):
                raise ValueError("not an os error")

    def test_no_error(self):
        with reraise("p"):
            value = 1
        assert value == 1


if __name__ == "__main__":
    pytest.main([__file__])
