"""Path tracking and file operations relative to a current directory."""

from __future__ import annotations

import errno
import os
import stat
import sys
from contextlib import contextmanager, suppress
from typing import Iterator, TextIO

from .filters import NameFilter, filter_all, filter_local, resolve_filter
from .types import ErrorCode, FilterType, FSError

DEFAULT_PATH = "/"

_OPEN_CODES = {
    errno.EACCES: ErrorCode.PERMISSION_DENIED,
    errno.EEXIST: ErrorCode.ALREADY_EXISTS,
    errno.EISDIR: ErrorCode.NOT_A_FILE,
    errno.ENOTDIR: ErrorCode.NOT_A_DIRECTORY,
    errno.ENOENT: ErrorCode.NO_ENTITY,
}

_UNLINK_CODES = {
    errno.EPERM: ErrorCode.PERMISSION_DENIED,
    errno.EACCES: ErrorCode.PERMISSION_DENIED,
    errno.EBUSY: ErrorCode.CURRENTLY_IN_USE,
    errno.ELOOP: ErrorCode.CANT_RESOLVE_LINKS,
    errno.ENOTDIR: ErrorCode.NOT_A_DIRECTORY,
    errno.EISDIR: ErrorCode.NOT_A_FILE,
    errno.ENOENT: ErrorCode.NO_ENTITY,
}


class CurrentPath:
    """A directory path that always ends in one slash and remembers where it came from."""

    __slots__ = ("current", "previous")

    def __init__(self, path: str, previous: CurrentPath | None = None) -> None:
        if path.endswith("/"):
            path = path[:-1]
        self.current = path + "/"
        self.previous = previous

    def __str__(self) -> str:
        return self.current

    def __repr__(self) -> str:
        return f"CurrentPath({self.current!r})"

    @property
    def length(self) -> int:
        return len(self.current)

    def add(self, entry: str) -> CurrentPath:
        """Return the path of ``entry`` inside this directory."""
        if entry.endswith("/"):
            entry = entry[:-1]
        return CurrentPath(self.current + entry, previous=self)

    def up(self) -> CurrentPath:
        """Return the parent directory; the root stays where it is."""
        if self.length == 1:
            return self
        cut = self.current.rfind("/", 0, self.length - 1)
        return CurrentPath(self.current[: max(cut, 0)], previous=self)

    def back(self) -> CurrentPath | None:
        """Return the path this one was reached from, if any."""
        return self.previous


def open_error(exc: OSError, path: CurrentPath, name: str = "") -> FSError:
    """Build the error for a failed open, create or list operation."""
    code = _OPEN_CODES.get(exc.errno, ErrorCode.SOMETHING_WENT_WRONG)
    return FSError(code, str(path.add(name)))


def unlink_error(exc: OSError, path: CurrentPath, name: str = "") -> FSError:
    """Build the error for a failed removal."""
    code = _UNLINK_CODES.get(exc.errno, ErrorCode.SOMETHING_WENT_WRONG)
    return FSError(code, str(path.add(name)))


def list_entries(path: CurrentPath, name_filter: NameFilter = filter_all) -> list[str]:
    """Return the sorted names in a directory, ``.`` and ``..`` included, that pass the filter."""
    try:
        names = os.listdir(path.current)
    except OSError as exc:
        raise open_error(exc, path) from exc
    return sorted(name for name in [".", "..", *names] if name_filter(name))


def _mode(path: CurrentPath, name: str) -> int | None:
    try:
        return os.lstat(path.current + name).st_mode
    except OSError:
        return None


def find_entry(path: CurrentPath, name: str, is_dir: bool = True) -> str | None:
    """Return ``name`` if the directory holds a directory (or regular file) of that name."""
    try:
        names = list_entries(path)
    except FSError:
        return None
    if name not in names:
        return None
    mode = _mode(path, name)
    if mode is None:
        return None
    matches = stat.S_ISDIR(mode) if is_dir else stat.S_ISREG(mode)
    return name if matches else None


def print_files_in_dir(
    path: CurrentPath,
    filter_type: FilterType = FilterType.VISIBLE,
    out: TextIO | None = None,
) -> None:
    """Write the directory's entries, one per line; an unreadable directory writes nothing."""
    out = sys.stdout if out is None else out
    try:
        names = list_entries(path, resolve_filter(filter_type))
    except FSError:
        return
    if not names:
        print("\nNo files", file=out)
    for name in names:
        print(name, file=out)


@contextmanager
def _open_dir(path: CurrentPath) -> Iterator[int]:
    try:
        fd = os.open(path.current, os.O_RDONLY | os.O_DIRECTORY)
    except OSError as exc:
        raise open_error(exc, path) from exc
    try:
        yield fd
    finally:
        os.close(fd)


def make_directory(path: CurrentPath, name: str) -> None:
    """Create directory ``name`` inside ``path``."""
    with _open_dir(path) as fd:
        try:
            os.mkdir(name, 0o755, dir_fd=fd)
        except OSError as exc:
            raise open_error(exc, path, name) from exc


def change_directory(path: CurrentPath, name: str) -> CurrentPath:
    """Return the path reached by entering directory ``name`` from ``path``."""
    found = find_entry(path, name, is_dir=True)
    if found is None:
        raise FSError(ErrorCode.NO_ENTITY, str(path))
    if found == "..":
        return path.up()
    if found == ".":
        return path
    return path.add(name)


def create_file(path: CurrentPath, name: str) -> None:
    """Create file ``name`` inside ``path``; an existing file is left as it is."""
    with _open_dir(path) as fd:
        try:
            os.close(os.open(name, os.O_WRONLY | os.O_CREAT, 0o744, dir_fd=fd))
        except OSError as exc:
            raise open_error(exc, path, name) from exc


def remove_file(path: CurrentPath, name: str) -> None:
    """Remove file ``name`` from ``path``."""
    with _open_dir(path) as fd:
        try:
            os.unlink(name, dir_fd=fd)
        except OSError as exc:
            raise unlink_error(exc, path, name) from exc


def remove_directory(path: CurrentPath, name: str) -> None:
    """Remove directory ``name`` and everything in it from ``path``."""
    remove_all_files_from_dir(path.add(name))
    with _open_dir(path) as fd:
        try:
            os.rmdir(name, dir_fd=fd)
        except OSError as exc:
            raise unlink_error(exc, path) from exc


def remove_all_files_from_dir(path: CurrentPath) -> None:
    """Remove every file and subdirectory inside ``path``, keeping ``path`` itself."""
    for name in list_entries(path, filter_local):
        mode = _mode(path, name)
        if mode is not None and stat.S_ISDIR(mode):
            # A failing subdirectory surfaces later, when its parent cannot be removed.
            with suppress(FSError):
                remove_directory(path, name)
        elif mode is not None and stat.S_ISREG(mode):
            remove_file(path, name)
        else:
            raise FSError(ErrorCode.SOMETHING_WENT_WRONG, "Something went wrong")