"""A filesystem viewer that tracks a current directory and reports failures."""

from __future__ import annotations

import sys
from typing import TextIO

from . import paths
from .filters import resolve_filter
from .paths import DEFAULT_PATH, CurrentPath
from .settings import Settings
from .types import ErrorCode, FilterType, FSError

_DESCRIPTIONS = {
    ErrorCode.PERMISSION_DENIED: "Permission denied in {}",
    ErrorCode.NOT_A_DIRECTORY: "Not a directory in {}",
    ErrorCode.NOT_A_FILE: "Not a file in {}",
    ErrorCode.NO_ENTITY: "Unable to open directory in {}",
    ErrorCode.ALREADY_EXISTS: "Cant create file/directory file already exists in {}",
    ErrorCode.CURRENTLY_IN_USE: "Cant process file/dir. File is open in {}",
    ErrorCode.CANT_RESOLVE_LINKS: "Problem with resolving links in {}",
}


def describe_error(error: FSError, function_name: str) -> str:
    """Return the report for a failed operation; an error without a failure gives ''."""
    if error.code is ErrorCode.NO_ERROR:
        return ""
    template = _DESCRIPTIONS.get(error.code, "Cant resolve error in {}")
    return f"{template.format(function_name)}\nAdditional message is: {error.message}\n"


class FSAccess:
    """Filesystem access rooted at a current directory, with its own settings.

    Operations that fail write a report to the output stream instead of raising.
    """

    def __init__(self, path: str = DEFAULT_PATH, out: TextIO | None = None) -> None:
        self.path = CurrentPath(path)
        self.settings = Settings()
        self._out = out

    @property
    def out(self) -> TextIO:
        return sys.stdout if self._out is None else self._out

    def _report(self, error: FSError, function_name: str) -> None:
        self.out.write(describe_error(error, function_name))

    def files_in_dir(self) -> list[str]:
        """Return the names in the current directory that pass the current filter."""
        return paths.list_entries(
            self.path, resolve_filter(self.settings.current_filter_type)
        )

    def print_files_in_current_dir(self) -> None:
        """Write the current directory's entries, one per line."""
        paths.print_files_in_dir(self.path, self.settings.current_filter_type, self.out)

    def change_filter_type(self, filter_type: FilterType | int) -> None:
        """Switch the filter used for listings."""
        self.settings.change_filter_mode(filter_type)

    def change_directory(self, name: str) -> None:
        """Enter directory ``name``; ``..`` goes up and ``.`` stays."""
        try:
            self.path = paths.change_directory(self.path, name)
        except FSError as error:
            self._report(error, "change_directory")

    def make_directory(self, name: str) -> None:
        """Create directory ``name`` in the current directory."""
        try:
            paths.make_directory(self.path, name)
        except FSError as error:
            self._report(error, "make_directory")

    def create_file(self, name: str) -> None:
        """Create file ``name`` in the current directory."""
        try:
            paths.create_file(self.path, name)
        except FSError as error:
            self._report(error, "create_file")

    def remove_file(self, name: str) -> None:
        """Remove file ``name`` from the current directory."""
        try:
            paths.remove_file(self.path, name)
        except FSError as error:
            self._report(error, "remove_file")

    def remove_directory(self, name: str) -> None:
        """Remove directory ``name`` and all it holds from the current directory."""
        try:
            paths.remove_directory(self.path, name)
        except FSError as error:
            self._report(error, "remove_directory")