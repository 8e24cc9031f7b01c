"""Shared enumerations and the error type raised by filesystem operations."""

from __future__ import annotations

from enum import IntEnum


class FilterType(IntEnum):
    """Which directory entries a listing shows."""

    ALL = 0
    VISIBLE = 1
    NON_UTILITY = 2


class ErrorCode(IntEnum):
    """Kinds of failure a filesystem operation can report."""

    NO_ERROR = 0
    PERMISSION_DENIED = 1
    NOT_A_DIRECTORY = 2
    NOT_A_FILE = 3
    SOMETHING_WENT_WRONG = 4
    NO_ENTITY = 5
    ALREADY_EXISTS = 6
    CURRENTLY_IN_USE = 7
    CANT_RESOLVE_LINKS = 8


class FSError(Exception):
    """A failed filesystem operation, with its kind and the path involved."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(code, message)
        self.code = ErrorCode(code)
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.name}: {self.message}"