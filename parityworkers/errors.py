"""Error kinds reported by the command and the exception that carries them."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO

EXIT_FAILURE = 1


class ErrorKind(IntEnum):
    """The kinds of user-facing errors, with their numeric codes."""

    NB_ARGS = 1
    ROOT_FILE = 2
    ARGS = 3
    EXT_FILE = 4
    NO_DATA = 5
    INT_MAX = 6

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    ErrorKind.NB_ARGS: "Incorrect number of arguments",
    ErrorKind.ROOT_FILE: "Root config file is required",
    ErrorKind.ARGS: "Invalid argument: Use -h or --help for usage information",
    ErrorKind.EXT_FILE: "Incorrect extension file (must be .txt)",
    ErrorKind.NO_DATA: (
        "Invalid or missing configuration value (expected format: key = value)"
    ),
    ErrorKind.INT_MAX: "Value exceeds maximum allowed integer (INT_MAX)",
}


class ParityError(Exception):
    """A user-facing error of a known kind."""

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.message)
        self.kind = kind


def report_error(error: ParityError, stream: TextIO | None = None) -> int:
    """Write the error's message on its own line and return the failure code."""
    if stream is None:
        stream = sys.stdout
    stream.write(f"{error}\n")
    return EXIT_FAILURE