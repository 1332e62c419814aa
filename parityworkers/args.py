"""Command-line argument checking."""

from __future__ import annotations

from collections.abc import Sequence

from .errors import ErrorKind, ParityError

HELP_MSG = (
    "Usage: ./nemergent -f|--file <path/to/config_file.txt> (must be a .txt file)"
)

_HELP_FLAGS = frozenset({"-h", "--help"})
_FILE_FLAGS = frozenset({"-f", "--file"})


class HelpRequested(Exception):
    """Raised when the user asks for the usage text."""

    def __init__(self) -> None:
        super().__init__(HELP_MSG)


def is_help_flag(arg: str) -> bool:
    """Return True for ``-h`` or ``--help``."""
    return arg in _HELP_FLAGS


def is_file_flag(arg: str) -> bool:
    """Return True for ``-f`` or ``--file``."""
    return arg in _FILE_FLAGS


def parse_args(argv: Sequence[str]) -> str:
    """Check the arguments (without program name) and return the config path.

    Raises HelpRequested for a help flag and ParityError for bad arguments.
    """
    if len(argv) not in (1, 2):
        raise ParityError(ErrorKind.NB_ARGS)
    flag = argv[0]
    if is_help_flag(flag):
        raise HelpRequested()
    if is_file_flag(flag):
        if len(argv) != 2:
            raise ParityError(ErrorKind.ROOT_FILE)
        return argv[1]
    raise ParityError(ErrorKind.ARGS)