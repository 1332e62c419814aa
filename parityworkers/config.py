"""Reading and validating the ``key = value`` configuration file."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass

from .errors import ErrorKind, ParityError

NB_PER_THREAD = "numbers_per_thread"
THREAD_NUM = "thread_num"

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_TRIM_SET = "\t\n\r\v\f"
_C_SPACE = " \t\n\v\f\r"


@dataclass
class Config:
    """How many workers to run and how many numbers each one draws."""

    nb_per_thread: int = 0
    thread_num: int = 0


def has_txt_extension(path: str | os.PathLike[str]) -> bool:
    """Return True if the path ends with ``.txt``."""
    return os.fspath(path).endswith(".txt")


def split_words(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def key_value(line: str, key: str) -> str | None:
    """Return the value of a ``key = value`` line for the given key, else None.

    Only the first three space-separated words count; each is trimmed of
    tabs and line-break characters.
    """
    words = split_words(line, " ")
    if len(words) < 3:
        return None
    name, equals, value = (word.strip(_TRIM_SET) for word in words[:3])
    if name == key and equals == "=":
        return value
    return None


def parse_int(text: str) -> int:
    """Read a leading decimal integer like ``atoi``; 0 when there is none.

    The result is clamped to the 32-bit signed range.
    """
    rest = text.lstrip(_C_SPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    digits = ""
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits += char
    if not digits:
        return 0
    return max(INT_MIN, min(INT_MAX, sign * int(digits)))


def parse_lines(lines: Iterable[str]) -> Config:
    """Build a Config from lines; later lines override earlier ones."""
    config = Config()
    for line in lines:
        value = key_value(line, NB_PER_THREAD)
        if value is not None:
            config.nb_per_thread = parse_int(value)
        value = key_value(line, THREAD_NUM)
        if value is not None:
            config.thread_num = parse_int(value)
    return config


def validate(config: Config) -> Config:
    """Check that both values are positive and below INT_MAX."""
    if config.nb_per_thread <= 0 or config.thread_num <= 0:
        raise ParityError(ErrorKind.NO_DATA)
    if config.nb_per_thread >= INT_MAX or config.thread_num >= INT_MAX:
        raise ParityError(ErrorKind.INT_MAX)
    return config


def load_config(path: str | os.PathLike[str]) -> Config:
    """Read, parse and validate a configuration file.

    Raises ParityError for a bad extension or bad values, OSError when the
    file cannot be opened.
    """
    if not has_txt_extension(path):
        raise ParityError(ErrorKind.EXT_FILE)
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
        config = parse_lines(handle)
    return validate(config)