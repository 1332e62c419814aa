"""Formatting of the sorted even and odd lists."""

from __future__ import annotations

from collections.abc import Iterable


def format_positions(numbers: Iterable[int]) -> str:
    """Number each value by position; an empty input gives an empty string."""
    lines = [f"Position {index}:\t{number}\n"
             for index, number in enumerate(numbers, start=1)]
    if not lines:
        return ""
    return "".join(lines) + "\n"


def final_list(numbers: Iterable[int], label: str) -> str:
    """Return the labelled, ascending listing of the numbers."""
    ordered = sorted(numbers)
    if not ordered:
        return f"There are no {label} numbers\n"
    return f"{label}\n{format_positions(ordered)}"