"""Command entry point: read the config, run the workers, print the lists."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from .args import HELP_MSG, HelpRequested, parse_args
from .config import load_config
from .errors import EXIT_FAILURE, ParityError, report_error
from .generator import generate
from .report import final_list

EXIT_SUCCESS = 0


def run(
    argv: Sequence[str],
    out: TextIO | None = None,
    rng_factory: Callable[[], random.Random] | None = None,
) -> int:
    """Run the program on the given arguments and return the exit code."""
    if out is None:
        out = sys.stdout
    try:
        path = parse_args(argv)
        config = load_config(path)
    except HelpRequested:
        out.write(f"{HELP_MSG}\n")
        return EXIT_FAILURE
    except ParityError as error:
        return report_error(error, out)
    except OSError as error:
        sys.stderr.write(f"Error opening file: {error.strerror or error}\n")
        return EXIT_FAILURE
    pool = generate(config, rng_factory)
    out.write(final_list(pool.even, "EVEN"))
    out.write(final_list(pool.odd, "ODD"))
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """Run with ``sys.argv`` when no arguments are given."""
    if argv is None:
        argv = sys.argv[1:]
    return run(argv)


if __name__ == "__main__":
    raise SystemExit(main())