"""Command-line entry point for the dining simulation."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from philo.parsing import ArgumentError, parse_arguments
from philo.table import run_dinner


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation; return 0 on success and 1 on any error."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_arguments(args)
    except ArgumentError as error:
        stream = sys.stdout if error.to_stdout else sys.stderr
        print(error.message, file=stream)
        return 1
    try:
        run_dinner(settings, sys.stdout)
    except RuntimeError as error:
        print(f"Failed to run the dinner: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())