"""Command line entry point: run an algorithm on a file or a timing experiment."""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Sequence

from .experiments import run_experiment
from .mining import apriori, apriori_tid_algorithm

PROG = "aprioriminer"
ITEM_COLUMN = 2
BASKET_COLUMN = 1

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _announce(filename: str | Path, support: int) -> None:
    print(f"Running algorithm with on file: {filename}, with support of : {support} ...")


def run_algorithm(filename: str | Path, support: int, algochoice: int) -> None:
    """Mine ``filename`` with algorithm 1 or 2 and print the frequent item sets."""
    _announce(filename, support)
    table = apriori(filename, support, ITEM_COLUMN, BASKET_COLUMN, algochoice)
    print(table.format(), end="")


def run_algorithm_tid(filename: str | Path, support: int) -> None:
    """Mine ``filename`` with the transaction-id algorithm and print the result."""
    _announce(filename, support)
    table = apriori_tid_algorithm(filename, support, ITEM_COLUMN, BASKET_COLUMN)
    print(table.format(), end="")


def run_tests(varchoice: int) -> None:
    """Run one of the timing experiments in the current directory."""
    print("Running tests... ")
    run_experiment(varchoice, ".")


def _usage() -> None:
    print(f"Usage: {PROG} choice [args...]")
    print("  choice: 1 - Execute an algorithm")
    print("          2 - Execute tests on execution time")


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        _usage()
        return 0
    choice = _to_int(args[0])
    if choice not in (1, 2, 3):
        print("Invalid choice.")
        return 0
    try:
        if choice == 1:
            if len(args) < 4:
                print(f"choice: {PROG} 1 filename support algochoice")
                return 2
            run_algorithm(args[1], _to_int(args[2]), _to_int(args[3]))
        elif choice == 2:
            if len(args) < 3:
                print(f"choice: {PROG} 2 filename support")
                return 2
            run_algorithm_tid(args[1], _to_int(args[2]))
        else:
            if len(args) != 2:
                print(f"choice: {PROG} 2 varchoice")
                return 0
            run_tests(_to_int(args[1]))
    except OSError as exc:
        print(f"Error: {exc.strerror or exc}", file=sys.stderr)
        return 1
    except (ValueError, RuntimeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())