"""Command line entry point: read two boards and print how to get between them."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator

from .solver import NoSolutionError, solve


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Solve a puzzle given as arguments or typed at the prompts."""
    parser = argparse.ArgumentParser(
        prog="slidetile", description="Solve a 3x3 sliding-tile puzzle."
    )
    parser.add_argument("start", nargs="?", help="initial board, e.g. 123456708")
    parser.add_argument("end", nargs="?", help="desired board, e.g. 123456780")
    args = parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    start = args.start
    if start is None:
        print("please give the initial configuration of the board")
        start = next(tokens, "")
    end = args.end
    if end is None:
        print()
        print("please give the desired configuration")
        end = next(tokens, "")

    try:
        answer = solve(start, end)
    except (NoSolutionError, ValueError) as error:
        print(f"slidetile: {error}", file=sys.stderr)
        return 1

    print(f"Number of moves: {answer.moves}. Path to get there: {answer.path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())