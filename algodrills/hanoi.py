"""Moves that solve the Tower of Hanoi."""

from __future__ import annotations

import argparse
from collections.abc import Iterator


def _moves(n: int, source: str, auxiliary: str, destination: str) -> Iterator[tuple[str, str]]:
    if n == 1:
        yield source, destination
        return
    yield from _moves(n - 1, source, destination, auxiliary)
    yield source, destination
    yield from _moves(n - 1, auxiliary, source, destination)


def hanoi_moves(
    n: int, source: str = "s", auxiliary: str = "a", destination: str = "d"
) -> Iterator[tuple[str, str]]:
    """Yield (from, to) moves that carry ``n`` disks from source to destination."""
    if n < 1:
        raise ValueError("the number of disks must be at least 1")
    return _moves(n, source, auxiliary, destination)


def main(argv: list[str] | None = None) -> int:
    """Print every move and the number of moves for a tower of ``n`` disks."""
    parser = argparse.ArgumentParser(description="Solve the Tower of Hanoi.")
    parser.add_argument("n", nargs="?", type=int)
    args = parser.parse_args(argv)
    n = args.n if args.n is not None else int(input("\nEnter the no of disks: "))
    try:
        moves = hanoi_moves(n)
    except ValueError as exc:
        parser.error(str(exc))
    print("The operations are:")
    count = 0
    for count, (src, dest) in enumerate(moves, start=1):
        print(f"{src}->{dest}")
    print(f"\nTotal no of steps= {count}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())