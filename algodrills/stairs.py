"""Counting the ways to climb a staircase one or two steps at a time."""

from __future__ import annotations

import argparse


def climb_stairs(n: int) -> int:
    """Return the number of ways to climb ``n`` stairs taking 1 or 2 at a time."""
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return current


def main(argv: list[str] | None = None) -> int:
    """Print the number of ways to climb a staircase."""
    parser = argparse.ArgumentParser(description="Count ways to climb stairs.")
    parser.add_argument("n", nargs="?", type=int)
    args = parser.parse_args(argv)
    n = args.n if args.n is not None else int(input("Enter the number of stairs:"))
    print(
        f"The no of ways to climb {n} stairs with only 1 or 2 stairs at a time is: "
        f"{climb_stairs(n)}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())