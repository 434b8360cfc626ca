"""Integer square root by bisection."""

from __future__ import annotations

import argparse


def square_root(x: int) -> int:
    """Return the integer part of the square root of a non-negative ``x``."""
    if x < 0:
        raise ValueError("square root of a negative number")
    lower, upper = 0.0, float(x)
    while True:
        mid = (upper + lower) / 2
        square = mid * mid
        if x <= square < x + 0.99:
            break
        if mid in (lower, upper):
            break
        if square > x:
            upper = mid
        else:
            lower = mid
    return int(mid)


def main(argv: list[str] | None = None) -> int:
    """Print the integer square root of a number."""
    parser = argparse.ArgumentParser(description="Integer square root.")
    parser.add_argument("x", nargs="?", type=int)
    args = parser.parse_args(argv)
    x = args.x if args.x is not None else int(input("Enter a number : "))
    try:
        root = square_root(x)
    except ValueError as exc:
        parser.error(str(exc))
    print(f"Square root of {x} is {root}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())