"""Addition of binary numbers written as strings."""

from __future__ import annotations

import argparse
from itertools import zip_longest

_DIGITS = frozenset("01")


def binary_add(a: str, b: str) -> str:
    """Add two binary strings, keeping the width of the longer one plus any carry."""
    for operand in (a, b):
        if not set(operand) <= _DIGITS:
            raise ValueError(f"not a binary number: {operand!r}")
    digits = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        carry, digit = divmod(int(x) + int(y) + carry, 2)
        digits.append(str(digit))
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def main(argv: list[str] | None = None) -> int:
    """Print the sum of two binary numbers."""
    parser = argparse.ArgumentParser(description="Add two binary numbers.")
    parser.add_argument("a", nargs="?", default="1")
    parser.add_argument("b", nargs="?", default="11")
    args = parser.parse_args(argv)
    try:
        total = binary_add(args.a, args.b)
    except ValueError as exc:
        parser.error(str(exc))
    print(f"{args.a} + {args.b} in binary = {total}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())