"""Finding the first occurrence of a substring."""

from __future__ import annotations

import argparse


def find_first(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1."""
    width = len(needle)
    for start in range(len(haystack) - width + 1):
        if haystack[start:start + width] == needle:
            return start
    return -1


def main(argv: list[str] | None = None) -> int:
    """Print where a needle first occurs in a haystack."""
    parser = argparse.ArgumentParser(description="Find the first occurrence.")
    parser.add_argument("haystack", nargs="?", default="11pfhspp")
    parser.add_argument("needle", nargs="?", default="fh")
    args = parser.parse_args(argv)
    print(f"First occurence of the needle is at {find_first(args.haystack, args.needle)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())