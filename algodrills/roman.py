"""Conversion of Roman numerals to integers."""

from __future__ import annotations

import argparse

_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_SUBTRACTIVE = {"IV": 4, "IX": 9, "XL": 40, "XC": 90, "CD": 400, "CM": 900}


def roman_to_int(s: str) -> int:
    """Return the value of the Roman numeral ``s``, reading from the right."""
    total = 0
    end = len(s)
    while end > 0:
        pair = s[end - 2:end] if end >= 2 else ""
        if pair in _SUBTRACTIVE:
            total += _SUBTRACTIVE[pair]
            end -= 2
            continue
        symbol = s[end - 1]
        try:
            total += _VALUES[symbol]
        except KeyError:
            raise ValueError(f"invalid Roman numeral symbol: {symbol!r}") from None
        end -= 1
    return total


def main(argv: list[str] | None = None) -> int:
    """Print the value of a Roman numeral."""
    parser = argparse.ArgumentParser(description="Convert a Roman numeral.")
    parser.add_argument("numeral", nargs="?", default="MCDIX")
    args = parser.parse_args(argv)
    try:
        value = roman_to_int(args.numeral)
    except ValueError as exc:
        parser.error(str(exc))
    print(f"{args.numeral} in Roman is: {value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())