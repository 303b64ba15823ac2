"""Count the zero bits of an unsigned integer of a fixed bit width."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Iterable, Optional, Sequence

DEFAULT_WIDTH = 32
RULE = "-" * 68

_UNSIGNED = re.compile(r"[+-]?\d+")


def count_zero_bits(num: int, width: int = DEFAULT_WIDTH) -> int:
    """Return how many of the low ``width`` bits of ``num`` are zero.

    Negative values wrap around as an unsigned integer of that width would.
    """
    if width <= 0:
        raise ValueError(f"bit width must be positive, got {width}")
    value = num % (1 << width)
    return width - bin(value).count("1")


def _parse_unsigned(lines: Iterable[str], width: int) -> Optional[int]:
    """Read the first whitespace-separated token and parse its leading integer."""
    for line in lines:
        tokens = line.split()
        if not tokens:
            continue
        match = _UNSIGNED.match(tokens[0])
        if match is None:
            return None
        return int(match.group()) % (1 << width)
    return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Prompt for a decimal number and report its zero-bit count."""
    parser = argparse.ArgumentParser(
        description="Count the zero bits in the binary form of a number."
    )
    parser.add_argument(
        "--width",
        type=int,
        default=DEFAULT_WIDTH,
        help="bit width of the unsigned integer (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    if args.width <= 0:
        parser.error("--width must be positive")

    print(RULE)
    print("Welcome to the zero counter for decimal to binary program")
    print(RULE)
    print(
        f"Please enter a number between 0 and (2^{args.width} -1) "
        "in decimal format and press enter: ",
        end="",
        flush=True,
    )

    num = _parse_unsigned(sys.stdin, args.width)
    if num is None:
        return 1

    print(RULE)
    print(
        "The number of zeros in the binary format is: "
        f"{count_zero_bits(num, args.width)}"
    )
    print(RULE)
    print("Thank you for using the program, farewell")
    return 0


if __name__ == "__main__":
    sys.exit(main())