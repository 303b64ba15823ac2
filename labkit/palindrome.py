"""Check lines of text for palindromes, ignoring whitespace."""

from __future__ import annotations

import argparse
import string
import sys
from typing import Iterable, Iterator, Optional, Sequence

MAX_STRING_LENGTH = 80
RULE = "-" * 48

_LETTERS = frozenset(string.ascii_letters)
_SPACES = frozenset(" \t\n\v\f\r")


def is_palindrome(text: str) -> bool:
    """Return True if ``text`` reads the same both ways once whitespace is removed."""
    cleaned = "".join(ch for ch in text if ch not in _SPACES)
    return cleaned == cleaned[::-1]


def find_invalid_character(text: str) -> Optional[str]:
    """Return the first character that is neither a letter nor whitespace, if any."""
    return next(
        (ch for ch in text if ch not in _LETTERS and ch not in _SPACES), None
    )


def _read_chunks(lines: Iterable[str], limit: int = MAX_STRING_LENGTH) -> Iterator[str]:
    """Yield input in pieces of at most ``limit`` characters, splitting long lines."""
    for line in lines:
        while line:
            yield line[:limit]
            line = line[limit:]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read lines from standard input and report whether each is a palindrome."""
    parser = argparse.ArgumentParser(
        description="Check whether each input line is a palindrome, ignoring spaces."
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="report empty lines and continue instead of stopping",
    )
    args = parser.parse_args(argv)

    print("\nEnter your string: ", end="", flush=True)

    for raw in _read_chunks(sys.stdin):
        print(f"\nThe word you entered is: {raw} ")
        text = raw.split("\n", 1)[0]

        if not text:
            print("The string is empty")
            if not args.keep_going:
                return 1
            print(f"\n{RULE}")
        else:
            invalid = find_invalid_character(text)
            if invalid is not None:
                print(f"Your string contains invalid character '{invalid}'")
                print(RULE, end="")
            elif is_palindrome(text):
                print("The return value is: 1 (Palindrome)")
                print(f"\n{RULE}")
            else:
                print("The return value is: 0 (Not a palindrome)")
                print(f"\n{RULE}")

        print("Enter your string: ")

    return 0


if __name__ == "__main__":
    sys.exit(main())