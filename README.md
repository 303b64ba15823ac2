# labkit

This package holds three small console exercises.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### labkit-zerobits

The command asks for a decimal number and prints how many `0` bits the number
has in unsigned binary form. The width is 32 bits by default. Use `--width N`
to choose another bit width. A negative number wraps around as an unsigned
value of that width would.

The command reads the first whitespace-separated token and uses the integer at
its start. If there is no such integer, or if the input is empty, the command
exits with status 1.

```
$ echo 7 | labkit-zerobits
$ echo 7 | labkit-zerobits --width 8
```

### labkit-magic

The command reads 25 integers that form a 5×5 square. The integers may be
separated by spaces, tabs or newlines. It reads them from the file named as the
only argument, or from standard input when there is no argument. It reports
whether the square is magic, which means that every row, every column and both
diagonals have the same sum. Then it prints the square.

If a token is not an integer, or if there are too many or too few numbers, the
command prints an input error and exits with status 1. It also exits with
status 1 if the named file cannot be opened.

```
$ labkit-magic square.txt
```

### labkit-palindrome

The command reads lines from standard input until the input ends. Lines longer
than 80 characters are handled as several pieces.

For each line, the command first checks that it holds only ASCII letters and
whitespace. If it finds another character, it reports the first one. If the
line is valid, it reports whether the letters form a palindrome once whitespace
is removed. The comparison is case-sensitive.

An empty line ends the command with exit status 1. With `--keep-going`, the
command reports the empty line and continues.

```
$ printf 'never odd or even\n' | labkit-palindrome
```

## Library use

```python
from labkit.zerobits import count_zero_bits
from labkit.magic import read_matrix, is_magic, format_matrix
from labkit.palindrome import is_palindrome, find_invalid_character

count_zero_bits(7)                      # 29
count_zero_bits(7, 8)                   # 5
is_palindrome("never odd or even")      # True
find_invalid_character("abc1")          # "1"

matrix = read_matrix(["1 2 3 4"], size=2)  # [[1, 2], [3, 4]]
is_magic(matrix)                           # False
print(format_matrix(matrix), end="")
```

`read_matrix` takes any iterable of text lines, such as an open file. It takes
an optional `size` that defaults to 5. It raises one of these errors:

- `NotIntegerError` when a token is not an integer.
- `TooManyError` when there are too many numbers.
- `TooFewError` when there are too few numbers.

Each of these is a subclass of `MagicInputError`, which is itself a
`ValueError`.