import io

import pytest

from labkit.magic import (
    MagicInputError,
    NotIntegerError,
    TooFewError,
    TooManyError,
    format_matrix,
    is_magic,
    main,
    read_matrix,
)

SQUARE = [
    [17, 24, 1, 8, 15],
    [23, 5, 7, 14, 16],
    [4, 6, 13, 20, 22],
    [10, 12, 19, 21, 3],
    [11, 18, 25, 2, 9],
]


def _flat(matrix):
    return [value for row in matrix for value in row]


def _as_text(matrix):
    return " ".join(str(v) for v in _flat(matrix)) + "\n"


def test_read_matrix_single_line():
    assert read_matrix(io.StringIO(_as_text(SQUARE))) == SQUARE


def test_read_matrix_row_per_line():
    text = "\n".join(" ".join(str(v) for v in row) for row in SQUARE)
    assert read_matrix(io.StringIO(text)) == SQUARE


def test_read_matrix_mixed_whitespace_and_blank_lines():
    values = _flat(SQUARE)
    text = "\n\t".join(str(v) for v in values[:10]) + "\n\n" + "  ".join(
        str(v) for v in values[10:]
    )
    assert read_matrix(io.StringIO(text)) == SQUARE


def test_read_matrix_other_size():
    assert read_matrix(io.StringIO("1 2\n3 4\n"), size=2) == [[1, 2], [3, 4]]


def test_read_matrix_negative_numbers():
    assert read_matrix(io.StringIO("-1 +2 3 -4"), size=2) == [[-1, 2], [3, -4]]


def test_too_few_numbers():
    with pytest.raises(TooFewError):
        read_matrix(io.StringIO("1 2 3"))


def test_empty_input_is_too_few():
    with pytest.raises(TooFewError):
        read_matrix(io.StringIO(""))


def test_non_integer_token():
    with pytest.raises(NotIntegerError):
        read_matrix(io.StringIO("1 2 x 4"), size=2)


def test_too_many_on_completing_line():
    with pytest.raises(TooManyError):
        read_matrix(io.StringIO("1 2 3 4 5"), size=2)


def test_extra_lines_after_full_square_are_ignored():
    assert read_matrix(io.StringIO("1 2 3 4\n5 6\n"), size=2) == [[1, 2], [3, 4]]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1 2 x 4", NotIntegerError),
        ("1 2 3 4 5", TooManyError),
        ("1 2", TooFewError),
    ],
)
def test_errors_share_base_class(text, expected):
    with pytest.raises(MagicInputError) as excinfo:
        read_matrix(io.StringIO(text), size=2)
    assert type(excinfo.value) is expected
    assert isinstance(excinfo.value, ValueError)


def test_error_messages():
    assert str(TooFewError()) == "not enough numbers (early EOF)."
    assert str(NotIntegerError()) == "expected an integer."
    assert str(TooManyError()) == "too many numbers in input."


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        read_matrix(io.StringIO("1"), size=0)


def test_known_square_is_magic():
    assert is_magic(SQUARE) is True


def test_constant_square_is_magic():
    assert is_magic([[7] * 5 for _ in range(5)]) is True


def test_swapped_square_is_not_magic():
    broken = [row[:] for row in SQUARE]
    broken[0][0], broken[0][1] = broken[0][1], broken[0][0]
    assert is_magic(broken) is False


def test_equal_rows_but_unequal_columns_not_magic():
    matrix = [[1, 2, 3], [2, 3, 1], [3, 1, 2]]
    matrix[0] = [3, 2, 1]
    assert is_magic(matrix) is False


def test_format_matrix_layout():
    assert format_matrix([[1, 2], [3, 4]]) == "   1    2 \n   3    4 \n"


def test_format_matrix_round_trip():
    text = format_matrix(SQUARE)
    assert len(text.splitlines()) == 5
    assert read_matrix(io.StringIO(text)) == SQUARE


def test_main_from_file(tmp_path, capsys):
    path = tmp_path / "square.txt"
    path.write_text(_as_text(SQUARE))
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "The matrix is a magic square.\n" in out
    assert out.endswith(format_matrix(SQUARE))


def test_main_from_stdin_not_magic(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(" ".join(str(n) for n in range(1, 26))))
    assert main([]) == 0
    assert "The matrix is not a magic square.\n" in capsys.readouterr().out


def test_main_reports_input_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 2 3\n"))
    assert main([]) == 1
    assert "Input error: not enough numbers (early EOF).\n" in capsys.readouterr().out


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.txt")]) == 1