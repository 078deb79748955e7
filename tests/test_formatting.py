import io

import pytest

from densemat import Matrix, column_widths, format_matrix
from densemat.formatting import EMPTY_MATRIX_TEXT, display


def test_display_single_value(capsys):
    """Scenario 5"""
    Matrix.from_data(1, 1, [[3.14159]]).display(2)

    assert capsys.readouterr().out == "[3.14]\n"


def test_display_aligns_columns(capsys):
    m = Matrix.from_data(2, 2, [[1, -2.5], [10, 3]])
    m.display(1)

    assert capsys.readouterr().out == "[ 1.0 -2.5]\n[10.0  3.0]\n"


def test_display_default_precision():
    m = Matrix.from_data(1, 2, [[0.5, -0.25]])
    assert str(m) == "[0.5000 -0.2500]"


def test_display_to_stream():
    buf = io.StringIO()
    display(Matrix.identity(2), 0, file=buf)
    assert buf.getvalue() == "[1 0]\n[0 1]\n"


def test_matrix_display_to_stream():
    buf = io.StringIO()
    Matrix.from_data(1, 2, [[-1, 0.5]]).display(1, file=buf)
    assert buf.getvalue() == "[-1.0 0.5]\n"


def test_display_empty(capsys):
    Matrix().display(3)
    assert capsys.readouterr().out == EMPTY_MATRIX_TEXT + "\n"


def test_column_widths():
    data = [[1.0, -1.5, 100.0], [-10.25, 2.0, 0.0]]

    assert column_widths(data, 2) == [6, 5, 6]
    assert column_widths(data, 0) == [3, 2, 3]


def test_column_widths_degenerate():
    assert column_widths([], 2) is None
    assert column_widths([[]], 2) is None


def test_rounding_matches_printf():
    """Ties are resolved on the exact binary value, half to even"""
    assert format_matrix([[0.125, 0.375, 2.675]], 2) == "[0.12 0.38 2.67]"
    assert format_matrix([[0.5, 1.5, 2.5]], 0) == "[0 2 2]"


def test_rounding_widens_column():
    """9.996 rounds to 10.00 and the column width follows"""
    assert format_matrix([[9.996], [1.0]], 2) == "[10.00]\n[ 1.00]"


def test_negative_precision():
    with pytest.raises(ValueError):
        format_matrix([[1.0]], -1)
