import numpy as np
import pytest

from matrixcalc.model.matrix import Matrix, format_scalar
from matrixcalc.model.parser import parse_matrix


@pytest.mark.parametrize("shape", [(1, 1), (1, 4), (4, 1), (1, 2), (7, 1)])
def test_is_vector_for_row_and_column_shapes(shape):
    assert Matrix(np.ones(shape)).is_vector


@pytest.mark.parametrize("shape", [(2, 2), (2, 3), (3, 2)])
def test_is_vector_false_for_matrices(shape):
    assert not Matrix(np.ones(shape)).is_vector


def test_from_rows_rejects_ragged_and_empty():
    with pytest.raises(ValueError):
        Matrix.from_rows([[1.0, 2.0], [3.0]])
    with pytest.raises(ValueError):
        Matrix.from_rows([])
    with pytest.raises(ValueError):
        Matrix.from_rows([[]])


def test_rejects_non_2d_arrays():
    with pytest.raises(ValueError):
        Matrix(np.array([1.0, 2.0]))


def test_values_are_read_only():
    m = Matrix.from_rows([[1.0, 2.0]])
    with pytest.raises(ValueError):
        m.values[0, 0] = 5.0


def test_source_array_is_copied():
    source = np.array([[1.0, 2.0]])
    m = Matrix(source)
    source[0, 0] = 9.0
    assert m.values[0, 0] == 1.0


@pytest.mark.parametrize("rows", [
    [[7.0]],
    [[-0.0]],
    [[1.0, -2.0, 3.5, 1e-300]],
    [[1.7e308], [-1.7e308], [5e-324]],
    [[0.1, -2.5e-7], [1e20, 3.0]],
    [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0], [-0.0, 1e-300]],
    [[1/3, 2/3, 1.0], [-1e-12, 123456789.123, 0.0]],
])
def test_text_notation_reparses_to_the_same_matrix(rows):
    m = Matrix.from_rows(rows)
    parsed = parse_matrix(m.to_text())
    assert parsed.shape == m.shape
    assert parsed == m
    assert parsed.allclose(m)


def test_allclose_tolerates_rounding_but_not_shape():
    m = Matrix.from_rows([[0.1 + 0.2, 1.0]])
    assert m.allclose(Matrix.from_rows([[0.3, 1.0]]))
    assert not m.allclose(Matrix.from_rows([[0.3], [1.0]]))
    assert not m.allclose(Matrix.from_rows([[0.4, 1.0]]))


def test_format_aligns_columns():
    m = Matrix.from_rows([[1.0, 200.0], [-30.0, 4.0]])
    assert m.format() == "  1  200\n-30    4"


def test_format_empty_basis():
    assert Matrix.empty(3).format() == "(empty: 3×0)"


def test_format_scalar():
    assert format_scalar(5.0) == "5"
    assert format_scalar(-0.0) == "0"
    assert format_scalar(1 / 3) == "0.333333"


def test_flatten_ignores_orientation():
    row = Matrix.from_rows([[1.0, 2.0, 3.0]])
    col = Matrix.from_rows([[1.0], [2.0], [3.0]])
    assert row.flatten().tolist() == col.flatten().tolist()
    assert row.length == col.length == 3
