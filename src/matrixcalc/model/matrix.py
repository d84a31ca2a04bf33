"""
Matrix Value Type
=================
Immutable wrapper around a 2-D NumPy array.

Why is this file needed?
------------------------
1. Invariants: Every matrix is rectangular with at least one row and column
   (an empty nullspace basis is the single exception, see `Matrix.empty`).
2. Shape predicates: "is this a vector" is a single tested property that every
   operation uses as its precondition gate.
3. Notation: Rendering to the textual input notation and to aligned display rows.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, TYPE_CHECKING

import numpy as np

from matrixcalc import config

if TYPE_CHECKING:
    import numpy.typing as npt


def format_scalar(value: float) -> str:
    """Format a number for display, e.g. 5.0 -> '5', 0.333333333 -> '0.333333'."""
    # Adding 0.0 turns -0.0 into 0.0
    return f"{float(value) + 0.0:.{config.DISPLAY_PRECISION}g}"


@dataclass(frozen=True, eq=False)
class Matrix:
    values: npt.NDArray[np.float64]

    def __post_init__(self) -> None:
        array = np.array(self.values, dtype=np.float64)
        if array.ndim != 2:
            raise ValueError(f"Matrix must be 2-dimensional (got {array.ndim} dimensions).")
        if array.shape[0] < 1:
            raise ValueError("Matrix must have at least 1 row.")
        array.setflags(write=False)
        object.__setattr__(self, "values", array)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        if not rows:
            raise ValueError("Matrix must be a non-empty list of rows.")
        n_cols = len(rows[0])
        if n_cols == 0:
            raise ValueError("Matrix must have at least 1 column.")
        if any(len(row) != n_cols for row in rows):
            raise ValueError("All rows must have the same number of columns.")
        return cls(np.array(rows, dtype=np.float64))

    @classmethod
    def from_columns(cls, columns: Iterable[npt.NDArray[np.float64]], n_rows: int) -> Matrix:
        """Stack 1-D arrays as columns; no columns gives an (n_rows, 0) matrix."""
        columns = list(columns)
        if not columns:
            return cls.empty(n_rows)
        return cls(np.column_stack(columns))

    @classmethod
    def empty(cls, n_rows: int) -> Matrix:
        """A basis with no vectors: `n_rows` rows and zero columns."""
        return cls(np.zeros((n_rows, 0)))

    @property
    def rows(self) -> int:
        return int(self.values.shape[0])

    @property
    def cols(self) -> int:
        return int(self.values.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    @property
    def is_vector(self) -> bool:
        """True for row vectors (1×n) and column vectors (n×1)."""
        return self.rows == 1 or self.cols == 1

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    @property
    def length(self) -> int:
        """Number of entries when read as a flat sequence."""
        return max(self.rows, self.cols)

    def flatten(self) -> npt.NDArray[np.float64]:
        return self.values.reshape(-1)

    def allclose(self, other: Matrix, rtol: float = 1e-9, atol: float = 1e-12) -> bool:
        return self.shape == other.shape and bool(np.allclose(self.values, other.values, rtol=rtol, atol=atol))

    def to_text(self) -> str:
        """Render in the input notation, e.g. '1.0, 2.0; 3.0, 4.0'."""
        row_sep = f"{config.ROW_SEPARATOR} "
        cell_sep = f"{config.CELL_SEPARATOR} "
        return row_sep.join(
            cell_sep.join(repr(float(v)) for v in row) for row in self.values
        )

    def format(self) -> str:
        """Render as right-aligned columns, one matrix row per line."""
        if self.cols == 0:
            return f"(empty: {self.rows}×0)"

        cells = [[format_scalar(v) for v in row] for row in self.values]
        widths = [max(len(row[j]) for row in cells) for j in range(self.cols)]
        return "\n".join(
            "  ".join(cell.rjust(width) for cell, width in zip(row, widths))
            for row in cells
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.values, other.values))

    def __hash__(self) -> int:
        return hash((self.shape, self.values.tobytes()))

    def __repr__(self) -> str:
        return f"Matrix({self.rows}×{self.cols}: {self.to_text()})"
