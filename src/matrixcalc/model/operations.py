"""
Operation Library
=================
Stateless numeric operations on Matrix values, backed by numpy.linalg.

Why is this file needed?
------------------------
1. Preconditions: Every operation checks its domain (vector / matrix / shape)
   explicitly and raises DomainError instead of producing garbage.
2. Dispatch: Maps the operation keywords typed by the user to the functions
   and formats the result message shown by the session.

Note: This module should be pure Python/NumPy and should NOT import PySide6.
"""
from __future__ import annotations

from enum import StrEnum
import logging

import numpy as np

from matrixcalc import config
from matrixcalc.model.errors import ComputationError, DomainError
from matrixcalc.model.matrix import Matrix, format_scalar

logger = logging.getLogger(__name__)


class Operation(StrEnum):
    DET = "det"
    NORM = "norm"
    NULLSPACE = "nullspace"
    INNER = "inner"
    OUTER = "outer"
    MULTIPLY = "multiply"

    @property
    def is_binary(self) -> bool:
        return self in BINARY_OPERATIONS

    @classmethod
    def from_keyword(cls, keyword: str) -> Operation | None:
        """Case-sensitive lookup; unknown keywords give None."""
        try:
            return cls(keyword)
        except ValueError:
            return None


UNARY_OPERATIONS: tuple[Operation, ...] = (Operation.DET, Operation.NORM, Operation.NULLSPACE)
BINARY_OPERATIONS: tuple[Operation, ...] = (Operation.INNER, Operation.OUTER, Operation.MULTIPLY)

OPERATION_LABELS: dict[Operation, str] = {
    Operation.DET: "Determinant",
    Operation.NORM: "Norm",
    Operation.NULLSPACE: "Nullspace",
    Operation.INNER: "Inner Product",
    Operation.OUTER: "Outer Product",
    Operation.MULTIPLY: "Matrix Multiplication",
}


# =========================
# Operations
# =========================
def determinant(a: Matrix) -> float:
    """
    Determinant of a square, non-vector matrix.

    Raises:
        DomainError: If `a` is a vector or not square.
    """
    if a.is_vector:
        raise DomainError("Determinant is undefined for vectors.")
    if not a.is_square:
        raise DomainError(f"Determinant requires a square matrix (got {a.rows}×{a.cols}).")
    return float(np.linalg.det(a.values))


def norm(a: Matrix) -> float:
    """Spectral (2-)norm; the Euclidean length for vectors."""
    return float(np.linalg.norm(a.values, ord=2))


def nullspace(a: Matrix, tolerance: float = config.NULLSPACE_TOLERANCE) -> Matrix:
    """
    Orthonormal basis of the right null space of `a`, as columns.

    The right singular vectors belonging to singular values <= `tolerance`
    are collected in ascending index order. A wide matrix has more right
    singular vectors than singular values; the extra ones have singular
    value zero.

    Raises:
        ComputationError: If the SVD does not converge.

    Returns:
        A (cols × k) matrix; k == 0 when `a` has full column rank.
    """
    try:
        _, s, vh = np.linalg.svd(a.values, full_matrices=True)
    except np.linalg.LinAlgError as e:
        raise ComputationError(f"SVD factorization failed: {e}") from e

    singular_values = np.zeros(a.cols)
    singular_values[:len(s)] = s

    basis = [vh[i, :] for i in range(a.cols) if singular_values[i] <= tolerance]
    logger.debug(f"Nullspace of {a.rows}×{a.cols} matrix has dimension {len(basis)}")
    return Matrix.from_columns(basis, n_rows=a.cols)


def inner_product(a: Matrix, b: Matrix) -> float:
    """
    Dot product of two vectors, regardless of row/column orientation.

    Raises:
        DomainError: If either operand is not a vector or the lengths differ.
    """
    if not (a.is_vector and b.is_vector):
        raise DomainError("Inner product is only defined for vectors.")
    if a.length != b.length:
        raise DomainError(f"Vectors must have the same dimension ({a.length} vs {b.length}).")
    return float(np.dot(a.flatten(), b.flatten()))


def outer_product(a: Matrix, b: Matrix) -> Matrix:
    """
    Outer product of two vectors: entry (i, j) is a_i * b_j.

    Raises:
        DomainError: If either operand is not a vector.
    """
    if not (a.is_vector and b.is_vector):
        raise DomainError("Outer product is only defined for vectors.")
    return Matrix(np.outer(a.flatten(), b.flatten()))


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Matrix product a · b.

    Raises:
        DomainError: If either operand is a vector or the inner dimensions differ.
    """
    if a.is_vector or b.is_vector:
        raise DomainError("Multiplication is only defined for matrices.")
    if a.cols != b.rows:
        raise DomainError(
            f"Matrices are not compatible for multiplication "
            f"({a.rows}×{a.cols} · {b.rows}×{b.cols})."
        )
    return Matrix(a.values @ b.values)


# =========================
# Dispatch
# =========================
def run_unary(operation: Operation, a: Matrix) -> str:
    """Run a single-operand operation and return the result message."""
    logger.info(f"Running '{operation}' on {a.rows}×{a.cols} matrix")
    try:
        if operation == Operation.DET:
            return f"Determinant: {format_scalar(determinant(a))}"
        if operation == Operation.NORM:
            return f"Norm: {format_scalar(norm(a))}"
        if operation == Operation.NULLSPACE:
            try:
                return f"Nullspace:\n{nullspace(a).format()}"
            except ComputationError as e:
                logger.warning(f"Nullspace failed: {e}")
                return f"Error calculating nullspace: {e}"
    except DomainError as e:
        logger.info(f"'{operation}' rejected: {e}")
        return str(e)
    raise ValueError(f"'{operation}' is not a single-operand operation.")


def run_binary(operation: Operation, a: Matrix, b: Matrix) -> str:
    """Run a two-operand operation and return the result message."""
    logger.info(f"Running '{operation}' on {a.rows}×{a.cols} and {b.rows}×{b.cols} matrices")
    try:
        if operation == Operation.INNER:
            return f"Inner Product: {format_scalar(inner_product(a, b))}"
        if operation == Operation.OUTER:
            return f"Outer Product:\n{outer_product(a, b).format()}"
        if operation == Operation.MULTIPLY:
            return f"Matrix Product:\n{multiply(a, b).format()}"
    except DomainError as e:
        logger.info(f"'{operation}' rejected: {e}")
        return str(e)
    raise ValueError(f"'{operation}' is not a two-operand operation.")
