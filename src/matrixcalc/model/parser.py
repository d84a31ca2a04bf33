"""
Matrix Parser
=============
Turns delimited text such as "1, 2; 3, 4" into a Matrix.

Rows are separated by ';', cells within a row by ','. Whitespace around
rows and cells is ignored. Pure function, no side effects.
"""
import logging
import re

from matrixcalc import config
from matrixcalc.model.errors import ParseError
from matrixcalc.model.matrix import Matrix

logger = logging.getLogger(__name__)

# Optional sign, integer or decimal mantissa, optional exponent; ASCII digits only
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_number(cell: str) -> float:
    """
    Parse a single cell as a finite float.

    Raises:
        ParseError: If the cell is not a decimal number literal.
    """
    text = cell.strip()
    if not _NUMBER_RE.fullmatch(text):
        raise ParseError(f"invalid number: {text}")
    value = float(text)
    if value in (float("inf"), float("-inf")):
        # Exponent overflow, e.g. "1e999"
        raise ParseError(f"invalid number: {text}")
    return value


def parse_matrix(text: str) -> Matrix:
    """
    Parse the textual matrix notation.

    Args:
        text: Raw input, e.g. "1,2;3,4".

    Raises:
        ParseError: On inconsistent row lengths or a cell that is not a number.
            Rows are scanned in order; within a row the length is checked
            before its cells, and the first offending cell is reported.

    Returns:
        A Matrix with one row per row-string.
    """
    rows: list[list[float]] = []
    row_length = -1

    for row_text in text.split(config.ROW_SEPARATOR):
        cells = row_text.strip().split(config.CELL_SEPARATOR)
        if row_length == -1:
            row_length = len(cells)
        elif row_length != len(cells):
            logger.debug(f"Row length mismatch: expected {row_length}, got {len(cells)}")
            raise ParseError("inconsistent row lengths")

        rows.append([parse_number(cell) for cell in cells])

    matrix = Matrix.from_rows(rows)
    logger.debug(f"Parsed {matrix.rows}×{matrix.cols} matrix")
    return matrix
