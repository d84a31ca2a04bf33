"""
Configuration & Global Constants
================================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers and separators scattered
   throughout the parser, the operations and the view.
2. Consistency: Input notation and display notation share the same separators.

Exports:
    ROW_SEPARATOR (str): Separates rows in the textual matrix notation.
    CELL_SEPARATOR (str): Separates cells within a row.
    NULLSPACE_TOLERANCE (float): Singular values at or below are treated as zero.
"""
import logging

APP_NAME: str = "Matrix Calculator"

# Textual matrix notation: "1, 2; 3, 4"
ROW_SEPARATOR: str = ";"
CELL_SEPARATOR: str = ","

NULLSPACE_TOLERANCE: float = 1e-12

# Significant digits used when displaying numbers
DISPLAY_PRECISION: int = 6

DEFAULT_LOG_LEVEL: int = logging.WARNING
