"""
Error Taxonomy
==============
Exceptions raised by the model layer.

ParseError is routed by the session into the Error state. DomainError and
ComputationError are turned into the Result message so the user can pick
another operation right away.
"""


class MatrixCalcError(Exception):
    """Base class for all calculator errors."""


class ParseError(MatrixCalcError, ValueError):
    """Malformed or inconsistent matrix text."""


class DomainError(MatrixCalcError, ValueError):
    """An operation was invoked on operands violating its precondition."""


class ComputationError(MatrixCalcError, ArithmeticError):
    """The underlying numeric factorization failed."""
