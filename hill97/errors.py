"""
Error taxonomy
==============
Every failure the package raises derives from HillCipherError, and also from
the builtin it most resembles, so callers catching ValueError / IndexError
keep working.

    NotInvertible: key matrix is singular mod 97 (recoverable; see is_valid_key)
    UnknownSymbol: character outside the 97-symbol alphabet
    ShapeMismatch: incompatible matrix shapes (programming error)
    BoundsError: matrix index out of range (programming error)

Division by the zero field element raises the builtin ZeroDivisionError.
"""


class HillCipherError(Exception):
    """Base class for hill97 errors."""


class NotInvertible(HillCipherError, ValueError):
    """The matrix has no inverse over Z/97."""

    def __init__(self, message: str = "The matrix is not invertible."):
        super().__init__(message)


class UnknownSymbol(HillCipherError, ValueError):
    """A character with no entry in the alphabet table."""

    def __init__(self, symbol: str, position: int = None):
        self.symbol   = symbol
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Symbol {symbol!r}{where} is not in the alphabet.")


class ShapeMismatch(HillCipherError, ValueError):
    """Matrix operands (or inputs) have incompatible shapes."""


class BoundsError(HillCipherError, IndexError):
    """Matrix index outside its rows/columns."""
