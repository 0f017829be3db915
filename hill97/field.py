"""
Integers modulo 97
==================
Z97 is a value type for an element of the prime field Z/97Z.

Every result is reduced into the canonical range [0, 96]. Because 97 is
prime, every non-zero element has a unique multiplicative inverse, so
division is defined for all non-zero divisors. The inverse is computed with
Fermat's little theorem: a^(p-2) ≡ a^-1 (mod p).
"""

import operator
from typing import Union

IntLike = Union[int, "Z97"]


class Z97:
    """
    An integer modulo 97. Immutable and hashable.

    Construction reduces any int (or object with __index__); floats are
    rejected. Comparison with a plain int matches only the canonical value,
    so Z97(1) == 1 but Z97(1) != 98, keeping hash(Z97(v)) == hash(v).
    """

    MODULUS = 97

    def __init__(self, value: IntLike = 0):
        if isinstance(value, Z97):
            value = value._value
        else:
            value = operator.index(value)
        self._value = value % self.MODULUS

    @classmethod
    def zero(cls) -> "Z97":
        return cls(0)

    @classmethod
    def one(cls) -> "Z97":
        return cls(1)

    @property
    def value(self) -> int:
        """Canonical representative in [0, 96]."""
        return self._value

    def is_zero(self) -> bool:
        return self._value == 0

    def inverse(self) -> "Z97":
        """Multiplicative inverse. Raises ZeroDivisionError for zero."""
        if self._value == 0:
            raise ZeroDivisionError("Zero has no inverse modulo 97.")
        return Z97(pow(self._value, self.MODULUS - 2, self.MODULUS))

    # -- arithmetic ------------------------------------------------------

    def __add__(self, other: IntLike) -> "Z97":
        return Z97(self._value + Z97(other)._value)

    __radd__ = __add__

    def __sub__(self, other: IntLike) -> "Z97":
        return Z97(self._value - Z97(other)._value)

    def __rsub__(self, other: IntLike) -> "Z97":
        return Z97(Z97(other)._value - self._value)

    def __mul__(self, other: IntLike) -> "Z97":
        return Z97(self._value * Z97(other)._value)

    __rmul__ = __mul__

    def __truediv__(self, other: IntLike) -> "Z97":
        return self * Z97(other).inverse()

    def __rtruediv__(self, other: IntLike) -> "Z97":
        return Z97(other) * self.inverse()

    def __neg__(self) -> "Z97":
        return Z97(-self._value)

    # -- comparison / conversion ----------------------------------------

    def __eq__(self, other):
        if isinstance(other, Z97):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __hash__(self):
        return hash(self._value)

    def __int__(self):
        return self._value

    def __bool__(self):
        return self._value != 0

    def __repr__(self):
        return f"Z97({self._value})"
