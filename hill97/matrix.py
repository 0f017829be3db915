"""
Matrix over a finite field
==========================
A minimal dense R×C matrix of field elements (Z97 by default).

Shape is fixed at construction and checked at runtime: indexing outside
the grid raises BoundsError, multiplying incompatible shapes raises
ShapeMismatch. Every Matrix owns its storage. copy() and all factories
produce fresh rows, so two matrices never alias each other.

Indexing uses a (row, column) pair:

    m = Matrix(2, 2)
    m[0, 1] = -3          # stored as Z97(94)
    m[0, 1] * 2           # Z97(91)
"""

from typing import Iterable, List, Sequence, Tuple, Type

from .errors import BoundsError, ShapeMismatch
from .field import Z97


class Matrix:
    """Dense matrix of field elements with value semantics."""

    def __init__(self, rows: int, columns: int, field: Type = Z97):
        if rows < 1 or columns < 1:
            raise ShapeMismatch(f"Matrix must be at least 1x1, got {rows}x{columns}.")
        self._rows    = rows
        self._columns = columns
        self._field   = field
        zero = field(0)
        self._data: List[List] = [[zero] * columns for _ in range(rows)]

    # -- factories -------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence], field: Type = Z97) -> "Matrix":
        """Build from nested sequences of ints (or field elements)."""
        rows = [list(r) for r in rows]
        if not rows or not rows[0]:
            raise ShapeMismatch("Matrix needs at least one row and one column.")
        width = len(rows[0])
        for i, r in enumerate(rows):
            if len(r) != width:
                raise ShapeMismatch(
                    f"Ragged rows: row 0 has {width} entries, row {i} has {len(r)}."
                )
        m = cls(len(rows), width, field)
        m._data = [[field(v) for v in r] for r in rows]
        return m

    @classmethod
    def identity(cls, size: int, field: Type = Z97) -> "Matrix":
        m = cls(size, size, field)
        for i in range(size):
            m._data[i][i] = field(1)
        return m

    @classmethod
    def column(cls, values: Iterable, field: Type = Z97) -> "Matrix":
        """N×1 column vector (a message block)."""
        return cls.from_rows([[v] for v in values], field)

    # -- shape -----------------------------------------------------------

    @property
    def row_count(self) -> int:
        return self._rows

    @property
    def column_count(self) -> int:
        return self._columns

    @property
    def shape(self) -> Tuple[int, int]:
        return self._rows, self._columns

    @property
    def field(self) -> Type:
        return self._field

    def is_square(self) -> bool:
        return self._rows == self._columns

    # -- element access --------------------------------------------------

    def _check(self, i: int, j: int):
        if not (0 <= i < self._rows and 0 <= j < self._columns):
            raise BoundsError(
                f"Index ({i}, {j}) outside {self._rows}x{self._columns} matrix."
            )

    def __getitem__(self, index: Tuple[int, int]):
        i, j = index
        self._check(i, j)
        return self._data[i][j]

    def __setitem__(self, index: Tuple[int, int], value):
        i, j = index
        self._check(i, j)
        self._data[i][j] = self._field(value)

    def row(self, i: int) -> tuple:
        self._check(i, 0)
        return tuple(self._data[i])

    def column_values(self, j: int) -> tuple:
        self._check(0, j)
        return tuple(r[j] for r in self._data)

    def to_lists(self) -> List[List[int]]:
        """Plain ints, row-major."""
        return [[int(v) for v in r] for r in self._data]

    def copy(self) -> "Matrix":
        m = Matrix(self._rows, self._columns, self._field)
        m._data = [list(r) for r in self._data]
        return m

    # -- algebra ---------------------------------------------------------

    def __mul__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._columns != other._rows:
            raise ShapeMismatch(
                f"Cannot multiply {self._rows}x{self._columns} "
                f"by {other._rows}x{other._columns}."
            )
        result = Matrix(self._rows, other._columns, self._field)
        zero = self._field(0)
        for i, row in enumerate(self._data):
            for j in range(other._columns):
                acc = zero
                for k, a in enumerate(row):
                    acc = acc + a * other._data[k][j]
                result._data[i][j] = acc
        return result

    __matmul__ = __mul__

    def inverse(self) -> "Matrix":
        """Inverse matrix; raises NotInvertible if singular."""
        from .inverse import invert
        return invert(self).unwrap()

    # -- comparison ------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    __hash__ = None

    def __repr__(self):
        return f"Matrix({self.to_lists()})"
