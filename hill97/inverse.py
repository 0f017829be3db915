"""
Matrix inversion over Z/97
==========================
Derives the decryption key from the encryption key.

    2×2   closed form:  [[a, b], [c, d]]^-1 = det^-1 · [[d, -b], [-c, a]]
    N×N   Gauss-Jordan elimination with partial pivoting on an
          augmenting identity matrix.

Pivoting here is not about numerical stability (field arithmetic is exact).
It is a deterministic tie-break. In each column the row holding the largest
canonical value (lowest index on ties) becomes the pivot, so a zero pivot
only happens when the whole column below is zero, which means the matrix is
singular.

The caller's matrix is never mutated. Row reduction runs on private row lists.

Non-invertibility is reported as data, not as an exception:

    result = invert(key)
    if result.ok:
        dec_key = result.matrix
    else:
        log(result.reason)

result.unwrap() raises NotInvertible for callers that want to propagate.
"""

import logging
from typing import List, NamedTuple, Optional

from .errors import NotInvertible, ShapeMismatch
from .matrix import Matrix

logger = logging.getLogger(__name__)


class Inversion(NamedTuple):
    """Outcome of invert(): the inverse matrix, or the reason there is none."""

    matrix: Optional[Matrix]
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.matrix is not None

    def unwrap(self) -> Matrix:
        if self.matrix is None:
            raise NotInvertible(self.reason or "The matrix is not invertible.")
        return self.matrix


def invert(matrix: Matrix) -> Inversion:
    """Inverse of a square matrix, or a failed Inversion if it is singular."""
    if not matrix.is_square():
        raise ShapeMismatch(
            f"Only square matrices have inverses, got "
            f"{matrix.row_count}x{matrix.column_count}."
        )
    size = matrix.row_count
    logger.debug(f"Inverting {size}x{size} matrix")
    if size == 2:
        return _invert_2x2(matrix)
    return _gauss_jordan(matrix)


def _invert_2x2(m: Matrix) -> Inversion:
    a, b = m[0, 0], m[0, 1]
    c, d = m[1, 0], m[1, 1]
    det = a * d - b * c
    if det.is_zero():
        logger.debug("2x2 determinant is zero")
        return Inversion(None, "The matrix is not invertible: determinant is 0 mod 97.")
    return Inversion(Matrix.from_rows(
        [[d / det, -b / det],
         [-c / det, a / det]],
        m.field,
    ))


def _singular(column: int) -> Inversion:
    logger.debug(f"No non-zero pivot in column {column}")
    return Inversion(
        None,
        f"The matrix is not invertible: column {column} has no non-zero pivot.",
    )


def _gauss_jordan(m: Matrix) -> Inversion:
    size  = m.row_count
    field = m.field
    one   = field(1)
    zero  = field(0)

    # work is reduced to the identity; aug picks up the same row operations
    work: List[list] = [list(m.row(i)) for i in range(size)]
    aug:  List[list] = [[one if i == j else zero for j in range(size)]
                        for i in range(size)]

    # Forward elimination
    for i in range(size):
        pivot_row = i
        for k in range(i + 1, size):
            if work[k][i].value > work[pivot_row][i].value:
                pivot_row = k

        if pivot_row != i:
            logger.debug(f"Column {i}: swapping rows {i} and {pivot_row}")
            work[i], work[pivot_row] = work[pivot_row], work[i]
            aug[i],  aug[pivot_row]  = aug[pivot_row],  aug[i]

        pivot = work[i][i]
        if pivot.is_zero():
            return _singular(i)

        for k in range(i + 1, size):
            d = work[k][i] / pivot
            if d.is_zero():
                continue
            work[k] = [x - d * y for x, y in zip(work[k], work[i])]
            aug[k]  = [x - d * y for x, y in zip(aug[k],  aug[i])]

    # Back substitution, bottom row up
    for i in range(size - 1, -1, -1):
        pivot = work[i][i]
        if pivot.is_zero():
            return _singular(i)

        aug[i] = [x / pivot for x in aug[i]]
        work[i][i] = one

        for row in range(i - 1, -1, -1):
            factor = work[row][i]
            aug[row] = [x - y * factor for x, y in zip(aug[row], aug[i])]
            work[row][i] = zero

    return Inversion(Matrix.from_rows(aug, field))
