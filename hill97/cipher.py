"""
Hill Cipher, modulo 97
======================
Classical block substitution cipher (Lester S. Hill, 1929).

Plaintext is right-padded with spaces to a multiple of the key size N,
cut into N-character blocks, and each block is mapped through the alphabet
into an N×1 column vector. The vector is multiplied by the N×N key matrix
and mapped back to characters. Decryption is the same pipeline run with
the inverse key.

The classic cipher works mod 26, where a key is invertible only if its
determinant is coprime to 26. Using a 97-symbol alphabet makes the modulus
prime, so every key with a non-zero determinant works.

Not secure: a handful of known plaintext/ciphertext blocks recovers the key
by linear algebra. Role: teaching and puzzles.

Key input: a Matrix, or any N×N nested sequence of ints (reduced mod 97).
"""

import logging
from typing import Iterator, Sequence, Union

from .alphabet import fields_to_text, text_to_fields
from .errors import ShapeMismatch
from .inverse import invert
from .matrix import Matrix

logger = logging.getLogger(__name__)

PAD_CHAR = " "

KeyLike = Union[Matrix, Sequence[Sequence[int]]]


def as_key(key: KeyLike) -> Matrix:
    """Coerce caller input into a square key Matrix (always a fresh copy)."""
    m = key.copy() if isinstance(key, Matrix) else Matrix.from_rows(key)
    if not m.is_square():
        raise ShapeMismatch(
            f"Hill key must be square, got {m.row_count}x{m.column_count}."
        )
    return m


def pad(text: str, block_size: int) -> str:
    """Right-pad with spaces to a multiple of block_size. No-op if it divides."""
    remainder = len(text) % block_size
    if remainder:
        text += PAD_CHAR * (block_size - remainder)
    return text


def _blocks(text: str, size: int) -> Iterator[Matrix]:
    values = text_to_fields(text)
    for start in range(0, len(values), size):
        yield Matrix.column(values[start:start + size])


def _transform(key: Matrix, text: str) -> str:
    size = key.row_count
    padded = pad(text, size)
    logger.debug(
        f"Transforming {len(text)} chars as {len(padded) // size} blocks of {size}"
    )
    out = []
    for block in _blocks(padded, size):
        out.append(fields_to_text((key * block).column_values(0)))
    return "".join(out)


def encrypt(key: KeyLike, plaintext: str) -> str:
    """
    Encrypt plaintext under key.
    Output length equals the padded plaintext length.
    Raises UnknownSymbol for characters outside the alphabet.
    """
    return _transform(as_key(key), plaintext)


def decrypt(key: KeyLike, ciphertext: str) -> str:
    """
    Decrypt ciphertext: encrypt() with the inverse key.
    Raises NotInvertible if the key is singular.
    """
    dec_key = invert(as_key(key)).unwrap()
    return _transform(dec_key, ciphertext)


def is_valid_key(key: KeyLike) -> bool:
    """True iff key is invertible mod 97."""
    result = invert(as_key(key))
    if not result.ok:
        logger.debug(f"Rejected key: {result.reason}")
    return result.ok


class HillCipher:
    """
    Hill cipher bound to one key.

    The key is checked for invertibility up front, so decrypt() cannot fail
    on the key. Only unknown symbols in the input can.
    """

    def __init__(self, key: KeyLike):
        self._key = as_key(key)
        self._dec_key = invert(self._key).unwrap()
        logger.debug(f"HillCipher ready: block size {self.block_size}")

    @property
    def block_size(self) -> int:
        return self._key.row_count

    @property
    def key(self) -> Matrix:
        return self._key.copy()

    @property
    def decryption_key(self) -> Matrix:
        return self._dec_key.copy()

    def encrypt(self, plaintext: str) -> str:
        return _transform(self._key, plaintext)

    def decrypt(self, ciphertext: str) -> str:
        return _transform(self._dec_key, ciphertext)

    def __repr__(self):
        return f"HillCipher(block_size={self.block_size})"


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format=' %(message)s')

    key = [[0, -3], [5, 6]]
    pt  = "Hill Cipher!"
    ct  = encrypt(key, pt)
    print(f"\nKey:        {as_key(key).to_lists()}")
    print(f"Plaintext:  {pt!r}")
    print(f"Ciphertext: {ct!r}")
    print(f"Decrypted:  {decrypt(key, ct)!r}")
    print(f"Valid key:  {is_valid_key(key)}")
    print(f"Singular:   {is_valid_key([[1, 2], [2, 4]])}\n")
