"""
hill97 — Hill Cipher modulo 97
==============================
Classical matrix block cipher over a 97-symbol alphabet.

Layers:
    field      Z97, integers modulo the prime 97
    matrix     Matrix, dense matrices of field elements
    inverse    invert(), 2×2 closed form / Gauss-Jordan with pivoting
    alphabet   97-character table ↔ Z97
    cipher     encrypt / decrypt / is_valid_key, HillCipher

Teaching-grade only: trivially broken by known-plaintext attack.
"""

__version__ = "1.0.0"

from .errors   import HillCipherError, NotInvertible, UnknownSymbol, ShapeMismatch, BoundsError
from .field    import Z97
from .matrix   import Matrix
from .inverse  import Inversion, invert
from .alphabet import ALPHABET, char_to_field, field_to_char, text_to_fields, fields_to_text
from .cipher   import HillCipher, encrypt, decrypt, is_valid_key, as_key, pad, PAD_CHAR

__all__ = [
    "HillCipherError",
    "NotInvertible",
    "UnknownSymbol",
    "ShapeMismatch",
    "BoundsError",
    "Z97",
    "Matrix",
    "Inversion",
    "invert",
    "ALPHABET",
    "char_to_field",
    "field_to_char",
    "text_to_fields",
    "fields_to_text",
    "HillCipher",
    "encrypt",
    "decrypt",
    "is_valid_key",
    "as_key",
    "pad",
    "PAD_CHAR",
]
