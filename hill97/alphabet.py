r"""
97-symbol alphabet
==================
A fixed bijection between characters and elements of Z/97.

    0–25   A–Z
    26–51  a–z
    52–61  0–9
    62     space
    63–94  ~-=!@#$%^&*()_+[];',./{}:"<>?`\|
    95     tab
    96     newline

The ordering is part of the wire format. Ciphertext only decrypts under an
implementation that uses this exact table.
"""

from typing import Iterable, List

from .errors import UnknownSymbol
from .field import Z97

ALPHABET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789"
    " ~-=!@#$%^&*()_+[];',./{}:\"<>?`\\|"
    "\t\n"
)

_INDEX = {ch: i for i, ch in enumerate(ALPHABET)}

if len(ALPHABET) != Z97.MODULUS or len(_INDEX) != Z97.MODULUS:
    raise RuntimeError(
        f"Alphabet must hold {Z97.MODULUS} distinct symbols, "
        f"has {len(ALPHABET)} ({len(_INDEX)} distinct)."
    )


def char_to_field(ch: str) -> Z97:
    """Field value of a single character. Raises UnknownSymbol."""
    try:
        return Z97(_INDEX[ch])
    except KeyError:
        raise UnknownSymbol(ch) from None


def field_to_char(value) -> str:
    return ALPHABET[Z97(value).value]


def text_to_fields(text: str) -> List[Z97]:
    out = []
    for pos, ch in enumerate(text):
        idx = _INDEX.get(ch)
        if idx is None:
            raise UnknownSymbol(ch, pos)
        out.append(Z97(idx))
    return out


def fields_to_text(values: Iterable) -> str:
    return "".join(field_to_char(v) for v in values)
