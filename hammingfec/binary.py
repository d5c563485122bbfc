"""Conversion between text and its 8-bit-per-character bit representation."""

from __future__ import annotations

from typing import Sequence

from hammingfec.errors import BitLengthError, CharacterRangeError
from hammingfec.utils.packing import bits_to_int, coerce_bits, int_to_bits

BITS_PER_CHAR = 8
MAX_CHAR_CODE = (1 << BITS_PER_CHAR) - 1


def to_binary(text: str) -> list[int]:
    """Encode each character as 8 bits, MSB first, in character order."""
    bits: list[int] = []
    for position, char in enumerate(text):
        code = ord(char)
        if code > MAX_CHAR_CODE:
            raise CharacterRangeError(
                f"character {char!r} at {position} has code {code}, "
                f"max is {MAX_CHAR_CODE}"
            )
        bits.extend(int_to_bits(code, BITS_PER_CHAR))
    return bits


def to_ascii(bits: Sequence[int]) -> str:
    """Decode consecutive 8-bit groups back into characters."""
    values = coerce_bits(bits)
    if len(values) % BITS_PER_CHAR != 0:
        raise BitLengthError(
            f"bit length must be a multiple of {BITS_PER_CHAR} (got {len(values)})"
        )
    return "".join(
        chr(bits_to_int(values, start, BITS_PER_CHAR))
        for start in range(0, len(values), BITS_PER_CHAR)
    )


__all__ = ["BITS_PER_CHAR", "to_ascii", "to_binary"]
