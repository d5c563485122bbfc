"""Exception types raised by the Hamming codec.

All codec errors derive from ValueError so callers that already guard
bit-packing helpers with ``except ValueError`` keep working.
"""

from __future__ import annotations


class HammingError(ValueError):
    """Base class for codec errors."""


class BlockSizeError(HammingError):
    """Block size is not a power of two >= 2, or cannot carry the input."""


class BitLengthError(HammingError):
    """Bit sequence length is not a whole number of bytes."""


class BitFormatError(HammingError):
    """A value that should be a bit is not 0 or 1."""


class CharacterRangeError(HammingError):
    """Character code point does not fit in a single byte."""


class ConfigError(HammingError):
    """Configuration file is malformed."""


__all__ = [
    "BitFormatError",
    "BitLengthError",
    "BlockSizeError",
    "CharacterRangeError",
    "ConfigError",
    "HammingError",
]
