from __future__ import annotations

from typing import Iterable, Sequence

from hammingfec.errors import BitFormatError


def is_power_of_two(value: int) -> bool:
    """True for 1, 2, 4, 8, ..."""
    return value > 0 and (value & (value - 1)) == 0


def int_to_bits(value: int, width: int) -> list[int]:
    """Convert int to big-endian bit list of fixed width."""
    if width <= 0:
        raise ValueError("width must be positive")
    if value < 0 or value >= (1 << width):
        raise ValueError(f"value {value} does not fit in {width} bits")
    return [(value >> (width - 1 - i)) & 1 for i in range(width)]


def bits_to_int(bits: Sequence[int], start: int, length: int) -> int:
    """Extract an integer from a bit sequence."""
    if length <= 0:
        raise ValueError("length must be positive")
    if start < 0 or start + length > len(bits):
        raise ValueError(
            f"cannot read {length} bits from offset {start} (len={len(bits)})"
        )
    value = 0
    for i in range(length):
        value = (value << 1) | (int(bits[start + i]) & 1)
    return value


def pad_bits(bits: Sequence[int], block_size: int, pad_bit: int = 0) -> list[int]:
    """Pad bits to a multiple of block_size using pad_bit."""
    if block_size <= 0:
        raise ValueError("block_size must be positive")
    if pad_bit not in (0, 1):
        raise ValueError("pad_bit must be 0 or 1")
    padded = list(bits)
    remainder = len(padded) % block_size
    if remainder:
        padded.extend([pad_bit] * (block_size - remainder))
    return padded


def coerce_bits(bits: Iterable[int]) -> list[int]:
    """Copy bits into a list of ints, rejecting anything but 0 and 1."""
    result: list[int] = []
    for position, bit in enumerate(bits):
        try:
            value = int(bit)
        except (TypeError, ValueError) as exc:
            raise BitFormatError(f"bit {position} is not an int-like value") from exc
        if value not in (0, 1):
            raise BitFormatError(f"bit {position} is {bit!r}, expected 0 or 1")
        result.append(value)
    return result


__all__ = [
    "bits_to_int",
    "coerce_bits",
    "int_to_bits",
    "is_power_of_two",
    "pad_bits",
]
