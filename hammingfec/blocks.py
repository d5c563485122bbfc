"""Block layout for the extended Hamming code.

A block of N bits (N a power of two) is laid out by index:

- index 0 holds the overall parity bit (even parity over the rest of the block)
- every power-of-two index p holds the parity of all indices with bit log2(p) set
- every other index carries message data

A block of size N therefore carries N - log2(N) - 1 data bits. While a block is
being built its parity slots are ``RESERVED``; only a ``PendingBlock`` may hold
reserved slots, and only ``add_parity_bits`` turns one into a transmittable
``Block`` (a ``uint8`` array of 0/1 values).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, TypeAlias

import numpy as np

from hammingfec.errors import BitFormatError, BlockSizeError
from hammingfec.typing import BitArray
from hammingfec.utils.packing import coerce_bits, is_power_of_two

MIN_BLOCK_SIZE = 2

Block: TypeAlias = BitArray
Message: TypeAlias = list[BitArray]


@dataclass(frozen=True)
class Reserved:
    """Parity slot whose value has not been computed yet."""

    def __repr__(self) -> str:
        return "RESERVED"


RESERVED = Reserved()


@dataclass(frozen=True)
class Data:
    """Slot holding one message bit."""

    bit: int

    def __post_init__(self) -> None:
        if self.bit not in (0, 1):
            raise BitFormatError(f"data bit must be 0 or 1 (got {self.bit!r})")


Slot: TypeAlias = Reserved | Data


@dataclass(frozen=True)
class PendingBlock:
    """Block under construction: data placed, parity slots still reserved."""

    slots: tuple[Slot, ...]

    def __post_init__(self) -> None:
        validate_block_size(len(self.slots))
        for index, slot in enumerate(self.slots):
            if is_parity_position(index) != isinstance(slot, Reserved):
                raise BitFormatError(
                    f"slot {index} is {slot!r}; parity slots must be reserved "
                    "and data slots must carry a bit"
                )

    @property
    def size(self) -> int:
        return len(self.slots)

    @property
    def data_bits(self) -> list[int]:
        return [slot.bit for slot in self.slots if isinstance(slot, Data)]


def validate_block_size(block_size: int) -> int:
    """Return block_size if it is a power of two >= 2, else raise BlockSizeError."""
    if isinstance(block_size, bool) or not isinstance(block_size, (int, np.integer)):
        raise BlockSizeError(f"block size must be an integer (got {block_size!r})")
    size = int(block_size)
    if size < MIN_BLOCK_SIZE or not is_power_of_two(size):
        raise BlockSizeError(
            f"block size must be a power of two >= {MIN_BLOCK_SIZE} (got {size})"
        )
    return size


def is_parity_position(index: int) -> bool:
    return index == 0 or is_power_of_two(index)


def parity_positions(block_size: int) -> list[int]:
    """Indices of the parity slots, overall parity first: [0, 1, 2, 4, ...]."""
    size = validate_block_size(block_size)
    return [0] + [1 << bit for bit in range(size.bit_length() - 1)]


def data_positions(block_size: int) -> list[int]:
    size = validate_block_size(block_size)
    return [index for index in range(size) if not is_parity_position(index)]


def data_capacity(block_size: int) -> int:
    """Number of message bits a block carries: N - log2(N) - 1."""
    size = validate_block_size(block_size)
    return size - size.bit_length()


def data_mask(block_size: int) -> np.ndarray:
    """Boolean mask selecting the data positions of a block."""
    mask = np.ones(validate_block_size(block_size), dtype=bool)
    mask[parity_positions(block_size)] = False
    return mask


def as_block(bits: Iterable[int]) -> Block:
    """Copy a received block into a fresh uint8 array, validating its shape."""
    values = coerce_bits(bits)
    validate_block_size(len(values))
    return np.array(values, dtype=np.uint8)


__all__ = [
    "Block",
    "Data",
    "MIN_BLOCK_SIZE",
    "Message",
    "PendingBlock",
    "RESERVED",
    "Reserved",
    "Slot",
    "as_block",
    "data_capacity",
    "data_mask",
    "data_positions",
    "is_parity_position",
    "parity_positions",
    "validate_block_size",
]
