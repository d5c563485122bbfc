"""Splitting flat bit sequences into blocks and joining them back."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from hammingfec.binary import BITS_PER_CHAR
from hammingfec.blocks import (
    RESERVED,
    Data,
    PendingBlock,
    as_block,
    data_capacity,
    data_mask,
    is_parity_position,
    validate_block_size,
)
from hammingfec.errors import BlockSizeError
from hammingfec.utils.packing import coerce_bits, pad_bits

logger = logging.getLogger(__name__)


def chunk(bits: Sequence[int], block_size: int) -> list[PendingBlock]:
    """Break a flat bit sequence into blocks with reserved parity slots.

    Data positions are filled in order; the final block is zero-padded.
    Empty input produces no blocks.

    Args:
        bits: Flat message bits
        block_size: Bits per block, a power of two >= 2

    Returns:
        List of PendingBlock, ready for add_parity_bits
    """
    size = validate_block_size(block_size)
    source = coerce_bits(bits)
    if not source:
        return []

    capacity = data_capacity(size)
    if capacity == 0:
        raise BlockSizeError(f"block size {size} has no room for data bits")

    padded = pad_bits(source, capacity)
    blocks: list[PendingBlock] = []
    for start in range(0, len(padded), capacity):
        payload = iter(padded[start : start + capacity])
        slots = tuple(
            RESERVED if is_parity_position(index) else Data(next(payload))
            for index in range(size)
        )
        blocks.append(PendingBlock(slots))

    logger.debug(
        "chunked %d bits into %d blocks of %d (%d padding bits)",
        len(source),
        len(blocks),
        size,
        len(padded) - len(source),
    )
    return blocks


def join(blocks: Iterable[Sequence[int]]) -> list[int]:
    """Strip parity positions and concatenate data bits across blocks.

    The result is truncated to whole bytes, which drops the zero padding
    added to the final block by chunk().
    """
    bits: list[int] = []
    for block in blocks:
        values = as_block(block)
        bits.extend(int(bit) for bit in values[data_mask(values.size)])

    usable = len(bits) - len(bits) % BITS_PER_CHAR
    return bits[:usable]


__all__ = ["chunk", "join"]
