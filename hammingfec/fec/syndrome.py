"""Single-error location and correction for extended Hamming blocks.

The syndrome of a block is the XOR of the indices of all its set bits. A
valid block has syndrome 0 and even overall parity, so flipping bit k makes
the syndrome equal to k. Flipping bit 0 leaves the syndrome at 0 but makes
overall parity odd, which is how that case is told apart from no error.

Only one error per block can be corrected. With two or more flipped bits the
syndrome points at an unrelated position and correction makes the block
worse; this is a limit of the code, and it is not detected here.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

import numpy as np

from hammingfec.blocks import Block, as_block

logger = logging.getLogger(__name__)

NO_ERROR = -1


def syndrome(block: Sequence[int]) -> int:
    """XOR of the indices of every set bit."""
    values = as_block(block)
    return int(np.bitwise_xor.reduce(np.flatnonzero(values)))


def overall_parity(block: Sequence[int]) -> int:
    """Count of set bits modulo 2."""
    return int(as_block(block).sum()) & 1


def find_error(block: Sequence[int]) -> int:
    """Find the index of a single flipped bit.

    Returns:
        Index of the errored bit, or NO_ERROR (-1) if the block is valid
    """
    values = as_block(block)
    position = syndrome(values)
    if position:
        return position
    return 0 if overall_parity(values) else NO_ERROR


def correct_block(block: Sequence[int]) -> tuple[Block, int]:
    """Correct up to one error in a block.

    Returns:
        Tuple of (corrected copy, errored index or NO_ERROR)
    """
    corrected = as_block(block)
    position = find_error(corrected)
    if position != NO_ERROR:
        corrected[position] ^= 1
    return corrected, position


def correct_message(blocks: Iterable[Sequence[int]]) -> tuple[list[Block], list[int]]:
    """Fix up to one error in each block; blocks are corrected independently.

    Returns:
        Tuple of (corrected copies, errored index or NO_ERROR per block)
    """
    corrected: list[Block] = []
    positions: list[int] = []
    for block_index, block in enumerate(blocks):
        fixed, position = correct_block(block)
        if position != NO_ERROR:
            logger.debug("block %d: corrected bit %d", block_index, position)
        corrected.append(fixed)
        positions.append(position)
    return corrected, positions


def correct_errors(blocks: Iterable[Sequence[int]]) -> list[Block]:
    """Fix up to one error in each block."""
    corrected, _ = correct_message(blocks)
    return corrected


__all__ = [
    "NO_ERROR",
    "correct_block",
    "correct_errors",
    "correct_message",
    "find_error",
    "overall_parity",
    "syndrome",
]
