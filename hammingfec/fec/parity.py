"""Parity bit computation for extended Hamming blocks.

Each power-of-two position p covers every position whose index has bit
log2(p) set. Because parity positions are single-bit indices, no parity bit
covers another, so the individual parity bits can be filled in any order.
The overall parity bit at index 0 is computed last, over positions 1..N-1.

For N = 16 the groups are:
- p1: 3, 5, 7, 9, 11, 13, 15
- p2: 3, 6, 7, 10, 11, 14, 15
- p4: 5, 6, 7, 12, 13, 14, 15
- p8: 9, 10, 11, 12, 13, 14, 15
"""

from __future__ import annotations

import numpy as np

from hammingfec.blocks import Block, Data, PendingBlock, parity_positions


def parity_group(block_size: int, position: int) -> np.ndarray:
    """Indices covered by the parity bit at ``position``, excluding itself."""
    indices = np.arange(block_size)
    covered = indices[(indices & position) != 0]
    return covered[covered != position]


def add_parity_bits(block: PendingBlock) -> Block:
    """Calculate the parity slots of a pending block.

    Args:
        block: Block with data placed and parity slots reserved

    Returns:
        New uint8 array with every slot resolved to 0 or 1
    """
    size = block.size
    resolved = np.zeros(size, dtype=np.uint8)
    for index, slot in enumerate(block.slots):
        if isinstance(slot, Data):
            resolved[index] = slot.bit

    for position in parity_positions(size)[1:]:
        group = parity_group(size, position)
        resolved[position] = int(resolved[group].sum()) & 1

    resolved[0] = int(resolved[1:].sum()) & 1
    return resolved


__all__ = ["add_parity_bits", "parity_group"]
