"""Simulated noisy channel for exercising the codec.

Flips at most one bit per block, which is the worst case the code is
guaranteed to recover from.
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from hammingfec.blocks import Block, Message, as_block


def flip_bit(block: Sequence[int], index: int) -> Block:
    """Return a copy of ``block`` with the bit at ``index`` inverted."""
    corrupted = as_block(block)
    if index < 0 or index >= corrupted.size:
        raise IndexError(f"bit index {index} out of range for block of {corrupted.size}")
    corrupted[index] ^= 1
    return corrupted


def inject_single_bit_errors(
    blocks: Iterable[Sequence[int]],
    probability: float = 0.5,
    rng: np.random.Generator | None = None,
) -> tuple[Message, list[int | None]]:
    """Corrupt each block with one random bit flip, with the given probability.

    Args:
        blocks: Encoded blocks (left untouched)
        probability: Chance that a given block gets a bit flipped
        rng: Random generator; a fresh default_rng() when omitted

    Returns:
        Tuple of (corrupted copies, flipped index per block or None)
    """
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"probability must be within [0, 1] (got {probability})")
    rng = rng if rng is not None else np.random.default_rng()

    corrupted: Message = []
    flipped: list[int | None] = []
    for block in blocks:
        values = as_block(block)
        if rng.random() < probability:
            index = int(rng.integers(values.size))
            values[index] ^= 1
            flipped.append(index)
        else:
            flipped.append(None)
        corrupted.append(values)
    return corrupted, flipped


__all__ = ["flip_bit", "inject_single_bit_errors"]
