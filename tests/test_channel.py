from __future__ import annotations

import numpy as np
import pytest

from hammingfec.channel import flip_bit, inject_single_bit_errors


def test_flip_bit_returns_copy(hello_blocks) -> None:
    original = hello_blocks[0]
    flipped = flip_bit(original, 4)
    assert flipped[4] == 1 - original[4]
    assert int((flipped != original).sum()) == 1
    assert original[4] == 0


@pytest.mark.parametrize("index", [-1, 16, 100])
def test_flip_bit_rejects_out_of_range(hello_blocks, index: int) -> None:
    with pytest.raises(IndexError):
        flip_bit(hello_blocks[0], index)


def test_inject_always(hello_blocks, rng) -> None:
    corrupted, flipped = inject_single_bit_errors(hello_blocks, 1.0, rng)
    assert len(corrupted) == len(flipped) == 4
    for original, received, index in zip(hello_blocks, corrupted, flipped):
        assert index is not None
        diff = np.flatnonzero(received != original)
        assert diff.tolist() == [index]


def test_inject_never(hello_blocks, rng) -> None:
    corrupted, flipped = inject_single_bit_errors(hello_blocks, 0.0, rng)
    assert flipped == [None] * 4
    for original, received in zip(hello_blocks, corrupted):
        np.testing.assert_array_equal(received, original)


def test_inject_leaves_input_untouched(hello_blocks, rng) -> None:
    snapshot = [block.copy() for block in hello_blocks]
    inject_single_bit_errors(hello_blocks, 1.0, rng)
    for block, before in zip(hello_blocks, snapshot):
        np.testing.assert_array_equal(block, before)


def test_inject_is_reproducible_with_seed(hello_blocks) -> None:
    _, first = inject_single_bit_errors(hello_blocks, 0.5, np.random.default_rng(7))
    _, second = inject_single_bit_errors(hello_blocks, 0.5, np.random.default_rng(7))
    assert first == second


@pytest.mark.parametrize("probability", [-0.1, 1.5])
def test_inject_rejects_bad_probability(hello_blocks, probability: float) -> None:
    with pytest.raises(ValueError):
        inject_single_bit_errors(hello_blocks, probability)
