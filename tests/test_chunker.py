from __future__ import annotations

import numpy as np
import pytest

from hammingfec.blocks import RESERVED, Data, data_capacity
from hammingfec.chunker import chunk, join
from hammingfec.errors import BlockSizeError
from hammingfec.fec.parity import add_parity_bits


def _as_plain(block) -> list[int | None]:
    return [None if slot is RESERVED else slot.bit for slot in block.slots]


def test_chunk_hello_blocks(hello_bits, hello_chunks) -> None:
    blocks = chunk(hello_bits, 16)
    assert len(blocks) == len(hello_chunks)
    for i, (actual, expected) in enumerate(zip(blocks, hello_chunks)):
        assert _as_plain(actual) == expected, f"block {i}"


def test_chunk_reserves_parity_slots(hello_bits) -> None:
    for block in chunk(hello_bits, 16):
        reserved = [i for i, slot in enumerate(block.slots) if slot is RESERVED]
        assert reserved == [0, 1, 2, 4, 8]


def test_chunk_pads_final_block_with_zeros() -> None:
    blocks = chunk([1] * 5, 8)
    assert len(blocks) == 2
    assert blocks[0].data_bits == [1, 1, 1, 1]
    assert blocks[1].data_bits == [1, 0, 0, 0]


def test_chunk_exact_fit_has_no_extra_block() -> None:
    blocks = chunk([1] * 11, 16)
    assert len(blocks) == 1
    assert blocks[0].data_bits == [1] * 11


def test_chunk_empty_input() -> None:
    assert chunk([], 16) == []


@pytest.mark.parametrize("size", [0, 3, 10, 15])
def test_chunk_rejects_invalid_block_size(size: int) -> None:
    with pytest.raises(BlockSizeError):
        chunk([1, 0, 1], size)


def test_chunk_rejects_block_size_without_data_room() -> None:
    assert chunk([], 2) == []
    with pytest.raises(BlockSizeError):
        chunk([0, 1, 0, 0, 0, 0, 0, 1], 2)


def test_chunk_minimum_data_block_one_char() -> None:
    bits = [0, 1, 0, 0, 0, 0, 0, 1]
    blocks = chunk(bits, 4)
    assert len(blocks) == 8
    for bit, block in zip(bits, blocks):
        assert block.slots == (RESERVED, RESERVED, RESERVED, Data(bit))


def test_join_hello(hello_blocks, hello_bits) -> None:
    assert join(hello_blocks) == hello_bits


def test_join_accepts_plain_lists(hello_blocks, hello_bits) -> None:
    assert join([block.tolist() for block in hello_blocks]) == hello_bits


def test_join_truncates_to_whole_bytes() -> None:
    block = add_parity_bits(chunk([1] * 11, 16)[0])
    assert join([block]) == [1] * 8


def test_join_empty() -> None:
    assert join([]) == []


def test_join_size_two_blocks_carry_nothing() -> None:
    assert join([np.array([0, 0], dtype=np.uint8), [1, 1]]) == []


@pytest.mark.parametrize("size", [4, 8, 16, 32, 64])
@pytest.mark.parametrize("length", [1, 8, 13, 40, 123])
def test_chunk_join_inverse_up_to_padding(size: int, length: int) -> None:
    bits = [int(b) for b in np.random.default_rng(length).integers(0, 2, length)]
    capacity = data_capacity(size)
    padded = bits + [0] * ((-len(bits)) % capacity)
    expected = padded[: len(padded) - len(padded) % 8]

    joined = join(add_parity_bits(block) for block in chunk(bits, size))

    assert joined == expected
