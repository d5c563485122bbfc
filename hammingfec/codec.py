"""Text encode/decode built from the converter, chunker and FEC stages.

encode: text -> to_binary -> chunk -> add_parity_bits (per block)
decode: blocks -> correct_errors -> join -> to_ascii -> strip_padding
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from hammingfec.binary import BITS_PER_CHAR, to_ascii, to_binary
from hammingfec.blocks import Block, Message, as_block, data_capacity, validate_block_size
from hammingfec.chunker import chunk, join
from hammingfec.config import CodecConfig
from hammingfec.errors import BitFormatError, BlockSizeError
from hammingfec.fec.parity import add_parity_bits
from hammingfec.fec.syndrome import NO_ERROR, correct_errors, correct_message

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Correction:
    block_index: int
    bit_index: int


@dataclass
class CorrectionReport:
    """Corrections applied while decoding a message."""

    blocks_checked: int = 0
    corrections: list[Correction] = field(default_factory=list)

    @property
    def corrected_blocks(self) -> int:
        return len(self.corrections)

    def summary(self) -> str:
        if not self.corrections:
            return f"{self.blocks_checked} block(s) checked, no errors detected"
        return (
            f"{self.blocks_checked} block(s) checked, "
            f"{self.corrected_blocks} single-bit error(s) corrected"
        )


@dataclass
class DecodeResult:
    text: str
    report: CorrectionReport


def encode(text: str, block_size: int) -> Message:
    """Encode text into blocks ready for transmission."""
    size = validate_block_size(block_size)
    return [add_parity_bits(pending) for pending in chunk(to_binary(text), size)]


def strip_padding(text: str, blocks: Sequence[Block]) -> str:
    """Drop NUL characters that can only come from final-block zero padding.

    Padding is shorter than one block's data capacity, so the message must
    reach into the last block; trailing NULs past that point are padding.
    A message that itself ends in NUL inside the last block loses them.
    """
    if not blocks:
        return text
    leading_capacity = sum(data_capacity(block.size) for block in blocks[:-1])
    min_length = leading_capacity // BITS_PER_CHAR + 1
    end = len(text)
    while end > min_length and text[end - 1] == "\x00":
        end -= 1
    return text[:end]


def decode(blocks: Iterable[Sequence[int]]) -> str:
    """Decode received blocks, correcting up to one error per block."""
    corrected = correct_errors(blocks)
    return strip_padding(to_ascii(join(corrected)), corrected)


def decode_with_report(blocks: Iterable[Sequence[int]]) -> DecodeResult:
    """Decode like decode(), also recording every correction made."""
    corrected, positions = correct_message(blocks)
    report = CorrectionReport(
        blocks_checked=len(corrected),
        corrections=[
            Correction(block_index, position)
            for block_index, position in enumerate(positions)
            if position != NO_ERROR
        ],
    )

    logger.debug(report.summary())
    return DecodeResult(text=strip_padding(to_ascii(join(corrected)), corrected), report=report)


class HammingCodec:
    """Codec bound to a single block size."""

    def __init__(self, block_size: int | None = None, config: CodecConfig | None = None):
        if block_size is None:
            block_size = (config or CodecConfig()).block_size
        self.block_size = validate_block_size(block_size)

    @property
    def data_capacity(self) -> int:
        return data_capacity(self.block_size)

    def encode(self, text: str) -> Message:
        return encode(text, self.block_size)

    def decode(self, blocks: Iterable[Sequence[int]]) -> str:
        return decode(self._checked(blocks))

    def decode_with_report(self, blocks: Iterable[Sequence[int]]) -> DecodeResult:
        return decode_with_report(self._checked(blocks))

    def _checked(self, blocks: Iterable[Sequence[int]]) -> list[Block]:
        checked = [as_block(block) for block in blocks]
        for index, block in enumerate(checked):
            if block.size != self.block_size:
                raise BlockSizeError(
                    f"block {index} has {block.size} bits, expected {self.block_size}"
                )
        return checked

    def __repr__(self) -> str:
        return f"HammingCodec(block_size={self.block_size})"


def format_message(blocks: Iterable[Sequence[int]]) -> list[str]:
    """Render each block as a string of 0/1 characters."""
    return ["".join(str(int(bit)) for bit in block) for block in blocks]


def parse_message(lines: Iterable[str]) -> Message:
    """Parse bit strings back into blocks; blank lines are skipped."""
    blocks: Message = []
    for line_number, line in enumerate(lines, start=1):
        text = line.strip()
        if not text:
            continue
        if set(text) - {"0", "1"}:
            raise BitFormatError(f"line {line_number}: expected only 0 and 1 characters")
        try:
            blocks.append(as_block(int(char) for char in text))
        except BlockSizeError as exc:
            raise BlockSizeError(f"line {line_number}: {exc}") from exc
    return blocks


__all__ = [
    "Correction",
    "CorrectionReport",
    "DecodeResult",
    "HammingCodec",
    "decode",
    "decode_with_report",
    "encode",
    "format_message",
    "parse_message",
    "strip_padding",
]
