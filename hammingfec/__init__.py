"""
hammingfec - Hamming code forward error correction

Encodes text into fixed-size power-of-two blocks protected by extended
Hamming parity, and decodes them back while correcting up to one flipped
bit per block.
"""

from hammingfec.binary import to_ascii, to_binary
from hammingfec.blocks import (
    RESERVED,
    Data,
    PendingBlock,
    Reserved,
    data_capacity,
    validate_block_size,
)
from hammingfec.chunker import chunk, join
from hammingfec.codec import (
    CorrectionReport,
    DecodeResult,
    HammingCodec,
    decode,
    decode_with_report,
    encode,
)
from hammingfec.config import AppConfig, CodecConfig, load_config
from hammingfec.errors import (
    BitFormatError,
    BitLengthError,
    BlockSizeError,
    CharacterRangeError,
    ConfigError,
    HammingError,
)
from hammingfec.fec import NO_ERROR, add_parity_bits, correct_errors, find_error

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AppConfig",
    "BitFormatError",
    "BitLengthError",
    "BlockSizeError",
    "CharacterRangeError",
    "CodecConfig",
    "ConfigError",
    "CorrectionReport",
    "Data",
    "DecodeResult",
    "HammingCodec",
    "HammingError",
    "NO_ERROR",
    "PendingBlock",
    "RESERVED",
    "Reserved",
    "add_parity_bits",
    "chunk",
    "correct_errors",
    "data_capacity",
    "decode",
    "decode_with_report",
    "encode",
    "find_error",
    "join",
    "load_config",
    "to_ascii",
    "to_binary",
    "validate_block_size",
]
