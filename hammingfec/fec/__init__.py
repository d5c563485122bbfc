"""Forward Error Correction (FEC) for the Hamming block codec.

- parity: fills the parity slots of a pending block
- syndrome: locates and corrects a single flipped bit per block
"""

from hammingfec.fec.parity import add_parity_bits, parity_group
from hammingfec.fec.syndrome import (
    NO_ERROR,
    correct_block,
    correct_errors,
    correct_message,
    find_error,
    overall_parity,
    syndrome,
)

__all__ = [
    "NO_ERROR",
    "add_parity_bits",
    "correct_block",
    "correct_errors",
    "correct_message",
    "find_error",
    "overall_parity",
    "parity_group",
    "syndrome",
]
