"""Utility modules for hammingfec."""

from hammingfec.utils.log_levels import configure_logging, parse_log_level
from hammingfec.utils.packing import (
    bits_to_int,
    coerce_bits,
    int_to_bits,
    is_power_of_two,
    pad_bits,
)

__all__ = [
    "bits_to_int",
    "coerce_bits",
    "configure_logging",
    "int_to_bits",
    "is_power_of_two",
    "pad_bits",
    "parse_log_level",
]
