#!/usr/bin/env python3
"""hammingfec Command Line Interface.

Usage:
    python -m hammingfec encode "hello" --block-size 16
    python -m hammingfec encode "hello" --format bits > message.txt
    python -m hammingfec decode --file message.txt --report
    python -m hammingfec simulate "hello" --probability 1.0 --seed 7
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

import numpy as np

from hammingfec.blocks import Message
from hammingfec.channel import inject_single_bit_errors
from hammingfec.codec import (
    HammingCodec,
    decode_with_report,
    format_message,
    parse_message,
)
from hammingfec.config import AppConfig, load_config
from hammingfec.errors import BitFormatError, HammingError
from hammingfec.utils.log_levels import configure_logging, parse_log_level

logger = logging.getLogger(__name__)


def _codec_for(args: argparse.Namespace, cfg: AppConfig) -> HammingCodec:
    if args.block_size is not None:
        return HammingCodec(args.block_size)
    return HammingCodec(config=cfg.codec)


def _read_message(text: str) -> Message:
    """Accept either a JSON list of bit strings or one bit string per line."""
    stripped = text.strip()
    if stripped.startswith("["):
        try:
            lines = json.loads(stripped)
        except json.JSONDecodeError as exc:
            raise BitFormatError(f"invalid JSON message: {exc}") from exc
        if not isinstance(lines, list):
            raise BitFormatError("JSON message must be a list of bit strings")
        return parse_message(str(line) for line in lines)
    return parse_message(stripped.splitlines())


def cmd_encode(args: argparse.Namespace, cfg: AppConfig) -> int:
    """Encode text and print the blocks."""
    codec = _codec_for(args, cfg)
    lines = format_message(codec.encode(args.text))
    logger.info("encoded %d chars into %d blocks of %d", len(args.text), len(lines), codec.block_size)
    if args.format == "json":
        print(json.dumps(lines))
    else:
        for line in lines:
            print(line)
    return 0


def cmd_decode(args: argparse.Namespace, cfg: AppConfig) -> int:
    """Decode blocks from a file or stdin and print the text."""
    if args.file:
        try:
            raw = Path(args.file).read_text(encoding="utf-8")
        except OSError as exc:
            print(f"Error: cannot read {args.file}: {exc}", file=sys.stderr)
            return 2
    else:
        raw = sys.stdin.read()
    result = decode_with_report(_read_message(raw))
    if args.report:
        for correction in result.report.corrections:
            logger.info("block %d: corrected bit %d", correction.block_index, correction.bit_index)
        logger.info(result.report.summary())
    print(result.text)
    return 0


def cmd_simulate(args: argparse.Namespace, cfg: AppConfig) -> int:
    """Encode, corrupt one bit per block at random, decode and compare."""
    codec = _codec_for(args, cfg)
    rng = np.random.default_rng(args.seed)
    encoded = codec.encode(args.text)
    corrupted, flipped = inject_single_bit_errors(encoded, args.probability, rng)
    result = codec.decode_with_report(corrupted)

    hits = sum(1 for index in flipped if index is not None)
    print(f"blocks: {len(encoded)}  flipped: {hits}  corrected: {result.report.corrected_blocks}")
    print(f"decoded: {result.text!r}")
    if result.text != args.text:
        logger.error("round trip mismatch: expected %r", args.text)
        return 1
    print("OK")
    return 0


def _default_config_path() -> str | None:
    return os.environ.get("HAMMINGFEC_CONFIG")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="hammingfec",
        description="Hamming code forward error correction for text",
    )
    parser.add_argument("-c", "--config", default=_default_config_path(), help="Path to YAML config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    p_encode = subparsers.add_parser("encode", help="Encode text into Hamming blocks")
    p_encode.add_argument("text", help="ASCII text to encode")
    p_encode.add_argument("-b", "--block-size", type=int, default=None,
                          help="Bits per block, a power of two (default from config: 16)")
    p_encode.add_argument("--format", choices=["json", "bits"], default="json",
                          help="Output as a JSON list or one bit string per line")
    p_encode.set_defaults(func=cmd_encode)

    p_decode = subparsers.add_parser("decode", help="Decode Hamming blocks into text")
    p_decode.add_argument("-f", "--file", help="Input file (default: stdin)")
    p_decode.add_argument("--report", action="store_true", help="Log every correction made")
    p_decode.set_defaults(func=cmd_decode)

    p_sim = subparsers.add_parser("simulate", help="Round trip text through a noisy channel")
    p_sim.add_argument("text", help="ASCII text to send")
    p_sim.add_argument("-b", "--block-size", type=int, default=None,
                       help="Bits per block, a power of two (default from config: 16)")
    p_sim.add_argument("-p", "--probability", type=float, default=0.5,
                       help="Chance of flipping one bit in each block (default: 0.5)")
    p_sim.add_argument("--seed", type=int, default=None, help="Random seed")
    p_sim.set_defaults(func=cmd_simulate)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        cfg = load_config(args.config)
    except HammingError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    if args.verbose:
        level = logging.DEBUG
    else:
        configured = parse_log_level(cfg.logging.level, logging.INFO)
        level = parse_log_level(os.environ.get("HAMMINGFEC_LOG_LEVEL"), configured)
    configure_logging(level)

    try:
        return int(args.func(args, cfg))
    except ValueError as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
