"""Shared pytest fixtures for hammingfec tests."""

import numpy as np
import pytest

HELLO = "hello"
HELLO_BITS = "0110100001100101011011000110110001101111"

# Parity slots of the 16-bit "hello" blocks marked None
HELLO_CHUNKS = [
    [None, None, None, 0, None, 1, 1, 0, None, 1, 0, 0, 0, 0, 1, 1],
    [None, None, None, 0, None, 0, 1, 0, None, 1, 0, 1, 1, 0, 1, 1],
    [None, None, None, 0, None, 0, 0, 1, None, 1, 0, 1, 1, 0, 0, 0],
    [None, None, None, 1, None, 1, 0, 1, None, 1, 1, 1, 0, 0, 0, 0],
]

HELLO_BLOCKS = [
    [0, 1, 1, 0, 0, 1, 1, 0, 1, 1, 0, 0, 0, 0, 1, 1],
    [0, 1, 0, 0, 0, 0, 1, 0, 1, 1, 0, 1, 1, 0, 1, 1],
    [0, 1, 0, 0, 0, 0, 0, 1, 1, 1, 0, 1, 1, 0, 0, 0],
    [0, 1, 0, 1, 0, 1, 0, 1, 1, 1, 1, 1, 0, 0, 0, 0],
]


@pytest.fixture
def hello_bits() -> list[int]:
    return [int(c) for c in HELLO_BITS]


@pytest.fixture
def hello_blocks() -> list[np.ndarray]:
    return [np.array(block, dtype=np.uint8) for block in HELLO_BLOCKS]


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so corruption patterns are reproducible."""
    return np.random.default_rng(1234)


@pytest.fixture
def clean_env(monkeypatch):
    """Drop any HAMMINGFEC environment overrides from the test process."""
    import hammingfec.config as config_module

    monkeypatch.setattr(config_module, "os_environ_items", lambda: [])
    monkeypatch.delenv("HAMMINGFEC_CONFIG", raising=False)
    monkeypatch.delenv("HAMMINGFEC_LOG_LEVEL", raising=False)


@pytest.fixture
def hello_chunks() -> list[list[int | None]]:
    return [list(block) for block in HELLO_CHUNKS]
