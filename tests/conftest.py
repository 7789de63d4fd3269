import logging
import os

import pytest
from unittest.mock import patch

from grinpow.core.params import PROOF_SIZE


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without GRINPOW_* settings from the outer environment"""
    for key in list(os.environ):
        if key.startswith("GRINPOW_"):
            monkeypatch.delenv(key)


def native_digest(value):
    """Cycle hash bytes (native little-endian order) whose scored integer is ``value``."""
    return value.to_bytes(32, "big")[::-1]


@pytest.fixture
def sample_solution():
    """Strictly increasing proof that fits both edge sizes"""
    return [i * 1000 + 7 for i in range(PROOF_SIZE)]


@pytest.fixture
def sample_header():
    return bytes(range(80))


@pytest.fixture
def fixed_digest():
    """Patch the cycle hash used for scoring so it returns a chosen integer"""
    patches = []

    def _apply(value):
        p = patch("grinpow.mining.difficulty.cycle_hash", return_value=native_digest(value))
        patches.append(p)
        return p.start()

    yield _apply
    for p in reversed(patches):
        p.stop()


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop console handlers installed by setup_logging during a test"""
    yield
    logger = logging.getLogger("grinpow")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
