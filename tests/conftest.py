"""Pytest configuration and fixtures."""

import os

import pytest

# Keep a developer's shell wallet out of the test run
os.environ.pop("WALLET_SEED_PHRASE", None)
os.environ.pop("WALLET_PASSPHRASE", None)

from slipkey.config import get_settings
from slipkey.hdwallet.factory import reset_hd_wallet


@pytest.fixture(autouse=True)
def clear_caches(tmp_path, monkeypatch):
    """Run from an empty directory with fresh settings and wallet caches."""
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    reset_hd_wallet()
    yield
    get_settings.cache_clear()
    reset_hd_wallet()


@pytest.fixture
def test_mnemonic() -> str:
    """BIP-39 test phrase (all-zero entropy)."""
    return (
        "abandon abandon abandon abandon abandon abandon "
        "abandon abandon abandon abandon abandon about"
    )


@pytest.fixture
def mnemonic_seed() -> bytes:
    """64-byte BIP-39 seed of the test phrase with no passphrase."""
    return bytes.fromhex(
        "5eb00bbddcf069084889a8ab9155568165f5c453ccb85e70811aaed6f6da5fc1"
        "9a5ac40b389cd370d086206dec8aa6c43daea6690f20ad3d8d48b2d2ce9e38e4"
    )
