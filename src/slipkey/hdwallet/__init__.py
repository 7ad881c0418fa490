"""HD Wallet module for SLIP-0010 Ed25519 key derivation."""

from slipkey.hdwallet.base import (
    AddressInfo,
    DerivationPathError,
    ExtendedKey,
    HDWalletProvider,
    InvalidMnemonicError,
    InvalidPathFormatError,
    InvalidPathSegmentError,
    WalletError,
    WalletNotConfiguredError,
)
from slipkey.hdwallet.factory import get_hd_wallet, reset_hd_wallet
from slipkey.hdwallet.path import format_path, parse_path
from slipkey.hdwallet.slip10 import derive, derive_child, master_key
from slipkey.hdwallet.solana import SolanaHDWallet, keypair_from_key, seed_from_mnemonic

__all__ = [
    "AddressInfo",
    "DerivationPathError",
    "ExtendedKey",
    "HDWalletProvider",
    "InvalidMnemonicError",
    "InvalidPathFormatError",
    "InvalidPathSegmentError",
    "SolanaHDWallet",
    "WalletError",
    "WalletNotConfiguredError",
    "derive",
    "derive_child",
    "format_path",
    "get_hd_wallet",
    "keypair_from_key",
    "master_key",
    "parse_path",
    "reset_hd_wallet",
    "seed_from_mnemonic",
]
