"""HD Wallet base types.

This module defines the value types shared by the SLIP-0010 Ed25519
derivation core and the wallet providers built on top of it.

Ed25519 only supports hardened derivation, so every index handled here
carries the hardened bit (0x80000000).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

HARDENED_OFFSET = 0x80000000
MAX_INDEX = 0xFFFFFFFF
KEY_SIZE = 32


class DerivationPathError(ValueError):
    """Exception raised when a derivation path cannot be parsed."""
    pass


class InvalidPathFormatError(DerivationPathError):
    """Exception raised when a path does not start with the root marker 'm'."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f'Path must start with "m": {path!r}')


class InvalidPathSegmentError(DerivationPathError):
    """Exception raised when a path segment is not a valid index."""

    def __init__(self, segment: str, reason: str = "not a non-negative integer"):
        self.segment = segment
        self.reason = reason
        super().__init__(f"Invalid path segment {segment!r}: {reason}")


class WalletError(Exception):
    """Exception raised by wallet providers."""
    pass


class InvalidMnemonicError(WalletError):
    """Exception raised when a seed phrase fails BIP-39 validation."""
    pass


class WalletNotConfiguredError(WalletError):
    """Exception raised when no seed phrase is configured."""
    pass


@dataclass(frozen=True)
class ExtendedKey:
    """A (key, chain code) pair at one node of the derivation tree.

    Both halves are always exactly 32 bytes. Instances are immutable;
    every derivation step produces a new one.
    """

    key: bytes = field(repr=False)
    chain_code: bytes = field(repr=False)

    def __post_init__(self):
        if len(self.key) != KEY_SIZE:
            raise ValueError(f"key must be {KEY_SIZE} bytes, got {len(self.key)}")
        if len(self.chain_code) != KEY_SIZE:
            raise ValueError(
                f"chain_code must be {KEY_SIZE} bytes, got {len(self.chain_code)}"
            )

    @classmethod
    def from_digest(cls, digest: bytes) -> "ExtendedKey":
        """Split a 64-byte HMAC-SHA512 digest into key (left) and chain code (right)."""
        return cls(key=bytes(digest[:KEY_SIZE]), chain_code=bytes(digest[KEY_SIZE:]))


@dataclass
class AddressInfo:
    """Information about a derived address."""

    address: str
    asset: str
    derivation_path: str
    index: int
    public_key: Optional[str] = None  # hex


class HDWalletProvider(ABC):
    """Abstract base class for seed-backed HD wallet providers.

    Each implementation handles a specific blockchain. Addresses are derived
    deterministically from the seed using hardened child indexes.

    Usage:
        wallet = SolanaHDWallet.from_mnemonic("abandon ...")
        addr = wallet.derive_address(index=0)
    """

    def __init__(self, seed: bytes, path_template: str, strict: bool = False):
        """Initialize HD wallet with a raw seed.

        Args:
            seed: Seed bytes (64 bytes for a BIP-39 seed)
            path_template: Derivation path with an ``{index}`` placeholder
            strict: Reject path segments without an explicit hardening suffix
        """
        if "{index}" not in path_template:
            raise ValueError(f"Path template has no {{index}} placeholder: {path_template}")
        self._seed = bytes(seed)
        self.path_template = path_template
        self.strict = strict

    @property
    @abstractmethod
    def asset(self) -> str:
        """Asset symbol (SOL, etc.)."""
        pass

    @property
    @abstractmethod
    def coin_type(self) -> int:
        """SLIP-0044 coin type number."""
        pass

    @abstractmethod
    def derive_address(self, index: int) -> AddressInfo:
        """Derive an address at the given account index.

        Args:
            index: Account index (0, 1, 2, ...)

        Returns:
            AddressInfo with the derived address and metadata
        """
        pass

    def get_derivation_path(self, index: int) -> str:
        """Get the full derivation path for an account index."""
        if index < 0:
            raise ValueError(f"Account index must be non-negative, got {index}")
        return self.path_template.format(index=index)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(asset={self.asset}, path={self.path_template})"
