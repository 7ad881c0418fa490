"""Solana HD Wallet built on SLIP-0010 Ed25519 derivation.

Coin type: 501
Address format: Base58 of the 32-byte Ed25519 public key
Default path: m/44'/501'/{index}'/0'

The derived 32-byte key is used as the Ed25519 private seed. Solana
wallets import a 64-byte secret key (seed || public key) in Base58.
"""

import logging
from typing import Optional

import base58
from mnemonic import Mnemonic
from nacl.signing import SigningKey

from slipkey.hdwallet.base import AddressInfo, HDWalletProvider, InvalidMnemonicError
from slipkey.hdwallet.slip10 import derive

logger = logging.getLogger(__name__)

SOLANA_PATH_TEMPLATE = "m/44'/501'/{index}'/0'"
VALID_WORD_COUNTS = (12, 24)

_mnemo = Mnemonic("english")


def seed_from_mnemonic(phrase: str, passphrase: str = "") -> bytes:
    """Convert a BIP-39 seed phrase to its 64-byte seed.

    Args:
        phrase: 12 or 24 word English seed phrase
        passphrase: Optional BIP-39 passphrase

    Returns:
        64-byte seed

    Raises:
        InvalidMnemonicError: If the phrase fails word count or checksum validation
    """
    words = " ".join(phrase.strip().lower().split())
    if len(words.split()) not in VALID_WORD_COUNTS or not _mnemo.check(words):
        raise InvalidMnemonicError("Invalid mnemonic - must be 12 or 24 valid words")
    return Mnemonic.to_seed(words, passphrase=passphrase)


def keypair_from_key(key: bytes) -> SigningKey:
    """Build an Ed25519 signing key from a derived 32-byte key."""
    return SigningKey(bytes(key))


class SolanaHDWallet(HDWalletProvider):
    """Solana HD Wallet.

    Usage:
        wallet = SolanaHDWallet.from_mnemonic("abandon ... about")
        addr = wallet.derive_address(index=0)
    """

    def __init__(
        self,
        seed: bytes,
        path_template: str = SOLANA_PATH_TEMPLATE,
        strict: bool = False,
    ):
        super().__init__(seed, path_template, strict=strict)

    @classmethod
    def from_mnemonic(
        cls,
        phrase: str,
        passphrase: str = "",
        path_template: str = SOLANA_PATH_TEMPLATE,
        strict: bool = False,
    ) -> "SolanaHDWallet":
        """Create a wallet from a BIP-39 seed phrase."""
        return cls(seed_from_mnemonic(phrase, passphrase), path_template, strict=strict)

    @property
    def asset(self) -> str:
        return "SOL"

    @property
    def coin_type(self) -> int:
        return 501

    def get_signing_key(self, index: int) -> SigningKey:
        """Get the Ed25519 signing key for an account index."""
        node = derive(self._seed, self.get_derivation_path(index), strict=self.strict)
        return keypair_from_key(node.key)

    def derive_address(self, index: int) -> AddressInfo:
        signing_key = self.get_signing_key(index)
        public_key = signing_key.verify_key.encode()
        address = base58.b58encode(public_key).decode()

        logger.info(f"Derived SOL address {address} at index {index}")

        return AddressInfo(
            address=address,
            asset=self.asset,
            derivation_path=self.get_derivation_path(index),
            index=index,
            public_key=public_key.hex(),
        )

    def export_secret_key(self, index: int) -> str:
        """Export the 64-byte secret key (seed || public key) in Base58."""
        signing_key = self.get_signing_key(index)
        secret_key = signing_key.encode() + signing_key.verify_key.encode()
        return base58.b58encode(secret_key).decode()

    def derive_addresses(self, count: int, start: int = 0) -> list[AddressInfo]:
        """Derive ``count`` consecutive addresses starting at ``start``."""
        return [self.derive_address(index) for index in range(start, start + count)]


def derive_solana_address(seed: bytes, index: int = 0, path_template: Optional[str] = None) -> str:
    """Convenience function returning the Base58 address for an account index."""
    wallet = SolanaHDWallet(seed, path_template or SOLANA_PATH_TEMPLATE)
    return wallet.derive_address(index).address
