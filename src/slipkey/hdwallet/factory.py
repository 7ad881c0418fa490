"""HD Wallet factory for the configured wallet.

Builds a SolanaHDWallet from the seed phrase in settings.
"""

import logging
from typing import Optional

from slipkey.hdwallet.base import WalletNotConfiguredError
from slipkey.hdwallet.solana import SolanaHDWallet

logger = logging.getLogger(__name__)

# Cached wallet instance
_wallet_instance: Optional[SolanaHDWallet] = None


def get_hd_wallet() -> SolanaHDWallet:
    """Get the wallet for the configured seed phrase.

    Returns:
        SolanaHDWallet instance (cached)

    Raises:
        WalletNotConfiguredError: If WALLET_SEED_PHRASE is not set
        InvalidMnemonicError: If the configured phrase is invalid
    """
    from slipkey.config import get_settings

    global _wallet_instance

    if _wallet_instance is not None:
        return _wallet_instance

    settings = get_settings()
    if not settings.wallet_seed_phrase:
        raise WalletNotConfiguredError("WALLET_SEED_PHRASE is not set")

    _wallet_instance = SolanaHDWallet.from_mnemonic(
        settings.wallet_seed_phrase,
        passphrase=settings.wallet_passphrase,
        path_template=settings.derivation_path_template,
        strict=settings.strict_hardened_paths,
    )
    logger.info(f"Initialized {_wallet_instance!r}")
    return _wallet_instance


def reset_hd_wallet() -> None:
    """Reset the wallet instance (for testing)."""
    global _wallet_instance
    _wallet_instance = None
