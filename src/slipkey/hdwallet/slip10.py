"""SLIP-0010 key derivation for Ed25519.

Reference: https://github.com/satoshilabs/slips/blob/master/slip-0010.md

    master:  I = HMAC-SHA512(key=b"ed25519 seed", data=seed)
    child:   I = HMAC-SHA512(key=c_par, data=0x00 || k_par || ser32(i))
    split:   k = I[:32], c = I[32:]

Only hardened derivation is defined for Ed25519, so there is a single
child derivation branch.
"""

import hashlib
import hmac
import logging
import struct
from functools import reduce

from slipkey.hdwallet.base import MAX_INDEX, ExtendedKey
from slipkey.hdwallet.path import parse_path

logger = logging.getLogger(__name__)

ED25519_SEED_KEY = b"ed25519 seed"


def master_key(seed: bytes) -> ExtendedKey:
    """Derive the root key and chain code from a seed.

    Any seed length is accepted; entropy is the caller's concern.
    """
    digest = hmac.new(ED25519_SEED_KEY, bytes(seed), hashlib.sha512).digest()
    return ExtendedKey.from_digest(digest)


def derive_child(parent: ExtendedKey, index: int) -> ExtendedKey:
    """Derive the child at ``index`` using the zero-padded private-key branch."""
    if not 0 <= index <= MAX_INDEX:
        raise ValueError(f"Child index must fit in 32 bits, got {index:#x}")

    data = b"\x00" + parent.key + struct.pack(">I", index)
    digest = hmac.new(parent.chain_code, data, hashlib.sha512).digest()
    return ExtendedKey.from_digest(digest)


def derive(seed: bytes, path: str, strict: bool = False) -> ExtendedKey:
    """Derive the extended key for ``path`` from ``seed``.

    The path is parsed before any hashing, so malformed paths fail
    without partial work.

    Args:
        seed: Seed bytes (64 bytes for a BIP-39 seed)
        path: Derivation path, e.g. "m/44'/501'/0'/0'"
        strict: Reject path segments without an explicit hardening suffix

    Returns:
        ExtendedKey whose ``key`` seeds an Ed25519 signing keypair

    Raises:
        InvalidPathFormatError: If the path does not start with "m"
        InvalidPathSegmentError: If a segment is not a valid index
    """
    indexes = parse_path(path, strict=strict)
    result = reduce(derive_child, indexes, master_key(seed))
    logger.debug(f"Derived Ed25519 key at depth {len(indexes)}")
    return result
