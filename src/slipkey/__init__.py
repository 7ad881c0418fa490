"""slipkey - SLIP-0010 hierarchical deterministic keys for Ed25519.

Usage:
    from slipkey import configure_logging, derive

    configure_logging()  # once at start-up; level from LOG_LEVEL
    node = derive(seed, "m/44'/501'/0'/0'")

The library only emits log records; applications that want them on the
console call ``configure_logging()`` from their entry point.
"""

from slipkey.config import configure_logging
from slipkey.hdwallet import (
    DerivationPathError,
    ExtendedKey,
    InvalidPathFormatError,
    InvalidPathSegmentError,
    derive,
)

__version__ = "0.1.0"

__all__ = [
    "DerivationPathError",
    "ExtendedKey",
    "InvalidPathFormatError",
    "InvalidPathSegmentError",
    "configure_logging",
    "derive",
]
