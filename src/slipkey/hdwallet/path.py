"""Derivation path parsing.

Turns a path such as ``m/44'/501'/0'/0'`` into the sequence of hardened
child indexes to derive, root to leaf.
"""

import re
from typing import Iterable

from slipkey.hdwallet.base import (
    HARDENED_OFFSET,
    MAX_INDEX,
    InvalidPathFormatError,
    InvalidPathSegmentError,
)

ROOT_MARKER = "m"
HARDENED_SUFFIXES = ("'", "h")

_DIGITS = re.compile(r"[0-9]+")


def parse_path(path: str, strict: bool = False) -> tuple[int, ...]:
    """Parse a derivation path into hardened child indexes.

    Every index is OR-ed with 0x80000000. Segments written without a
    hardening suffix are upgraded silently unless ``strict`` is set.

    Args:
        path: Path string starting with "m", e.g. "m/44'/501'/0'/0'"
        strict: Reject segments that lack a "'" or "h" suffix, and numeric
            values that already carry the hardened bit

    Returns:
        Tuple of indexes; empty for the bare root "m"

    Raises:
        InvalidPathFormatError: If the path does not start with "m"
        InvalidPathSegmentError: If a segment is not a valid index
    """
    segments = path.split("/")
    if segments[0] != ROOT_MARKER:
        raise InvalidPathFormatError(path)

    return tuple(_parse_segment(segment, strict) for segment in segments[1:])


def _parse_segment(segment: str, strict: bool) -> int:
    number = segment
    if segment.endswith(HARDENED_SUFFIXES):
        number = segment[:-1]
    elif strict:
        raise InvalidPathSegmentError(segment, "missing hardened suffix")

    if not _DIGITS.fullmatch(number):
        raise InvalidPathSegmentError(segment)

    index = int(number)
    if index > MAX_INDEX:
        raise InvalidPathSegmentError(segment, f"index exceeds {MAX_INDEX}")
    if strict and index >= HARDENED_OFFSET:
        raise InvalidPathSegmentError(segment, f"index exceeds {HARDENED_OFFSET - 1}")

    return index | HARDENED_OFFSET


def format_path(indexes: Iterable[int]) -> str:
    """Render hardened indexes back into ``m/...'`` notation."""
    parts = [ROOT_MARKER]
    for index in indexes:
        if index & HARDENED_OFFSET:
            parts.append(f"{index - HARDENED_OFFSET}'")
        else:
            parts.append(str(index))
    return "/".join(parts)
