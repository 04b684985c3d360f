from __future__ import annotations

import base64


def u16(hi: int, lo: int) -> int:
    return (hi << 8) | lo


def i16(hi: int, lo: int) -> int:
    value = u16(hi, lo)
    return value - 0x10000 if value & 0x8000 else value


def u32(b3: int, b2: int, b1: int, b0: int) -> int:
    return (b3 << 24) | (b2 << 16) | (b1 << 8) | b0


def i32(b3: int, b2: int, b1: int, b0: int) -> int:
    value = u32(b3, b2, b1, b0)
    return value - 0x100000000 if value & 0x80000000 else value


def i8(byte_value: int) -> int:
    return byte_value - 0x100 if byte_value & 0x80 else byte_value


def have(index: int, needed: int, buf: bytes) -> bool:
    """Return True when ``needed`` bytes follow the tag byte at ``index``."""
    return index + needed < len(buf)


def b64_to_bytes(b64_data: str) -> bytes:
    """
    Strictly decode standard base64 (``+/`` alphabet, ``=`` padding).

    Carriage returns and newlines are skipped; any other whitespace is an
    error.

    Raises:
        ValueError: On characters outside the alphabet, bad padding or
            an impossible length (``binascii.Error`` is a ``ValueError``).
    """
    cleaned = b64_data.replace("\r", "").replace("\n", "")
    return base64.b64decode(cleaned, validate=True)
