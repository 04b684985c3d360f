from __future__ import annotations

from sensorlink.core.binary import b64_to_bytes
from sensorlink.parsing.errors import TransportDecodeError


def decode_text(raw_b64: str) -> bytes:
    try:
        return b64_to_bytes(raw_b64)
    except (ValueError, TypeError) as exc:
        raise TransportDecodeError(exc) from exc
