"""
Error taxonomy for payload decoding.

Every error is fatal to the decode call that raised it; no partial list of
measurements is ever returned alongside one. Each error can describe itself
as a ``details`` dict for structured logging and HTTP error bodies.
"""
from __future__ import annotations

from typing import Any


class PayloadDecodeError(ValueError):
    """Base class for all payload decoding failures."""

    kind = "payload_decode_error"

    def details(self) -> dict[str, Any]:
        return {}


class TransportDecodeError(PayloadDecodeError):
    """The base64 transport text was malformed."""

    kind = "transport_decode_error"

    def __init__(self, cause: Exception):
        super().__init__(f"base64 decode error: {cause}")
        self.cause = cause

    def details(self) -> dict[str, Any]:
        return {"cause": str(self.cause)}


class EmptyPayloadError(PayloadDecodeError):
    kind = "empty_payload"

    def __init__(self):
        super().__init__("empty payload")


class TruncatedPayloadError(PayloadDecodeError):
    """A known tag declared more payload bytes than the buffer holds."""

    kind = "truncated_payload"

    def __init__(self, tag: int, index: int, width: int, available: int):
        super().__init__(f"payload truncated while decoding field 0x{tag:02X} at index {index}")
        self.tag = tag
        self.index = index
        self.width = width
        self.available = available

    def details(self) -> dict[str, Any]:
        return {
            "tag": f"0x{self.tag:02X}",
            "index": self.index,
            "width": self.width,
            "available": self.available,
        }


class UnknownTagError(PayloadDecodeError):
    """A byte in tag position is not one of the recognised sensor types."""

    kind = "unknown_tag"

    def __init__(self, tag: int, index: int):
        super().__init__(f"unknown sensor type: 0x{tag:02X} at index {index}")
        self.tag = tag
        self.index = index

    def details(self) -> dict[str, Any]:
        return {"tag": f"0x{self.tag:02X}", "index": self.index}
