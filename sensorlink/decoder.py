from __future__ import annotations

import logging
from typing import Optional

from sensorlink.parsing.errors import PayloadDecodeError
from sensorlink.parsing.tlv import Measurement, decode_tlv
from sensorlink.parsing.transport import decode_text


class Decoder:
    """
    Converts a base64 sensor payload into a list of measurements.

    The decoder holds no state between calls; a single instance can be
    shared freely. If a logger is supplied, each call emits ``decode_ok``
    or ``decode_failed`` with structured ``details``.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger

    def decode(self, raw_b64: str) -> list[Measurement]:
        return self.decode_raw(self.to_bytes(raw_b64))

    def to_bytes(self, raw_b64: str) -> bytes:
        try:
            return decode_text(raw_b64)
        except PayloadDecodeError as exc:
            self._log_failure(exc)
            raise

    def decode_raw(self, raw: bytes) -> list[Measurement]:
        try:
            measurements = decode_tlv(raw)
        except PayloadDecodeError as exc:
            self._log_failure(exc)
            raise
        if self.logger:
            self.logger.info("decode_ok", extra={"details": {"count": len(measurements)}})
        return measurements

    def _log_failure(self, exc: PayloadDecodeError) -> None:
        if self.logger:
            self.logger.warning(
                "decode_failed",
                extra={"details": {"error": exc.kind, "message": str(exc), **exc.details()}},
            )


def decode(raw_b64: str) -> list[Measurement]:
    """Decode a base64 payload with a throwaway ``Decoder``."""
    return Decoder().decode(raw_b64)
