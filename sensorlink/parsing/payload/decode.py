from __future__ import annotations

import datetime as dt
from typing import Any

from sensorlink.decoder import Decoder
from sensorlink.parsing.payload.model import PayloadSnapshot


def _received_at(payload: dict[str, Any]) -> dt.datetime:
    ts = payload.get("received_at")
    if ts is not None:
        try:
            return dt.datetime.fromtimestamp(ts, dt.UTC)
        except (OverflowError, OSError, ValueError, TypeError):
            pass
    return dt.datetime.now(dt.UTC)


def build_payload_snapshot(
    payload: dict[str, Any],
    source: str = "local",
    device_id: str | None = None,
    decoder: Decoder | None = None,
) -> PayloadSnapshot:
    """
    Decode an uplink dict into a ``PayloadSnapshot``.

    The base64 text is taken from ``payload_b64``, falling back to ``data``
    (the field most LoRaWAN network servers use). Decoding errors propagate;
    only a missing payload is recorded on the snapshot. An unusable
    ``received_at`` is replaced by the current time.
    """
    raw_b64 = payload.get("payload_b64")
    if raw_b64 is None:
        raw_b64 = payload.get("data")
    if raw_b64 is None:
        return PayloadSnapshot(
            raw=b"",
            raw_b64="",
            received_at=_received_at(payload),
            errors=["no payload_b64 in payload"],
            source=source,
            device_id=device_id,
        )

    decoder = decoder or Decoder()
    raw = decoder.to_bytes(raw_b64)
    return PayloadSnapshot(
        raw=raw,
        raw_b64=raw_b64,
        received_at=_received_at(payload),
        measurements=decoder.decode_raw(raw),
        source=source,
        device_id=device_id,
    )
