from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from sensorlink.parsing.tlv import Measurement, named_measurements


@dataclass
class PayloadSnapshot:
    raw: bytes
    raw_b64: str
    received_at: datetime
    measurements: list[Measurement] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    source: str = "local"
    device_id: Optional[str] = None

    def values(self) -> dict[str, float]:
        return named_measurements(self.measurements)

    def as_dict(self) -> dict[str, Any]:
        return {
            "device_id": self.device_id,
            "source": self.source,
            "received_at": self.received_at.timestamp(),
            "raw": self.raw.hex(),
            "raw_b64": self.raw_b64,
            "measurements": [m.as_dict() for m in self.measurements],
            "errors": list(self.errors),
        }
