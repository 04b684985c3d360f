from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Measurement:
    """
    A single decoded sensor reading.

    Attributes:
        name: Field name, e.g. ``"temperature"`` or ``"acc_x"``.
        value: The reading scaled to its natural unit.
    """
    name: str
    value: float

    def as_dict(self) -> dict:
        return {"name": self.name, "value": self.value}
