from sensorlink.parsing.payload.decode import build_payload_snapshot
from sensorlink.parsing.payload.model import PayloadSnapshot

__all__ = ["build_payload_snapshot", "PayloadSnapshot"]
