from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


# 9999-12-31T23:59:59Z, the last second datetime can represent.
MAX_TIMESTAMP = 253402300799


class DecodeRequest(BaseModel):
    payload_b64: str
    device_id: Optional[str] = None
    received_at: Optional[float] = Field(None, ge=0, le=MAX_TIMESTAMP, allow_inf_nan=False)
    source: Optional[str] = None


class MeasurementModel(BaseModel):
    name: str
    value: float


class DecodeResponse(BaseModel):
    device_id: Optional[str] = None
    source: str
    received_at: float
    measurements: List[MeasurementModel] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)


class LogsResponse(BaseModel):
    events: List[Dict[str, Any]] = Field(default_factory=list)
