"""
A small FastAPI application that decodes sensor uplinks over HTTP.

Uplinks are posted as base64 text, decoded, and kept in a bounded per-device
history so the latest reading of each node can be read back.
"""
from __future__ import annotations

import hmac
from logging import WARNING
from typing import Optional

from fastapi import Depends, FastAPI, Header, HTTPException, Request
from fastapi.responses import JSONResponse

from sensorlink.decoder import Decoder
from sensorlink.local_server_app.config import ServerSettings, get_settings
from sensorlink.local_server_app.models import (
    DecodeRequest,
    DecodeResponse,
    ErrorResponse,
    LogsResponse,
    MeasurementModel,
)
from sensorlink.local_server_app.state import LocalServerState
from sensorlink.parsing.errors import PayloadDecodeError
from sensorlink.parsing.payload import PayloadSnapshot, build_payload_snapshot


def _to_response(snapshot: PayloadSnapshot) -> DecodeResponse:
    return DecodeResponse(
        device_id=snapshot.device_id,
        source=snapshot.source,
        received_at=snapshot.received_at.timestamp(),
        measurements=[MeasurementModel(name=m.name, value=m.value) for m in snapshot.measurements],
    )


def create_app(settings: Optional[ServerSettings] = None) -> FastAPI:
    settings = settings or get_settings()
    state = LocalServerState(settings)
    decoder = Decoder(logger=state.logger)

    app = FastAPI(title="sensorlink local decode server")
    app.state.server_state = state

    def require_token(x_api_token: Optional[str] = Header(None)) -> None:
        if settings.api_token and not hmac.compare_digest(
            (x_api_token or "").encode("utf-8"), settings.api_token.encode("utf-8")
        ):
            state.log("auth_rejected", {"x-api-token": x_api_token}, level=WARNING)
            raise HTTPException(status_code=401, detail="invalid api token")

    @app.exception_handler(PayloadDecodeError)
    async def _decode_error_handler(request: Request, exc: PayloadDecodeError):
        body = ErrorResponse(error=exc.kind, message=str(exc), details=exc.details())
        return JSONResponse(status_code=422, content=body.model_dump())

    @app.get("/health")
    async def health():
        from sensorlink import __version__

        return {"status": "ok", "version": __version__}

    @app.post("/decode", response_model=DecodeResponse, dependencies=[Depends(require_token)])
    async def decode_uplink(req: DecodeRequest):
        if len(req.payload_b64) > settings.max_payload_length:
            state.log(
                "payload_too_large",
                {"device_id": req.device_id, "length": len(req.payload_b64)},
                level=WARNING,
            )
            raise HTTPException(status_code=413, detail="payload too large")
        snapshot = build_payload_snapshot(
            req.model_dump(),
            source=req.source or settings.default_source,
            device_id=req.device_id,
            decoder=decoder,
        )
        state.record(snapshot)
        state.log("uplink_recorded", {"device_id": req.device_id, "count": len(snapshot.measurements)})
        return _to_response(snapshot)

    @app.get("/devices/{device_id}/latest", response_model=DecodeResponse, dependencies=[Depends(require_token)])
    async def latest(device_id: str):
        snapshot = state.latest(device_id)
        if snapshot is None:
            raise HTTPException(status_code=404, detail="no uplinks for device")
        return _to_response(snapshot)

    @app.get("/logs", response_model=LogsResponse, dependencies=[Depends(require_token)])
    async def logs():
        return LogsResponse(events=state.events())

    return app


__all__ = ["create_app", "ServerSettings", "get_settings", "LocalServerState"]
