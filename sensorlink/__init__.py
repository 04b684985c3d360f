from sensorlink.decoder import Decoder, decode
from sensorlink.parsing.errors import (
    EmptyPayloadError,
    PayloadDecodeError,
    TransportDecodeError,
    TruncatedPayloadError,
    UnknownTagError,
)
from sensorlink.parsing.tlv import Measurement
from sensorlink.local_server_app import create_app, ServerSettings
from sensorlink.local_server import LocalServer
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "Decoder",
    "decode",
    "Measurement",
    "PayloadDecodeError",
    "TransportDecodeError",
    "EmptyPayloadError",
    "TruncatedPayloadError",
    "UnknownTagError",
    "LocalServer",
    "create_app",
    "ServerSettings",
]

try:
    __version__ = version("sensorlink")
except PackageNotFoundError:
    __version__ = "0.0.0"
