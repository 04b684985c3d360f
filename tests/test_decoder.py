"""Tests for the base64 entry point (transport + TLV) and its logging."""
import base64
import logging
from unittest.mock import MagicMock

import pytest

from sensorlink import (
    Decoder,
    decode,
    EmptyPayloadError,
    Measurement,
    PayloadDecodeError,
    TransportDecodeError,
    TruncatedPayloadError,
    UnknownTagError,
)
from sensorlink.parsing.transport import decode_text


@pytest.mark.parametrize(
    "b64, expected",
    [
        ("AQDX", [Measurement("temperature", 21.5)]),
        ("AjI=", [Measurement("humidity", 50.0)]),
        ("BAoA", [Measurement("light", 2560.0)]),
    ],
)
def test_decode_single_measurements(b64, expected):
    assert decode(b64) == expected


def test_decode_multiple_measurements():
    assert decode("AQDXAjI=") == [
        Measurement("temperature", 21.5),
        Measurement("humidity", 50.0),
    ]


def test_decode_acceleration():
    b64 = base64.b64encode(bytes([0x03, 0x3F, 0xC1, 0xBF])).decode()
    result = decode(b64)
    assert [(m.name, m.value) for m in result] == [
        ("acc_x", 1.0),
        ("acc_y", -1.0),
        ("acc_z", -65 / 63),
    ]


def test_decode_concatenated_payloads():
    first = bytes([0x06, 0x01, 0x90])
    second = bytes([0x14, 0x00, 0x0F, 0x75, 0x6C])
    combined = base64.b64encode(first + second).decode()
    assert decode(combined) == (
        decode(base64.b64encode(first).decode()) + decode(base64.b64encode(second).decode())
    )


def test_decode_unknown_tag():
    with pytest.raises(UnknownTagError) as exc_info:
        decode("/w==")
    assert exc_info.value.tag == 0xFF
    assert exc_info.value.index == 0
    assert exc_info.value.details() == {"tag": "0xFF", "index": 0}


def test_decode_truncated():
    with pytest.raises(TruncatedPayloadError):
        decode("AQA=")


def test_decode_empty_string():
    with pytest.raises(EmptyPayloadError):
        decode("")


@pytest.mark.parametrize("bad", ["not-base64!!!", "AQD", "AQ=X"])
def test_decode_invalid_base64(bad):
    with pytest.raises(TransportDecodeError) as exc_info:
        decode(bad)
    assert str(exc_info.value).startswith("base64 decode error: ")
    assert exc_info.value.__cause__ is not None
    assert "cause" in exc_info.value.details()


def test_decode_text_rejects_non_ascii():
    with pytest.raises(TransportDecodeError):
        decode_text("AQDé")


def test_error_taxonomy_is_flat():
    for cls in (TransportDecodeError, EmptyPayloadError, TruncatedPayloadError, UnknownTagError):
        assert issubclass(cls, PayloadDecodeError)
        assert issubclass(cls, ValueError)
    kinds = {cls.kind for cls in (TransportDecodeError, EmptyPayloadError, TruncatedPayloadError, UnknownTagError)}
    assert len(kinds) == 4


def test_decoder_logs_success():
    logger = MagicMock(spec=logging.Logger)
    Decoder(logger=logger).decode("AQDXAjI=")
    logger.info.assert_called_once_with("decode_ok", extra={"details": {"count": 2}})
    logger.warning.assert_not_called()


def test_decoder_logs_failure_and_reraises():
    logger = MagicMock(spec=logging.Logger)
    with pytest.raises(UnknownTagError):
        Decoder(logger=logger).decode("/w==")
    logger.warning.assert_called_once()
    event, = logger.warning.call_args.args
    details = logger.warning.call_args.kwargs["extra"]["details"]
    assert event == "decode_failed"
    assert details["error"] == "unknown_tag"
    assert details["tag"] == "0xFF"
    assert details["index"] == 0


def test_decoder_is_reusable():
    decoder = Decoder()
    assert decoder.decode("AjI=") == decoder.decode("AjI=")


def test_decode_accepts_trailing_newline():
    assert decode("AQDX\n") == [Measurement("temperature", 21.5)]
    assert decode("AQDX\r\nAjI=\r\n") == decode("AQDXAjI=")


def test_decoder_logs_transport_failure():
    logger = MagicMock(spec=logging.Logger)
    with pytest.raises(TransportDecodeError):
        Decoder(logger=logger).decode("AQD")
    details = logger.warning.call_args.kwargs["extra"]["details"]
    assert details["error"] == "transport_decode_error"
    logger.info.assert_not_called()
