"""
TLV decoder for Elsys-style environmental sensor uplinks.

Each field is a type byte followed by a fixed number of payload bytes. The
type byte alone selects both the payload width and how it is interpreted;
there is no explicit length. Multi-byte values are big-endian.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from sensorlink.core.binary import have, i8, i16, i32, u16, u32
from sensorlink.parsing.errors import EmptyPayloadError, TruncatedPayloadError, UnknownTagError
from sensorlink.parsing.tlv.model import Measurement

TYPE_TEMP = 0x01
TYPE_RH = 0x02
TYPE_ACC = 0x03
TYPE_LIGHT = 0x04
TYPE_MOTION = 0x05
TYPE_CO2 = 0x06
TYPE_VDD = 0x07
TYPE_PRESSURE = 0x14
TYPE_EXT_ANALOG_UV = 0x1B
TYPE_TVOC = 0x1C


@dataclass(frozen=True)
class FieldDescriptor:
    tag: int
    width: int
    names: tuple[str, ...]
    transform: Callable[[bytes], tuple[float, ...]]


def _temperature(p: bytes) -> tuple[float, ...]:
    # 0.1 °C steps
    return (i16(p[0], p[1]) / 10,)


def _raw_byte(p: bytes) -> tuple[float, ...]:
    return (float(p[0]),)


def _acceleration(p: bytes) -> tuple[float, ...]:
    # 63 LSB = 1 g
    return tuple(i8(b) / 63 for b in p[:3])


def _unsigned16(p: bytes) -> tuple[float, ...]:
    return (float(u16(p[0], p[1])),)


def _analog_uv(p: bytes) -> tuple[float, ...]:
    return (float(i32(p[0], p[1], p[2], p[3])),)


def _pressure(p: bytes) -> tuple[float, ...]:
    # hPa * 1000 on the wire
    return (u32(p[0], p[1], p[2], p[3]) / 1000,)


FIELDS: dict[int, FieldDescriptor] = {
    d.tag: d
    for d in (
        FieldDescriptor(TYPE_TEMP, 2, ("temperature",), _temperature),
        FieldDescriptor(TYPE_RH, 1, ("humidity",), _raw_byte),
        FieldDescriptor(TYPE_ACC, 3, ("acc_x", "acc_y", "acc_z"), _acceleration),
        FieldDescriptor(TYPE_LIGHT, 2, ("light",), _unsigned16),
        FieldDescriptor(TYPE_MOTION, 1, ("motion",), _raw_byte),
        FieldDescriptor(TYPE_CO2, 2, ("co2",), _unsigned16),
        FieldDescriptor(TYPE_VDD, 2, ("vdd",), _unsigned16),
        FieldDescriptor(TYPE_EXT_ANALOG_UV, 4, ("analog_uv",), _analog_uv),
        FieldDescriptor(TYPE_TVOC, 2, ("tvoc",), _unsigned16),
        FieldDescriptor(TYPE_PRESSURE, 4, ("pressure",), _pressure),
    )
}

# Human-readable names for each known type byte.
FIELD_NAMES: dict[int, tuple[str, ...]] = {tag: d.names for tag, d in FIELDS.items()}

# Payload width (bytes after the type byte) for each known type byte.
FIELD_WIDTHS: dict[int, int] = {tag: d.width for tag, d in FIELDS.items()}

KNOWN_TAGS: frozenset[int] = frozenset(FIELDS)


def decode_tlv(data: bytes) -> list[Measurement]:
    """
    Decode a raw sensor payload into measurements, in wire order.

    Args:
        data: Raw bytes containing concatenated TLV fields.

    Returns:
        The decoded measurements. The accelerometer field yields three.

    Raises:
        EmptyPayloadError: ``data`` is empty.
        UnknownTagError: A type byte is not in ``FIELDS``.
        TruncatedPayloadError: A field's payload runs past the buffer.
    """
    if len(data) == 0:
        raise EmptyPayloadError()

    measurements: list[Measurement] = []
    i = 0
    while i < len(data):
        tag = data[i]
        descriptor = FIELDS.get(tag)
        if descriptor is None:
            raise UnknownTagError(tag, i)
        if not have(i, descriptor.width, data):
            raise TruncatedPayloadError(tag, i, descriptor.width, len(data) - i - 1)

        payload = bytes(data[i + 1: i + 1 + descriptor.width])
        values = descriptor.transform(payload)
        measurements.extend(Measurement(name, value) for name, value in zip(descriptor.names, values))
        i += 1 + descriptor.width
    return measurements


def named_measurements(measurements: list[Measurement]) -> dict[str, float]:
    """
    Collapse measurements into a name -> value mapping.

    When a field appears more than once in a payload the last reading wins.
    """
    return {m.name: m.value for m in measurements}
