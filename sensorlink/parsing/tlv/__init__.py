"""
TLV (Tag-Length-Value) decoder for environmental sensor payloads.

This sub-package turns the raw bytes of a sensor uplink into named
measurements. Fields are identified by a single type byte which implies the
width of the value that follows.
"""
from sensorlink.parsing.tlv.decode import (
    decode_tlv,
    named_measurements,
    FieldDescriptor,
    FIELDS,
    FIELD_NAMES,
    FIELD_WIDTHS,
    KNOWN_TAGS,
)
from sensorlink.parsing.tlv.model import Measurement

__all__ = [
    "decode_tlv",
    "named_measurements",
    "FieldDescriptor",
    "FIELDS",
    "FIELD_NAMES",
    "FIELD_WIDTHS",
    "KNOWN_TAGS",
    "Measurement",
]
