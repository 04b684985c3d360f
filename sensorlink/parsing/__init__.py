"""
This package contains all modules related to parsing and decoding data
received from sensor nodes.

Sub-packages handle specific layers:

- ``transport``: base64 transport text to raw bytes.
- ``tlv``: TLV field table and decoder producing measurements.
- ``payload``: Uplink snapshots wrapping a decoded payload.
- ``errors``: The decoding error taxonomy.
"""
