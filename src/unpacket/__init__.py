"""unpacket: Declarative Fixed-Layout Binary Records

A Python library for decoding flat byte buffers into Pydantic records and
encoding them back, driven by per-field placement tags. Designed for
fixed-layout wire formats such as NASDAQ ITCH market-data messages, where
every field occupies a known span of bytes.

Key Features:
- Pydantic-based record modelling
- ``offset=<int>,length=<int>`` placement tags, validated at class definition
- Big- and little-endian integers, booleans, fixed-width text, and
  6-8 byte nanosecond timestamps
- Overlapping spans, with later fields overwriting earlier ones on pack

Quick Start:
    >>> from unpacket import Duration, Placement, Record, UInt8, UInt16, pack, unpack
    >>>
    >>> class SystemEvent(Record):
    ...     stock_locate: UInt16 = Placement("offset=1,length=2", default=0)
    ...     tracking_number: UInt16 = Placement("offset=3,length=2", default=0)
    ...     timestamp: Duration = Placement("offset=5,length=6", default=0)
    ...     event_code: UInt8 = Placement("offset=11,length=1", default=0)
    >>>
    >>> event = SystemEvent(timestamp=3_600_000_000_000, event_code=ord("O"))
    >>> data = pack("big", event)
    >>> decoded = unpack(data, "big", SystemEvent())
"""

from __future__ import annotations

import logging

from .codec import (
    ByteOrder,
    FieldLayout,
    LogicalType,
    RecordLayout,
    decode,
    decode_scalar,
    encode_scalar,
    layout_of,
    pack,
    parse_tag,
    unpack,
)
from .exceptions import (
    ByteOrderError,
    DecodeError,
    EncodeError,
    InsufficientDataError,
    MetadataMissingError,
    MetadataParseError,
    NotAStructError,
    OutOfBoundsError,
    SchemaError,
    UnpacketError,
    UnsupportedTypeError,
)
from .models import (
    Duration,
    Int8,
    Int16,
    Int32,
    Int64,
    Placement,
    Record,
    Text,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
)
from .utils import configure_logging, field_spans, packed_size

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Core API
    "Record",
    "pack",
    "unpack",
    "decode",
    "ByteOrder",
    # Field helpers
    "Placement",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "Text",
    "Duration",
    # Layout
    "LogicalType",
    "FieldLayout",
    "RecordLayout",
    "layout_of",
    "parse_tag",
    "decode_scalar",
    "encode_scalar",
    # Exceptions
    "UnpacketError",
    "ByteOrderError",
    "SchemaError",
    "MetadataMissingError",
    "MetadataParseError",
    "UnsupportedTypeError",
    "NotAStructError",
    "EncodeError",
    "DecodeError",
    "OutOfBoundsError",
    "InsufficientDataError",
    # Sizing
    "packed_size",
    "field_spans",
    # Logging
    "configure_logging",
    # Version
    "__version__",
]
