"""Per-type conversion between byte spans and Python values.

Each LogicalType has exactly one decode rule and one encode rule:

- Integers: fixed 1/2/4/8-byte two's-complement or unsigned values read from /
  written to the *start* of the span, using the call's byte order.
- Bool: one byte, nonzero is True; encoded as 0x01 / 0x00.
- Text: the whole span, decoded with the record's text encoding and stripped of
  whitespace and NUL padding; encoded truncated or NUL-padded to the span.
- Duration: a 6-8 byte unsigned nanosecond count occupying the whole span.
  Big-endian spans hold the low-order bytes of the 8-byte value at the right
  (as in ITCH timestamps); little-endian spans hold them at the left.
"""

from __future__ import annotations

import enum
import string
import struct
from typing import Any, Union

from ..exceptions import (
    DecodeError,
    EncodeError,
    InsufficientDataError,
    SchemaError,
    UnsupportedTypeError,
)
from .schema import DEFAULT_TEXT_ENCODING, ByteOrder, LogicalType

DURATION_MIN_BYTES = 6
DURATION_MAX_BYTES = 8

_INTEGER_FORMATS: dict[LogicalType, str] = {
    LogicalType.UINT8: "B",
    LogicalType.UINT16: "H",
    LogicalType.UINT32: "I",
    LogicalType.UINT64: "Q",
    LogicalType.INT8: "b",
    LogicalType.INT16: "h",
    LogicalType.INT32: "i",
    LogicalType.INT64: "q",
}

_TEXT_PADDING = string.whitespace + "\x00"

BytesLike = Union[bytes, bytearray, memoryview]


def required_width(logical_type: LogicalType) -> int:
    """Minimum span width in bytes for a logical type.

    Raises:
        UnsupportedTypeError: If logical_type has no codec
    """
    fmt = _INTEGER_FORMATS.get(logical_type)
    if fmt is not None:
        return struct.calcsize(fmt)
    if logical_type is LogicalType.BOOL:
        return 1
    if logical_type is LogicalType.TEXT:
        return 0
    if logical_type is LogicalType.DURATION:
        return DURATION_MIN_BYTES
    raise UnsupportedTypeError(logical_type)


def decode_scalar(
    logical_type: LogicalType,
    data: BytesLike,
    byte_order: Union[ByteOrder, str],
    *,
    encoding: str = DEFAULT_TEXT_ENCODING,
) -> Any:
    """Convert a field's byte span to a Python value.

    Args:
        logical_type: Wire representation of the field
        data: The field's span
        byte_order: Byte order for multi-byte values
        encoding: Text encoding for TEXT fields

    Returns:
        Decoded value (int, bool or str)

    Raises:
        InsufficientDataError: If the span is narrower than the type requires
        SchemaError: If a duration span is wider than 8 bytes
        DecodeError: If text cannot be decoded
        UnsupportedTypeError: If logical_type has no codec
        ByteOrderError: If byte_order is neither "big" nor "little"

    Example:
        >>> decode_scalar(LogicalType.UINT16, b"\\x01\\x02", "big")
        258
    """
    order = ByteOrder.coerce(byte_order)
    data = bytes(data)
    check_width(logical_type, len(data))

    fmt = _INTEGER_FORMATS.get(logical_type)
    if fmt is not None:
        return struct.unpack_from(order.struct_prefix + fmt, data)[0]

    if logical_type is LogicalType.BOOL:
        return data[0] != 0

    if logical_type is LogicalType.TEXT:
        try:
            return data.decode(encoding).strip(_TEXT_PADDING)
        except UnicodeDecodeError as err:
            raise DecodeError(f"invalid {encoding} text: {err}") from err

    # Duration
    return int.from_bytes(data, order.value, signed=False)


def encode_scalar(
    logical_type: LogicalType,
    value: Any,
    length: int,
    byte_order: Union[ByteOrder, str],
    *,
    encoding: str = DEFAULT_TEXT_ENCODING,
) -> bytes:
    """Convert a Python value to the bytes written into a field's span.

    Integer and bool encoders return exactly the type's width, which may be
    shorter than ``length``; text and duration encoders return ``length`` bytes.

    Args:
        logical_type: Wire representation of the field
        value: Field value
        length: Declared span length
        byte_order: Byte order for multi-byte values
        encoding: Text encoding for TEXT fields

    Returns:
        Encoded bytes

    Raises:
        InsufficientDataError: If the span is narrower than the type requires
        SchemaError: If a duration span is wider than 8 bytes
        EncodeError: If the value has the wrong type or does not fit
        UnsupportedTypeError: If logical_type has no codec
        ByteOrderError: If byte_order is neither "big" nor "little"

    Example:
        >>> encode_scalar(LogicalType.TEXT, "AB", 5, "big")
        b'AB\\x00\\x00\\x00'
    """
    order = ByteOrder.coerce(byte_order)
    check_width(logical_type, length)

    fmt = _INTEGER_FORMATS.get(logical_type)
    if fmt is not None:
        if isinstance(value, enum.Enum):
            value = value.value
        if not isinstance(value, int):
            raise EncodeError(f"expected int, got {type(value).__name__}")
        try:
            return struct.pack(order.struct_prefix + fmt, value)
        except struct.error as err:
            raise EncodeError(f"value {value} out of range for {logical_type.value}") from err

    if logical_type is LogicalType.BOOL:
        if not isinstance(value, bool):
            raise EncodeError(f"expected bool, got {type(value).__name__}")
        return b"\x01" if value else b"\x00"

    if logical_type is LogicalType.TEXT:
        if not isinstance(value, str):
            raise EncodeError(f"expected str, got {type(value).__name__}")
        try:
            raw = value.encode(encoding)
        except UnicodeEncodeError as err:
            raise EncodeError(f"text not representable in {encoding}: {err}") from err
        return raw[:length].ljust(length, b"\x00")

    # Duration
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodeError(f"expected int nanoseconds, got {type(value).__name__}")
    if not 0 <= value < 1 << (8 * length):
        raise EncodeError(f"duration {value}ns does not fit in {length} bytes")
    return value.to_bytes(length, order.value)


def check_width(logical_type: LogicalType, actual: int) -> None:
    """Check that a span of ``actual`` bytes can hold a logical type.

    Raises:
        InsufficientDataError: If the span is narrower than the type requires
        SchemaError: If a duration span is wider than 8 bytes
    """
    required = required_width(logical_type)
    if actual < required:
        raise InsufficientDataError(logical_type.value, required, actual)
    if logical_type is LogicalType.DURATION and actual > DURATION_MAX_BYTES:
        raise SchemaError(f"duration span of {actual} bytes exceeds {DURATION_MAX_BYTES}")
