"""Buffer-to-record decoder.

This module provides unpack(), which fills an existing record from a byte
buffer, and decode(), which builds a new record instance from one.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar, Union

from pydantic import BaseModel, ValidationError

from ..exceptions import DecodeError, NotAStructError, OutOfBoundsError, UnpacketError
from .scalar import BytesLike, decode_scalar
from .schema import ByteOrder, FieldLayout, RecordLayout, layout_of

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def unpack(buffer: BytesLike, byte_order: Union[ByteOrder, str], record: T) -> T:
    """Decode a byte buffer into an existing record, in place.

    Tagged fields are decoded in declaration order and assigned to the record
    (through Pydantic validation when the model validates assignment). Fields
    without a placement tag are left untouched.

    Decoding is not atomic: the first failing field aborts the walk, and fields
    decoded before it keep their new values.

    Args:
        buffer: Raw message bytes
        byte_order: "big" or "little" (or a ByteOrder member)
        record: Pydantic model instance to populate

    Returns:
        The same record, for chaining

    Raises:
        NotAStructError: If record is not a Pydantic model instance
        ByteOrderError: If byte_order is neither "big" nor "little"
        OutOfBoundsError: If a field's span extends past the end of buffer
        InsufficientDataError: If a field's span is narrower than its type
        DecodeError: If a decoded value is rejected by the model

    Example:
        >>> event = SystemEvent()
        >>> unpack(data, "big", event)
        >>> event.event_code
        <EventCode.START_OF_MESSAGES: 79>
    """
    if not isinstance(record, BaseModel):
        raise NotAStructError(record)

    order = ByteOrder.coerce(byte_order)
    layout = layout_of(type(record))
    logger.debug(
        "Unpacking %d bytes into %s (%s-endian)", len(buffer), layout.record_name, order.value
    )

    for field in layout.fields:
        value = _decode_field(buffer, order, layout, field)
        try:
            setattr(record, field.name, value)
        except ValidationError as err:
            raise DecodeError(
                f"decoded value {value!r} rejected: {err.errors()[0]['msg']}",
                field=field.name,
            ) from err

    return record


def decode(record_class: type[T], buffer: BytesLike, byte_order: Union[ByteOrder, str]) -> T:
    """Decode a byte buffer into a new record instance.

    Untagged fields take their defaults; a model with required untagged
    fields cannot be built this way.

    Args:
        record_class: Pydantic model class to decode to
        buffer: Raw message bytes
        byte_order: "big" or "little" (or a ByteOrder member)

    Returns:
        Decoded record instance

    Raises:
        NotAStructError: If record_class is not a Pydantic model class
        ByteOrderError: If byte_order is neither "big" nor "little"
        OutOfBoundsError: If a field's span extends past the end of buffer
        InsufficientDataError: If a field's span is narrower than its type
        DecodeError: If the model rejects the decoded values
    """
    order = ByteOrder.coerce(byte_order)
    layout = layout_of(record_class)
    logger.debug(
        "Decoding %d bytes as %s (%s-endian)", len(buffer), layout.record_name, order.value
    )

    values: dict[str, Any] = {}
    for field in layout.fields:
        values[field.name] = _decode_field(buffer, order, layout, field)

    try:
        return record_class(**values)
    except ValidationError as e:
        raise DecodeError(f"Failed to construct {record_class.__name__}: {e}") from e


def _decode_field(
    buffer: BytesLike, order: ByteOrder, layout: RecordLayout, field: FieldLayout
) -> Any:
    """Bounds-check and decode a single field's span.

    Raises:
        OutOfBoundsError: If the span extends past the end of buffer
        UnpacketError: Any codec error, tagged with the field name
    """
    if field.end > len(buffer):
        raise OutOfBoundsError(field.offset, field.length, len(buffer), field=field.name)

    try:
        return decode_scalar(
            field.logical_type,
            buffer[field.offset : field.end],
            order,
            encoding=layout.text_encoding,
        )
    except UnpacketError as err:
        err.field = field.name
        raise
