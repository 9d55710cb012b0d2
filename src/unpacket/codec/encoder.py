"""Record-to-buffer encoder.

This module provides pack(), which lays a record's tagged fields out in a
flat, zero-filled byte buffer.
"""

from __future__ import annotations

import logging
from typing import Union

from pydantic import BaseModel

from ..exceptions import NotAStructError, UnpacketError
from .scalar import encode_scalar
from .schema import ByteOrder, layout_of

logger = logging.getLogger(__name__)


def pack(byte_order: Union[ByteOrder, str], record: BaseModel) -> bytes:
    """Encode a record into a flat byte buffer.

    The buffer is exactly as long as the furthest-reaching tagged field
    (``max(offset + length)``) and starts zero-filled. Fields are written in
    declaration order, so where spans overlap the later field's bytes win.
    That lets a wide value be written first and part of it overwritten by a
    narrower field declared after it. Bytes no field touches stay zero.

    Integer and bool fields write only their own width at the start of their
    span; the rest of a wider span keeps whatever is already there.

    Args:
        byte_order: "big" or "little" (or a ByteOrder member)
        record: Populated Pydantic model instance

    Returns:
        Encoded bytes

    Raises:
        NotAStructError: If record is not a Pydantic model instance
        ByteOrderError: If byte_order is neither "big" nor "little"
        InsufficientDataError: If a field's span is narrower than its type
        EncodeError: If a field value has the wrong type or does not fit

    Example:
        >>> class Quote(Record):
        ...     locate: UInt16 = Placement("offset=0,length=2", default=0)
        ...     halted: bool = Placement("offset=3,length=1", default=False)
        >>> pack("big", Quote(locate=258, halted=True))
        b'\\x01\\x02\\x00\\x01'
    """
    if not isinstance(record, BaseModel):
        raise NotAStructError(record)

    order = ByteOrder.coerce(byte_order)
    layout = layout_of(type(record))
    logger.debug(
        "Packing %s into %d bytes (%s-endian)", layout.record_name, layout.size, order.value
    )

    result = bytearray(layout.size)

    for field in layout.fields:
        try:
            chunk = encode_scalar(
                field.logical_type,
                getattr(record, field.name),
                field.length,
                order,
                encoding=layout.text_encoding,
            )
        except UnpacketError as err:
            err.field = field.name
            raise

        result[field.offset : field.offset + len(chunk)] = chunk

    return bytes(result)
