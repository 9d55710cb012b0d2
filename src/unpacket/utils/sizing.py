"""Record size calculation utilities.

This module provides functions to inspect the wire layout of records
without actually packing them.
"""

from __future__ import annotations

from pydantic import BaseModel

from ..codec.schema import RecordLayout, layout_of


def _layout(record_or_class: BaseModel | type[BaseModel]) -> RecordLayout:
    if isinstance(record_or_class, BaseModel):
        return layout_of(type(record_or_class))
    return layout_of(record_or_class)


def packed_size(record_or_class: BaseModel | type[BaseModel]) -> int:
    """Calculate the size in bytes of the buffer pack() produces.

    This function can take either a record instance or a record class. The
    size is the highest ``offset + length`` across tagged fields and does not
    depend on field values.

    Args:
        record_or_class: Record instance or class

    Returns:
        Size in bytes (0 for a record without tagged fields)

    Raises:
        SchemaError: If the record's placement tags are invalid

    Example:
        >>> class SystemEvent(Record):
        ...     stock_locate: UInt16 = Placement("offset=1,length=2", default=0)
        ...     event_code: UInt8 = Placement("offset=11,length=1", default=0)
        >>> packed_size(SystemEvent)
        12
    """
    return _layout(record_or_class).size


def field_spans(record_or_class: BaseModel | type[BaseModel]) -> dict[str, tuple[int, int]]:
    """Get the ``(offset, length)`` span of each tagged field.

    Args:
        record_or_class: Record instance or class

    Returns:
        Dictionary mapping field names to their spans, in declaration order

    Example:
        >>> field_spans(SystemEvent)
        {'stock_locate': (1, 2), 'event_code': (11, 1)}
    """
    return {field.name: (field.offset, field.length) for field in _layout(record_or_class).fields}
