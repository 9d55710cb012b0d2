"""Field placement helpers.

This module provides Placement(), which attaches an ``offset=,length=`` tag to
a Pydantic field.
"""

from __future__ import annotations

from typing import Any, cast

from pydantic import Field
from pydantic.fields import FieldInfo

from ..codec.tags import TAG_KEY


def Placement(
    tag: str | None = None,
    *,
    offset: int | None = None,
    length: int | None = None,
    **kwargs: Any,
) -> FieldInfo:
    """Place a field at a fixed span of the wire buffer.

    This is a convenience wrapper around Pydantic's Field() that stores the
    placement tag in ``json_schema_extra["unpack"]``. Either pass the tag
    string, or pass ``offset`` and ``length`` and the tag is built for you.
    The tag is validated when the record class is defined.

    Args:
        tag: Placement tag, e.g. ``"offset=5,length=6"``
        offset: First byte of the span (alternative to tag)
        length: Number of bytes in the span (alternative to tag)
        **kwargs: Additional Field() arguments (default, description, etc.)

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.

    Example:
        >>> class SystemEvent(Record):
        ...     stock_locate: UInt16 = Placement("offset=1,length=2", default=0)
        ...     timestamp: Duration = Placement(offset=5, length=6, default=0)
    """
    if tag is None:
        if offset is None or length is None:
            raise TypeError("Placement() needs a tag or both offset= and length=")
        tag = f"offset={offset},length={length}"
    elif offset is not None or length is not None:
        raise TypeError("Placement() takes a tag or offset=/length=, not both")

    extra = dict(kwargs.pop("json_schema_extra", None) or {})
    extra[TAG_KEY] = tag

    return cast(FieldInfo, Field(json_schema_extra=extra, **kwargs))
