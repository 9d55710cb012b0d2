"""Field descriptor tables for record types.

This module turns a Pydantic model class into a static, ordered table of
``FieldLayout`` entries: one per field carrying a placement tag. The table is
built once per class and cached on it, so placement tags are parsed when a
record type is defined rather than on every pack/unpack call.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Type, Union

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from ..exceptions import (
    ByteOrderError,
    NotAStructError,
    SchemaError,
    UnpacketError,
    UnsupportedTypeError,
)
from .tags import TAG_KEY, parse_tag

logger = logging.getLogger(__name__)

_LAYOUT_ATTR = "__unpacket_layout__"

DEFAULT_TEXT_ENCODING = "latin-1"


class ByteOrder(str, enum.Enum):
    """Byte order applied to every multi-byte field of a pack/unpack call."""

    BIG = "big"
    LITTLE = "little"

    @property
    def struct_prefix(self) -> str:
        """Prefix character for :mod:`struct` format strings."""
        return ">" if self is ByteOrder.BIG else "<"

    @classmethod
    def coerce(cls, value: Union[ByteOrder, str]) -> ByteOrder:
        """Accept a ByteOrder member or its string value ("big"/"little").

        Raises:
            ByteOrderError: If value names no byte order
        """
        try:
            return cls(value)
        except ValueError as err:
            raise ByteOrderError(value) from err


class LogicalType(enum.Enum):
    """Wire representation of a field value.

    Members are used as ``Annotated`` markers, e.g.
    ``Annotated[int, LogicalType.UINT16]``; see :mod:`unpacket.models.types`
    for ready-made aliases.
    """

    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    BOOL = "bool"
    TEXT = "text"
    DURATION = "duration"


@dataclass(frozen=True)
class FieldLayout:
    """Placement of a single field.

    Attributes:
        name: Field name
        logical_type: Wire representation
        offset: First byte of the span
        length: Number of bytes in the span
    """

    name: str
    logical_type: LogicalType
    offset: int
    length: int

    @property
    def end(self) -> int:
        """One past the last byte of the span."""
        return self.offset + self.length


@dataclass(frozen=True)
class RecordLayout:
    """Ordered placement table for a record type.

    Attributes:
        record_name: Name of the model class
        fields: Tagged fields in declaration order
        size: Buffer size produced by pack (highest ``offset + length``)
        text_encoding: Encoding used for TEXT fields
    """

    record_name: str
    fields: Tuple[FieldLayout, ...]
    size: int
    text_encoding: str = DEFAULT_TEXT_ENCODING

    @classmethod
    def from_model(cls, model_class: Type[BaseModel]) -> RecordLayout:
        """Build the placement table for a Pydantic model class.

        Untagged fields are left out of the table.

        Raises:
            MetadataParseError: If a tag value is not an integer
            MetadataMissingError: If a tag lacks offset or length
            UnsupportedTypeError: If a tagged field has no codec
            InsufficientDataError: If a span is narrower than its type requires
            SchemaError: If a span is negative/empty, a duration span is wider
                than 8 bytes, or the layout is too large
        """
        # scalar imports this module
        from .scalar import check_width

        fields = []

        for name, field_info in model_class.model_fields.items():
            tag = placement_tag(field_info)
            if tag is None:
                continue

            try:
                offset, length = parse_tag(tag)
            except UnpacketError as err:
                err.field = name
                raise

            if offset < 0:
                raise SchemaError(f"offset must be >= 0, got {offset}", field=name)
            if length <= 0:
                raise SchemaError(f"length must be > 0, got {length}", field=name)

            logical_type = resolve_logical_type(field_info)
            if logical_type is None:
                raise UnsupportedTypeError(field_info.annotation, field=name)

            try:
                check_width(logical_type, length)
            except UnpacketError as err:
                err.field = name
                raise

            fields.append(FieldLayout(name, logical_type, offset, length))

        size = max((field.end for field in fields), default=0)

        max_bytes = getattr(model_class, "unpacket_max_bytes", None)
        if max_bytes is not None and size > max_bytes:
            raise SchemaError(
                f"{model_class.__name__} layout spans {size} bytes, "
                f"exceeds unpacket_max_bytes={max_bytes}"
            )

        logger.debug(
            "Built layout for %s: %d tagged fields, %d bytes",
            model_class.__name__,
            len(fields),
            size,
        )
        text_encoding = getattr(model_class, "unpacket_text_encoding", DEFAULT_TEXT_ENCODING)
        return cls(model_class.__name__, tuple(fields), size, text_encoding)


def placement_tag(field_info: FieldInfo) -> Optional[str]:
    """Return the placement tag attached to a field, if any."""
    extra = field_info.json_schema_extra
    if not isinstance(extra, dict):
        return None
    tag = extra.get(TAG_KEY)
    return tag if isinstance(tag, str) else None


def resolve_logical_type(field_info: FieldInfo) -> Optional[LogicalType]:
    """Determine a field's wire representation.

    An explicit ``LogicalType`` marker in the field's ``Annotated`` metadata
    wins; otherwise ``bool`` and ``str`` annotations map to BOOL and TEXT.
    Anything else (including a bare ``int``, whose width is unknown) has no
    codec.
    """
    for item in field_info.metadata:
        if isinstance(item, LogicalType):
            return item

    annotation = field_info.annotation
    if annotation is bool:
        return LogicalType.BOOL
    if annotation is str:
        return LogicalType.TEXT
    return None


def layout_of(model_class: Any) -> RecordLayout:
    """Return the cached placement table of a model class, building it on first use.

    Raises:
        NotAStructError: If model_class is not a Pydantic model class
    """
    if not (isinstance(model_class, type) and issubclass(model_class, BaseModel)):
        raise NotAStructError(model_class)

    layout = model_class.__dict__.get(_LAYOUT_ATTR)
    if layout is None:
        if not model_class.__pydantic_complete__:
            model_class.model_rebuild()
        layout = RecordLayout.from_model(model_class)
        setattr(model_class, _LAYOUT_ATTR, layout)
    return layout
