"""Base record class and unpacket-specific Pydantic configuration.

This module provides the Record class that fixed-layout message types should
inherit from. It also defines the per-record configuration options.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from ..codec.schema import DEFAULT_TEXT_ENCODING, RecordLayout, layout_of


class Record(BaseModel):
    """Base class for fixed-layout binary records.

    Fields are placed in the wire buffer with :func:`~unpacket.Placement` and
    typed with the wire aliases from :mod:`unpacket.models.types`. The
    placement table is built when the subclass is defined, so a malformed tag
    or an unsupported field type fails at import time rather than on first use.

    unpacket-specific options can be configured as ClassVar attributes:

    Example:
        >>> from typing import ClassVar, Optional
        >>> class SystemEvent(Record):
        ...     stock_locate: UInt16 = Placement("offset=1,length=2", default=0)
        ...     tracking_number: UInt16 = Placement("offset=3,length=2", default=0)
        ...     timestamp: Duration = Placement("offset=5,length=6", default=0)
        ...     event_code: UInt8 = Placement("offset=11,length=1", default=0)
        ...
        ...     unpacket_max_bytes: ClassVar[Optional[int]] = 12

    Attributes:
        unpacket_text_encoding: Encoding for text fields (default latin-1, so
            every byte value survives a decode/encode cycle)
        unpacket_max_bytes: Maximum layout size in bytes (optional, checked
            when the class is defined)
    """

    model_config = ConfigDict(
        # Lax validation, so decoded ints coerce into IntEnum fields
        strict=False,
        arbitrary_types_allowed=True,
        # unpack() assigns decoded values field by field
        validate_assignment=True,
        extra="forbid",
    )

    unpacket_text_encoding: ClassVar[str] = DEFAULT_TEXT_ENCODING
    unpacket_max_bytes: ClassVar[int | None] = None

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        """Hook called once Pydantic has collected the subclass's fields.

        Builds the placement table eagerly. Models with unresolved forward
        references are deferred to their first pack/unpack.
        """
        super().__pydantic_init_subclass__(**kwargs)

        if cls.__pydantic_complete__:
            layout_of(cls)

    @classmethod
    def unpacket_layout(cls) -> RecordLayout:
        """Return this record type's placement table."""
        return layout_of(cls)
