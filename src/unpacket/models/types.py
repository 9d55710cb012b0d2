"""Wire type aliases.

Each alias is an ``Annotated`` Python type carrying a LogicalType marker
(which selects the codec) and range constraints matching the wire width, so
out-of-range values are rejected by Pydantic before they reach pack().
``bool`` and ``str`` fields need no alias.

Example:
    >>> class Trade(Record):
    ...     shares: UInt32 = Placement("offset=0,length=4", default=0)
    ...     stock: Text = Placement("offset=4,length=8", default="")
    ...     timestamp: Duration = Placement("offset=12,length=6", default=0)
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from ..codec.schema import LogicalType

UInt8 = Annotated[int, Field(ge=0, le=0xFF), LogicalType.UINT8]
UInt16 = Annotated[int, Field(ge=0, le=0xFFFF), LogicalType.UINT16]
UInt32 = Annotated[int, Field(ge=0, le=0xFFFF_FFFF), LogicalType.UINT32]
UInt64 = Annotated[int, Field(ge=0, le=0xFFFF_FFFF_FFFF_FFFF), LogicalType.UINT64]

Int8 = Annotated[int, Field(ge=-(1 << 7), le=(1 << 7) - 1), LogicalType.INT8]
Int16 = Annotated[int, Field(ge=-(1 << 15), le=(1 << 15) - 1), LogicalType.INT16]
Int32 = Annotated[int, Field(ge=-(1 << 31), le=(1 << 31) - 1), LogicalType.INT32]
Int64 = Annotated[int, Field(ge=-(1 << 63), le=(1 << 63) - 1), LogicalType.INT64]

Text = Annotated[str, LogicalType.TEXT]

# Nanosecond count; the span (6-8 bytes) bounds the usable range
Duration = Annotated[int, Field(ge=0), LogicalType.DURATION]
