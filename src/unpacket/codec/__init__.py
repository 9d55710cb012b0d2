"""Fixed-layout binary codec for unpacket.

This module provides pack/unpack functionality driven by per-field placement
tags, along with the scalar codec and the placement-table builder they share.
"""

from __future__ import annotations

from .decoder import decode, unpack
from .encoder import pack
from .scalar import decode_scalar, encode_scalar
from .schema import ByteOrder, FieldLayout, LogicalType, RecordLayout, layout_of
from .tags import parse_tag

__all__ = [
    "pack",
    "unpack",
    "decode",
    "decode_scalar",
    "encode_scalar",
    "parse_tag",
    "layout_of",
    "ByteOrder",
    "LogicalType",
    "FieldLayout",
    "RecordLayout",
]
