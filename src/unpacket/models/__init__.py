"""Pydantic record modelling for unpacket.

This module provides the Record class, the Placement() field helper and the
wire type aliases used to declare fixed-layout binary records.
"""

from __future__ import annotations

from .base import Record
from .fields import Placement
from .types import Duration, Int8, Int16, Int32, Int64, Text, UInt8, UInt16, UInt32, UInt64

__all__ = [
    "Record",
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
]
