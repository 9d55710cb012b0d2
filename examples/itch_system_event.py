#!/usr/bin/env python3
"""NASDAQ ITCH 5.0 System Event example for unpacket.

This example demonstrates:
1. Declaring a fixed-layout record with placement tags
2. Building raw message bytes by hand, the way a feed handler would
3. Unpacking the bytes into the record
4. Packing the record back into identical bytes
5. Using overlapping spans to write a wide value and overwrite part of it
"""

from __future__ import annotations

import enum
import struct
from datetime import datetime, timedelta
from typing import Annotated, ClassVar, Optional
from zoneinfo import ZoneInfo

from unpacket import (
    Duration,
    LogicalType,
    Placement,
    Record,
    Text,
    UInt16,
    UInt64,
    field_spans,
    pack,
    packed_size,
    unpack,
)


class EventCode(enum.IntEnum):
    """System event codes (ITCH 5.0 section 1.1)."""

    START_OF_MESSAGES = ord("O")
    START_OF_SYSTEM_HOURS = ord("S")
    START_OF_MARKET_HOURS = ord("Q")
    END_OF_MARKET_HOURS = ord("M")
    END_OF_SYSTEM_HOURS = ord("E")
    END_OF_MESSAGES = ord("C")


class SystemEvent(Record):
    """ITCH 5.0 System Event message ('S'), 12 bytes."""

    message_type: Text = Placement("offset=0,length=1", default="S")
    stock_locate: UInt16 = Placement("offset=1,length=2", default=0)
    tracking_number: UInt16 = Placement("offset=3,length=2", default=0)
    timestamp: Duration = Placement(
        "offset=5,length=6", default=0, description="Nanoseconds since midnight"
    )
    event_code: Annotated[EventCode, LogicalType.UINT8] = Placement(
        "offset=11,length=1", default=EventCode.START_OF_MESSAGES
    )

    unpacket_max_bytes: ClassVar[Optional[int]] = 12


class SystemEventWriter(Record):
    """Same message, written with the wide-then-narrow trick.

    The timestamp is written as a full 8-byte integer over bytes 3..11, then
    the tracking number (declared later) overwrites bytes 3..5. The two high
    bytes of an ITCH timestamp are always zero, so nothing is lost.
    """

    message_type: Text = Placement("offset=0,length=1", default="S")
    stock_locate: UInt16 = Placement("offset=1,length=2", default=0)
    timestamp: UInt64 = Placement("offset=3,length=8", default=0)
    tracking_number: UInt16 = Placement("offset=3,length=2", default=0)
    event_code: Annotated[EventCode, LogicalType.UINT8] = Placement(
        "offset=11,length=1", default=EventCode.START_OF_MESSAGES
    )


def nanoseconds_since_midnight(tz: str = "America/New_York") -> int:
    """ITCH timestamps count nanoseconds since midnight, exchange local time."""
    now = datetime.now(ZoneInfo(tz))
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    return (now - midnight) // timedelta(microseconds=1) * 1000


def build_system_event(timestamp_ns: int, tracking_number: int, code: EventCode) -> bytes:
    """Build a System Event message by hand with struct."""
    data = bytearray(12)
    data[0] = ord("S")
    struct.pack_into(">H", data, 1, 0)
    # Order matters: the 8-byte timestamp at 3..11 first, then the tracking number over 3..5
    struct.pack_into(">Q", data, 3, timestamp_ns)
    struct.pack_into(">H", data, 3, tracking_number)
    data[11] = code
    return bytes(data)


def main() -> None:
    """Run the System Event example."""
    print("=" * 60)
    print("unpacket ITCH System Event Example")
    print("=" * 60)
    print()

    print("1. Layout...")
    for name, (offset, length) in field_spans(SystemEvent).items():
        print(f"   {name}: offset={offset} length={length}")
    print(f"   Packed size: {packed_size(SystemEvent)} bytes")
    print()

    print("2. Building raw message bytes...")
    timestamp_ns = nanoseconds_since_midnight()
    data = build_system_event(timestamp_ns, 7, EventCode.START_OF_SYSTEM_HOURS)
    print(f"   Hex: {data.hex()}")
    print()

    print("3. Unpacking...")
    event = unpack(data, "big", SystemEvent())
    print(f"   {event!r}")
    print(f"   Timestamp: {event.timestamp / 3.6e12:.6f} hours since midnight")
    print()

    print("4. Packing back...")
    repacked = pack("big", event)
    print(f"   Hex: {repacked.hex()}")
    print(f"   Identical: {repacked == data}")
    print()

    print("5. Packing with overlapping spans...")
    writer = SystemEventWriter(
        timestamp=event.timestamp,
        tracking_number=event.tracking_number,
        event_code=event.event_code,
    )
    overlapped = pack("big", writer)
    print(f"   Hex: {overlapped.hex()}")
    print(f"   Identical: {overlapped == data}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
