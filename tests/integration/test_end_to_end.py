"""End-to-end integration tests."""

from __future__ import annotations

import enum
import struct
from typing import Annotated, ClassVar, Optional

import pytest

from unpacket import (
    Duration,
    LogicalType,
    OutOfBoundsError,
    Placement,
    Record,
    Text,
    UInt16,
    UInt32,
    UInt64,
    decode,
    field_spans,
    pack,
    packed_size,
    unpack,
)


class EventCode(enum.IntEnum):
    """System event codes."""

    START_OF_MESSAGES = ord("O")
    START_OF_SYSTEM_HOURS = ord("S")
    START_OF_MARKET_HOURS = ord("Q")
    END_OF_MARKET_HOURS = ord("M")
    END_OF_SYSTEM_HOURS = ord("E")
    END_OF_MESSAGES = ord("C")


class SystemEvent(Record):
    """ITCH 5.0 System Event message."""

    message_type: Text = Placement("offset=0,length=1", default="S")
    stock_locate: UInt16 = Placement("offset=1,length=2", default=0)
    tracking_number: UInt16 = Placement("offset=3,length=2", default=0)
    timestamp: Duration = Placement("offset=5,length=6", default=0)
    event_code: Annotated[EventCode, LogicalType.UINT8] = Placement(
        "offset=11,length=1", default=EventCode.START_OF_MESSAGES
    )

    unpacket_max_bytes: ClassVar[Optional[int]] = 12


class SystemEventWriter(Record):
    """System Event written as a wide timestamp overwritten by the tracking number."""

    message_type: Text = Placement("offset=0,length=1", default="S")
    stock_locate: UInt16 = Placement("offset=1,length=2", default=0)
    timestamp: UInt64 = Placement("offset=3,length=8", default=0)
    tracking_number: UInt16 = Placement("offset=3,length=2", default=0)
    event_code: Annotated[EventCode, LogicalType.UINT8] = Placement(
        "offset=11,length=1", default=EventCode.START_OF_MESSAGES
    )


class StockDirectory(Record):
    """Truncated ITCH Stock Directory message."""

    message_type: Text = Placement("offset=0,length=1", default="R")
    stock_locate: UInt16 = Placement("offset=1,length=2", default=0)
    tracking_number: UInt16 = Placement("offset=3,length=2", default=0)
    timestamp: Duration = Placement("offset=5,length=6", default=0)
    stock: Text = Placement("offset=11,length=8", default="")
    market_category: Text = Placement("offset=19,length=1", default=" ")
    round_lot_size: UInt32 = Placement("offset=20,length=4", default=100)
    round_lots_only: bool = Placement("offset=24,length=1", default=False)


class TestSystemEvent:
    """Test the System Event message against hand-built bytes."""

    def test_unpack(self, system_event_bytes: bytes, one_hour_ns: int) -> None:
        """Test decoding a raw message."""
        event = unpack(system_event_bytes, "big", SystemEvent())

        assert event.message_type == "S"
        assert event.stock_locate == 0
        assert event.tracking_number == 7
        assert event.timestamp == one_hour_ns
        assert event.event_code is EventCode.START_OF_MESSAGES

    def test_pack_reproduces_bytes(self, system_event_bytes: bytes) -> None:
        """Test unpack then pack gives back the input."""
        event = unpack(system_event_bytes, "big", SystemEvent())
        assert pack("big", event) == system_event_bytes

    def test_writer_overlap(self, system_event_bytes: bytes, one_hour_ns: int) -> None:
        """Test the wide-then-narrow layout produces the same bytes."""
        writer = SystemEventWriter(
            timestamp=one_hour_ns,
            tracking_number=7,
            event_code=EventCode.START_OF_MESSAGES,
        )
        assert pack("big", writer) == system_event_bytes

    def test_layout(self) -> None:
        """Test size and spans."""
        assert packed_size(SystemEvent) == 12
        assert packed_size(SystemEventWriter) == 12
        assert field_spans(SystemEvent)["timestamp"] == (5, 6)

    def test_truncated_message(self, system_event_bytes: bytes) -> None:
        """Test a message cut short on the wire."""
        with pytest.raises(OutOfBoundsError, match="field event_code"):
            unpack(system_event_bytes[:11], "big", SystemEvent())

    def test_trailing_bytes_ignored(self, system_event_bytes: bytes) -> None:
        """Test a buffer longer than the record."""
        event = decode(SystemEvent, system_event_bytes + b"\xff\xff", "big")
        assert pack("big", event) == system_event_bytes


class TestStockDirectory:
    """Test a message with padded text fields."""

    def test_roundtrip(self, one_hour_ns: int) -> None:
        """Test pack then decode."""
        original = StockDirectory(
            stock_locate=12,
            tracking_number=3,
            timestamp=one_hour_ns,
            stock="AAPL",
            market_category="Q",
            round_lot_size=100,
            round_lots_only=True,
        )
        data = pack("big", original)

        assert len(data) == 25
        assert data[11:19] == b"AAPL\x00\x00\x00\x00"
        assert decode(StockDirectory, data, "big") == original

    def test_space_padded_symbol(self) -> None:
        """Test a feed that pads symbols with spaces."""
        data = bytearray(25)
        data[0:1] = b"R"
        struct.pack_into(">H", data, 1, 12)
        data[11:19] = b"MSFT    "
        data[19:20] = b"Q"
        struct.pack_into(">I", data, 20, 100)
        data[24] = 0

        record = unpack(bytes(data), "big", StockDirectory())

        assert record.stock == "MSFT"
        assert record.round_lot_size == 100
        assert record.round_lots_only is False

    def test_little_endian_roundtrip(self, one_hour_ns: int) -> None:
        """Test the same record in little-endian order."""
        original = StockDirectory(
            stock_locate=0x0102, timestamp=one_hour_ns, stock="IBM", market_category="N"
        )
        data = pack("little", original)

        assert data[1:3] == b"\x02\x01"
        assert unpack(data, "little", StockDirectory()) == original
