"""Property-based tests using hypothesis."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from unpacket import (
    Duration,
    Int8,
    Int16,
    Int32,
    Int64,
    OutOfBoundsError,
    Placement,
    Record,
    Text,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    decode,
    pack,
    packed_size,
    unpack,
)


class AllTypes(Record):
    """Record for property testing, one field of every kind."""

    u8: UInt8 = Placement("offset=0,length=1", default=0)
    u16: UInt16 = Placement("offset=1,length=2", default=0)
    u32: UInt32 = Placement("offset=3,length=4", default=0)
    u64: UInt64 = Placement("offset=7,length=8", default=0)
    i8: Int8 = Placement("offset=15,length=1", default=0)
    i16: Int16 = Placement("offset=16,length=2", default=0)
    i32: Int32 = Placement("offset=18,length=4", default=0)
    i64: Int64 = Placement("offset=22,length=8", default=0)
    flag: bool = Placement("offset=30,length=1", default=False)
    symbol: Text = Placement("offset=31,length=8", default="")
    elapsed: Duration = Placement("offset=39,length=6", default=0)


RECORD_SIZE = 45

byte_orders = st.sampled_from(["big", "little"])

# Printable ASCII without whitespace, which decoding trims
symbols = st.text(
    alphabet=st.characters(min_codepoint=0x21, max_codepoint=0x7E), max_size=8
)

all_types = st.builds(
    AllTypes,
    u8=st.integers(min_value=0, max_value=2**8 - 1),
    u16=st.integers(min_value=0, max_value=2**16 - 1),
    u32=st.integers(min_value=0, max_value=2**32 - 1),
    u64=st.integers(min_value=0, max_value=2**64 - 1),
    i8=st.integers(min_value=-(2**7), max_value=2**7 - 1),
    i16=st.integers(min_value=-(2**15), max_value=2**15 - 1),
    i32=st.integers(min_value=-(2**31), max_value=2**31 - 1),
    i64=st.integers(min_value=-(2**63), max_value=2**63 - 1),
    flag=st.booleans(),
    symbol=symbols,
    elapsed=st.integers(min_value=0, max_value=2**48 - 1),
)


class TestCodecProperties:
    """Property-based tests for pack/unpack."""

    @given(record=all_types, byte_order=byte_orders)
    def test_pack_unpack_roundtrip(self, record: AllTypes, byte_order: str) -> None:
        """Test pack/unpack is invertible."""
        data = pack(byte_order, record)

        assert len(data) == RECORD_SIZE
        assert unpack(data, byte_order, AllTypes()) == record

    @given(record=all_types, byte_order=byte_orders)
    def test_decode_matches_unpack(self, record: AllTypes, byte_order: str) -> None:
        """Test decode() and unpack() agree."""
        data = pack(byte_order, record)
        assert decode(AllTypes, data, byte_order) == unpack(data, byte_order, AllTypes())

    @given(record=all_types, byte_order=byte_orders)
    def test_size_independent_of_values(self, record: AllTypes, byte_order: str) -> None:
        """Test the buffer length depends only on the layout."""
        assert len(pack(byte_order, record)) == packed_size(AllTypes)

    @given(data=st.binary(min_size=RECORD_SIZE, max_size=RECORD_SIZE), byte_order=byte_orders)
    def test_any_full_buffer_decodes(self, data: bytes, byte_order: str) -> None:
        """Test every buffer of the right size decodes without error."""
        record = unpack(data, byte_order, AllTypes())

        # Repacking reproduces every byte except the flag and trimmed text
        repacked = pack(byte_order, record)
        assert repacked[:30] == data[:30]
        assert repacked[30] == (data[30] != 0)
        assert repacked[39:] == data[39:]

    @given(data=st.binary(max_size=RECORD_SIZE - 1), byte_order=byte_orders)
    def test_short_buffer_out_of_bounds(self, data: bytes, byte_order: str) -> None:
        """Test that a truncated buffer always fails with OutOfBoundsError."""
        with pytest.raises(OutOfBoundsError):
            unpack(data, byte_order, AllTypes())
