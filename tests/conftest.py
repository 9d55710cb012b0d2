"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import struct

import pytest


@pytest.fixture
def one_hour_ns() -> int:
    """One hour expressed in nanoseconds."""
    return 3_600_000_000_000


@pytest.fixture
def system_event_bytes(one_hour_ns: int) -> bytes:
    """ITCH 5.0 System Event ('S'), locate 0, tracking 7, 1h after midnight, code 'O'."""
    data = bytearray(12)
    data[0] = ord("S")
    struct.pack_into(">Q", data, 3, one_hour_ns)
    struct.pack_into(">H", data, 3, 7)
    data[11] = ord("O")
    return bytes(data)
