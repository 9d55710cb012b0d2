#!/usr/bin/env python3
"""Basic usage example for unpacket.

This example demonstrates:
1. Defining a fixed-layout record with Pydantic and placement tags
2. Packing it into a little-endian buffer
3. Unpacking the buffer into a fresh record
4. Inspecting the layout
"""

from __future__ import annotations

from pydantic import Field

from unpacket import (
    Int16,
    Int32,
    Placement,
    Record,
    Text,
    UInt8,
    decode,
    field_spans,
    pack,
    packed_size,
)


class SensorReading(Record):
    """Temperature/pressure sample from a little-endian field device."""

    sensor_id: UInt8 = Placement("offset=0,length=1", default=0)
    online: bool = Placement("offset=1,length=1", default=False)
    temperature_cc: Int16 = Placement("offset=2,length=2", default=0, description="0.01 degC")
    pressure_pa: Int32 = Placement("offset=4,length=4", default=0)
    site: Text = Placement("offset=8,length=8", default="")

    # Not on the wire
    note: str = Field(default="", description="Local annotation")


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("unpacket Basic Usage Example")
    print("=" * 60)
    print()

    # Create a record instance
    print("1. Creating a sensor reading...")
    reading = SensorReading(
        sensor_id=17,
        online=True,
        temperature_cc=-1250,
        pressure_pa=101_325,
        site="PIER-7",
        note="calibrated",
    )
    print(f"   {reading!r}")
    print()

    # Inspect the layout
    print("2. Layout...")
    for name, (offset, length) in field_spans(SensorReading).items():
        print(f"   {name}: bytes {offset}..{offset + length - 1}")
    print(f"   Packed size: {packed_size(SensorReading)} bytes")
    print()

    # Pack the record
    print("3. Packing (little-endian)...")
    data = pack("little", reading)
    print(f"   Hex: {data.hex()}")
    print()

    # Unpack the buffer
    print("4. Unpacking into a new record...")
    decoded = decode(SensorReading, data, "little")
    print(f"   {decoded!r}")
    print()

    # Untagged fields are not on the wire
    print("5. Verifying round-trip...")
    if decoded == reading.model_copy(update={"note": ""}):
        print("   Round-trip successful! Wire fields match.")
    else:
        print("   Round-trip failed! Records don't match.")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
