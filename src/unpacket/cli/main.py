"""Main CLI entry point for unpacket."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..codec.decoder import unpack
from ..exceptions import UnpacketError
from ..utils.logging import configure_logging
from .layout import find_record, layout_file


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the unpacket CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="unpacket: Declarative Fixed-Layout Binary Records",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  unpacket --layout records.py                               Show field placement
  unpacket --decode 53000000... --record records.py:SystemEvent
                                                             Decode a hex buffer
  unpacket --version                                         Show version
        """,
    )

    parser.add_argument(
        "--layout",
        metavar="FILE",
        type=str,
        help="Show the placement table of every Record class in FILE",
    )

    parser.add_argument(
        "--decode",
        metavar="HEX",
        type=str,
        help="Decode a hex-encoded buffer (requires --record)",
    )

    parser.add_argument(
        "--record",
        metavar="FILE:CLASS",
        type=str,
        help="Record class to decode into, e.g. records.py:SystemEvent",
    )

    parser.add_argument(
        "--byte-order",
        choices=["big", "little"],
        default="big",
        help="Byte order of multi-byte fields (default: big)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"unpacket {__version__}",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        configure_logging(logging.DEBUG)

    # Handle --layout
    if args.layout:
        file_path = Path(args.layout)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1

        try:
            layout_file(file_path)
            return 0
        except Exception as e:
            print(f"Error reading layout: {e}", file=sys.stderr)
            return 1

    # Handle --decode
    if args.decode:
        if not args.record:
            print("Error: --decode requires --record FILE:CLASS", file=sys.stderr)
            return 2
        return _decode_command(args.decode, args.record, args.byte_order)

    # If no command specified, show help
    parser.print_help()
    return 0


def _decode_command(hex_data: str, record_ref: str, byte_order: str) -> int:
    file_name, sep, class_name = record_ref.rpartition(":")
    if not sep or not file_name or not class_name:
        print(f"Error: --record must be FILE:CLASS, got {record_ref}", file=sys.stderr)
        return 2

    file_path = Path(file_name)
    if not file_path.exists():
        print(f"Error: File not found: {file_path}", file=sys.stderr)
        return 1

    try:
        buffer = bytes.fromhex(hex_data)
    except ValueError as e:
        print(f"Error: invalid hex data: {e}", file=sys.stderr)
        return 1

    try:
        record_class = find_record(file_path, class_name)
        record = unpack(buffer, byte_order, record_class())
    except UnpacketError as e:
        print(f"Error decoding buffer: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error loading record: {e}", file=sys.stderr)
        return 1

    print(record.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
