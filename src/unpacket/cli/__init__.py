"""Command-line tools for unpacket."""
