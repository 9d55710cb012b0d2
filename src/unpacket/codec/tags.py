"""Placement tag parsing.

A placement tag is a comma-separated list of ``key=value`` pairs such as
``"offset=5,length=6"``. Only ``offset`` and ``length`` are recognized; any
other key is ignored so tags can carry extra annotations.
"""

from __future__ import annotations

import re

from ..exceptions import MetadataMissingError, MetadataParseError

TAG_KEY = "unpack"

_OFFSET = "offset"
_LENGTH = "length"

# Optional sign and ASCII digits only: no underscores, padding or other scripts
_INTEGER = re.compile(r"[+-]?[0-9]+", re.ASCII)


def parse_tag(tag: str) -> tuple[int, int]:
    """Parse a placement tag into an ``(offset, length)`` pair.

    Args:
        tag: Tag string, e.g. ``"offset=1,length=2"``

    Returns:
        Tuple of (offset, length)

    Raises:
        MetadataParseError: If a recognized value is not a base-10 integer
        MetadataMissingError: If offset or length is absent

    Example:
        >>> parse_tag("length=2,offset=1,endian=big")
        (1, 2)
    """
    values: dict[str, int] = {}

    for part in tag.split(","):
        key, sep, raw = part.strip().partition("=")
        if not sep or key not in (_OFFSET, _LENGTH):
            continue
        if not _INTEGER.fullmatch(raw):
            raise MetadataParseError(key, raw)
        values[key] = int(raw, 10)

    missing = [key for key in (_OFFSET, _LENGTH) if key not in values]
    if missing:
        raise MetadataMissingError(missing)

    return values[_OFFSET], values[_LENGTH]
