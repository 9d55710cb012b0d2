"""Utility functions for unpacket.

This module provides layout sizing helpers and logging setup.
"""

from __future__ import annotations

from .logging import configure_logging
from .sizing import field_spans, packed_size

__all__ = [
    # Sizing functions
    "packed_size",
    "field_spans",
    # Logging
    "configure_logging",
]
