"""Record layout CLI commands."""

from __future__ import annotations

import importlib.util
import inspect
import sys
from pathlib import Path

from pydantic import BaseModel

from ..codec.schema import layout_of
from ..models.base import Record

_MODULE_NAME = "user_module"


def load_records(file_path: Path) -> list[type[Record]]:
    """Import a Python file and return the Record subclasses it defines.

    Args:
        file_path: Path to Python file containing record definitions

    Returns:
        Record classes in definition order
    """
    spec = importlib.util.spec_from_file_location(_MODULE_NAME, file_path)
    if spec is None or spec.loader is None:
        raise ValueError(f"Could not load module from {file_path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[_MODULE_NAME] = module
    spec.loader.exec_module(module)

    # Only include classes defined in this file (not imported)
    return [
        obj
        for obj in vars(module).values()
        if inspect.isclass(obj)
        and obj is not Record
        and issubclass(obj, Record)
        and obj.__module__ == _MODULE_NAME
    ]


def find_record(file_path: Path, class_name: str) -> type[Record]:
    """Load a single Record subclass by name from a Python file.

    Raises:
        ValueError: If the file defines no record with that name
    """
    for record_class in load_records(file_path):
        if record_class.__name__ == class_name:
            return record_class
    raise ValueError(f"No Record class named {class_name} in {file_path}")


def layout_file(file_path: Path) -> None:
    """Print the placement table of every Record class in a Python file.

    Args:
        file_path: Path to Python file containing record definitions
    """
    records = load_records(file_path)

    if not records:
        print(f"No Record classes found in {file_path}")
        return

    print(f"{len(records)} record{'s' if len(records) != 1 else ''} loaded.")
    print()

    for record_class in records:
        print_layout(record_class)


def print_layout(record_class: type[BaseModel]) -> None:
    """Print the placement table of a single record class.

    Overlapping spans are flagged; pack() lets the later field win.

    Args:
        record_class: Record class to describe
    """
    layout = layout_of(record_class)

    print(f"{'=' * 19} {layout.record_name} {'=' * 19}")
    print(f"Packed size: {layout.size} bytes")

    tagged = {field.name for field in layout.fields}
    untagged = [name for name in record_class.model_fields if name not in tagged]

    print(f"{'offset':>8} {'length':>8}  {'type':<10} field")
    covered: set[int] = set()
    for field in layout.fields:
        span = set(range(field.offset, field.end))
        note = "  (overlaps earlier field)" if span & covered else ""
        covered |= span
        print(
            f"{field.offset:>8} {field.length:>8}  {field.logical_type.value:<10} "
            f"{field.name}{note}"
        )

    gaps = layout.size - len(covered)
    if gaps:
        print(f"Unused bytes: {gaps}")
    if untagged:
        print(f"Untagged fields: {', '.join(untagged)}")
    print()
