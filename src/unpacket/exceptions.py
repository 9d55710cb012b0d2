"""Exception hierarchy for unpacket.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from UnpacketError for easy catching of any unpacket-specific error.

Field-level errors are raised without a field name by the parser and the scalar
codec; the pack/unpack orchestrators attach the offending field's name before
re-raising, so ``str(err)`` reads ``"field <name>: <cause>"``.
"""

from __future__ import annotations

from typing import Any, Sequence


class UnpacketError(Exception):
    """Base exception for all unpacket errors.

    Attributes:
        message: Description of the cause
        field: Name of the record field being processed, if known
    """

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field

    def __str__(self) -> str:
        if self.field is None:
            return self.message
        return f"field {self.field}: {self.message}"


class SchemaError(UnpacketError):
    """Raised when a record type's layout is invalid.

    Examples:
        - Placement tag is missing a key or has a non-integer value
        - Negative offset or non-positive length
        - Field type has no codec
        - Layout exceeds unpacket_max_bytes
    """

    pass


class MetadataMissingError(SchemaError):
    """Raised when a placement tag lacks ``offset`` or ``length``."""

    def __init__(self, missing: Sequence[str], *, field: str | None = None) -> None:
        self.missing = tuple(missing)
        super().__init__(f"missing {' and '.join(self.missing)} in placement tag", field=field)


class MetadataParseError(SchemaError):
    """Raised when a placement tag value is not a base-10 integer."""

    def __init__(self, key: str, value: str, *, field: str | None = None) -> None:
        self.key = key
        self.value = value
        super().__init__(f"invalid {key}: {value!r} is not an integer", field=field)


class UnsupportedTypeError(SchemaError):
    """Raised when a tagged field's type has no codec."""

    def __init__(self, type_: Any, *, field: str | None = None) -> None:
        self.type = type_
        super().__init__(f"unsupported field type: {type_!r}", field=field)


class NotAStructError(SchemaError):
    """Raised when pack/unpack is handed something that is not a record instance."""

    def __init__(self, obj: Any) -> None:
        self.obj = obj
        kind = f"class {obj.__name__}" if isinstance(obj, type) else type(obj).__name__
        super().__init__(f"expected a pydantic model, got {kind}")


class ByteOrderError(UnpacketError, ValueError):
    """Raised when a byte order is neither "big" nor "little"."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Invalid byte order: {value!r}. Must be 'big' or 'little'")


class EncodeError(UnpacketError):
    """Raised when packing a record fails.

    Examples:
        - Integer value out of range for its wire width
        - Text not representable in the record's encoding
        - Duration too large for its span
    """

    pass


class DecodeError(UnpacketError):
    """Raised when unpacking a buffer fails.

    Examples:
        - Field span extends past the end of the buffer
        - Decoded value rejected by the record's validators
        - Text not decodable in the record's encoding
    """

    pass


class OutOfBoundsError(DecodeError):
    """Raised when a field's span extends past the end of the buffer."""

    def __init__(self, offset: int, length: int, size: int, *, field: str | None = None) -> None:
        self.offset = offset
        self.length = length
        self.size = size
        super().__init__(
            f"span [{offset}, {offset + length}) out of bounds for {size}-byte buffer",
            field=field,
        )


class InsufficientDataError(UnpacketError):
    """Raised when a field's span is narrower than its type requires."""

    def __init__(
        self, type_name: str, required: int, actual: int, *, field: str | None = None
    ) -> None:
        self.type_name = type_name
        self.required = required
        self.actual = actual
        super().__init__(
            f"{type_name} requires {required} bytes, span has {actual}",
            field=field,
        )
