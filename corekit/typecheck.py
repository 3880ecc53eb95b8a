"""Type predicates, lenient value comparison and element-wise list conversion."""

from __future__ import annotations

import enum
import numbers
from collections.abc import Mapping
from typing import Any, Callable

from corekit.convert import (
    to_bool,
    to_float32,
    to_float64,
    to_int,
    to_int8,
    to_int16,
    to_int32,
    to_int64,
    to_string,
    to_uint,
    to_uint8,
    to_uint16,
    to_uint32,
    to_uint64,
)

__all__ = [
    "Kind",
    "compare",
    "is_number",
    "is_integer",
    "is_float",
    "is_slice",
    "is_map",
    "is_nil",
    "convert_slice",
]

_SLICE_TYPES = (list, tuple, bytes, bytearray)


class Kind(enum.Enum):
    """Element kinds a list can be converted to."""

    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT = "uint"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    BOOL = "bool"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    STRING = "string"


_CONVERTERS: dict[Kind, Callable[[Any], Any]] = {
    Kind.INT: to_int,
    Kind.INT8: to_int8,
    Kind.INT16: to_int16,
    Kind.INT32: to_int32,
    Kind.INT64: to_int64,
    Kind.UINT: to_uint,
    Kind.UINT8: to_uint8,
    Kind.UINT16: to_uint16,
    Kind.UINT32: to_uint32,
    Kind.UINT64: to_uint64,
    Kind.BOOL: to_bool,
    Kind.FLOAT32: to_float32,
    Kind.FLOAT64: to_float64,
    Kind.STRING: to_string,
}


def _sign(left: Any, right: Any) -> int:
    if left > right:
        return 1
    if left == right:
        return 0
    return -1


def compare(value1: Any, value2: Any) -> int:
    """Compare two values as the type of the first one; returns -1, 0 or 1.

    A ``None`` first value is always smaller. Values that are neither numbers
    nor booleans are compared by their string forms.
    """
    if value1 is None:
        return -1
    if isinstance(value1, (bool, numbers.Integral)):
        return _sign(to_int(value1), to_int(value2))
    if isinstance(value1, numbers.Real):
        return _sign(to_float64(value1), to_float64(value2))
    return _sign(to_string(value1), to_string(value2))


def is_number(value: Any) -> bool:
    """Return True for integers and floats (booleans excluded)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_integer(value: Any) -> bool:
    """Return True for integers (booleans excluded)."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_float(value: Any) -> bool:
    """Return True for floats."""
    return isinstance(value, float)


def is_slice(value: Any) -> bool:
    """Return True for sequence values: lists, tuples and byte strings."""
    return isinstance(value, _SLICE_TYPES)


def is_map(value: Any) -> bool:
    """Return True for mappings."""
    return isinstance(value, Mapping)


def is_nil(value: Any) -> bool:
    """Return True when the value is absent."""
    return value is None


def convert_slice(from_slice: Any, elem_kind: Kind | str) -> list[Any]:
    """Convert every element of a sequence to the given element kind."""
    if from_slice is None:
        raise ValueError("'fromSlice' should not be nil")
    if not is_slice(from_slice):
        raise ValueError("'fromSlice' should be slice")
    try:
        kind = Kind(elem_kind)
    except ValueError:
        raise ValueError("'toSliceType' should be slice") from None
    converter = _CONVERTERS[kind]
    return [converter(item) for item in from_slice]