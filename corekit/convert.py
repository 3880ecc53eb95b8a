"""Lenient conversion of arbitrary values to fixed-width numbers, booleans and strings.

Every conversion is total: values that cannot be interpreted become zero
(or ``False`` / ``""``), and values outside the target range are clamped to
the nearest bound of that range.
"""

from __future__ import annotations

import math
import numbers
import re
import struct
from typing import Any

__all__ = [
    "to_byte",
    "to_int",
    "to_int8",
    "to_int16",
    "to_int32",
    "to_int64",
    "to_uint",
    "to_uint8",
    "to_uint16",
    "to_uint32",
    "to_uint64",
    "to_float32",
    "to_float64",
    "to_bool",
    "to_string",
]

MAX_FLOAT32 = 3.4028234663852886e38

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_DECIMAL_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_FLOAT_PATTERN = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+(?:\.[0-9a-fA-F]*)?|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
_SPECIAL_FLOAT_PATTERN = re.compile(r"[+-]?(?:infinity|inf)|nan", re.IGNORECASE)


def _signed_range(bits: int) -> tuple[int, int]:
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def _unsigned_range(bits: int) -> tuple[int, int]:
    return 0, (1 << bits) - 1


def _round_float32(x: float) -> float:
    """Round a float to the nearest single-precision value."""
    if math.isnan(x) or math.isinf(x):
        return x
    try:
        return struct.unpack("<f", struct.pack("<f", x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


def _parse_int(text: str, bits: int) -> int | None:
    """Parse a base-10 integer that must fit in a signed integer of ``bits`` bits."""
    if not _INT_PATTERN.fullmatch(text):
        return None
    number = int(text)
    low, high = _signed_range(bits)
    if number < low or number > high:
        return None
    return number


def _parse_float(text: str, bits: int) -> float | None:
    """Parse a float of the given precision; out-of-range values are rejected."""
    if _SPECIAL_FLOAT_PATTERN.fullmatch(text):
        return float(text)
    if _DECIMAL_FLOAT_PATTERN.fullmatch(text):
        result = float(text)
    elif _HEX_FLOAT_PATTERN.fullmatch(text):
        try:
            result = float.fromhex(text)
        except OverflowError:
            return None
    else:
        return None
    if math.isinf(result):
        return None
    if bits == 32:
        result = _round_float32(result)
        if math.isinf(result):
            return None
    return result


def _clamp(number: int, low: int, high: int) -> int:
    return max(low, min(high, number))


def _int_from_float(x: float, low: int, high: int) -> int:
    if math.isnan(x):
        return 0
    if x < low:
        return low
    if x > high:
        return high
    return int(x)


def _as_text(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    return value


def _to_integer(value: Any, low: int, high: int, parse_bits: int) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    value = _as_text(value)
    if isinstance(value, str):
        parsed = _parse_int(value, parse_bits)
        if parsed is not None:
            return _clamp(parsed, low, high)
        parsed_float = _parse_float(value, parse_bits)
        if parsed_float is not None:
            return _int_from_float(parsed_float, low, high)
        return 0
    if isinstance(value, numbers.Integral):
        return _clamp(int(value), low, high)
    if isinstance(value, numbers.Real):
        return _int_from_float(float(value), low, high)
    return 0


def _int_to_float(number: int) -> float:
    try:
        return float(number)
    except OverflowError:
        return math.copysign(math.inf, number)


def to_int(value: Any) -> int:
    """Convert a value to a 64-bit signed integer; strings are read as 32-bit first."""
    return _to_integer(value, *_signed_range(64), parse_bits=32)


def to_int8(value: Any) -> int:
    """Convert a value to an 8-bit signed integer, clamping out-of-range values."""
    return _to_integer(value, *_signed_range(8), parse_bits=64)


def to_int16(value: Any) -> int:
    """Convert a value to a 16-bit signed integer, clamping out-of-range values."""
    return _to_integer(value, *_signed_range(16), parse_bits=64)


def to_int32(value: Any) -> int:
    """Convert a value to a 32-bit signed integer, clamping out-of-range values."""
    return _to_integer(value, *_signed_range(32), parse_bits=32)


def to_int64(value: Any) -> int:
    """Convert a value to a 64-bit signed integer, clamping out-of-range values."""
    return _to_integer(value, *_signed_range(64), parse_bits=64)


def to_uint(value: Any) -> int:
    """Convert a value to a 64-bit unsigned integer; negatives become zero."""
    return _to_integer(value, *_unsigned_range(64), parse_bits=32)


def to_uint8(value: Any) -> int:
    """Convert a value to an 8-bit unsigned integer, clamping out-of-range values."""
    return _to_integer(value, *_unsigned_range(8), parse_bits=32)


def to_byte(value: Any) -> int:
    """Convert a value to a byte (an 8-bit unsigned integer)."""
    return to_uint8(value)


def to_uint16(value: Any) -> int:
    """Convert a value to a 16-bit unsigned integer, clamping out-of-range values."""
    return _to_integer(value, *_unsigned_range(16), parse_bits=32)


def to_uint32(value: Any) -> int:
    """Convert a value to a 32-bit unsigned integer, clamping out-of-range values."""
    return _to_integer(value, *_unsigned_range(32), parse_bits=32)


def to_uint64(value: Any) -> int:
    """Convert a value to a 64-bit unsigned integer, clamping out-of-range values."""
    return _to_integer(value, *_unsigned_range(64), parse_bits=64)


def to_float64(value: Any) -> float:
    """Convert a value to a double-precision float."""
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return float(value)
    value = _as_text(value)
    if isinstance(value, str):
        parsed = _parse_float(value, 64)
        return 0.0 if parsed is None else parsed
    if isinstance(value, numbers.Integral):
        return _int_to_float(int(value))
    if isinstance(value, numbers.Real):
        return float(value)
    return 0.0


def to_float32(value: Any) -> float:
    """Convert a value to a single-precision float (returned as a Python float)."""
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return float(value)
    value = _as_text(value)
    if isinstance(value, str):
        parsed = _parse_float(value, 32)
        return 0.0 if parsed is None else parsed
    if isinstance(value, numbers.Integral):
        x = _int_to_float(int(value))
    elif isinstance(value, numbers.Real):
        x = float(value)
    else:
        return 0.0
    if x > MAX_FLOAT32:
        return MAX_FLOAT32
    return _round_float32(x)


def to_bool(value: Any) -> bool:
    """Convert a value to a boolean: booleans pass through, others are true when positive."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return to_int64(value) > 0


def _format_float(x: float) -> str:
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "+Inf" if x > 0 else "-Inf"
    text = "%f" % x
    if text.endswith(".000000"):
        text = text[: -len(".000000")]
    return text


def to_string(value: Any) -> str:
    """Convert a value to its string form; whole floats lose their trailing zeros."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return str(value)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, float):
        return _format_float(float(value))
    return repr(value)