"""A string-keyed dictionary with typed accessors and JSON helpers."""

from __future__ import annotations

import base64
import json
from collections.abc import Mapping
from typing import Any

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
from corekit.typecheck import is_slice

__all__ = ["Map", "new_map", "decode_json"]

_JSON_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


def _json_default(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, Mapping):
        return dict(value)
    raise TypeError(f"value of type {type(value).__name__} is not JSON serializable")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant: {name}")


class Map(dict):
    """A dictionary keyed by strings, with lenient typed getters."""

    def get_bool(self, key: str) -> bool:
        return to_bool(self.get(key))

    def get_int(self, key: str) -> int:
        return to_int(self.get(key))

    def get_int8(self, key: str) -> int:
        return to_int8(self.get(key))

    def get_int16(self, key: str) -> int:
        return to_int16(self.get(key))

    def get_int32(self, key: str) -> int:
        return to_int32(self.get(key))

    def get_int64(self, key: str) -> int:
        return to_int64(self.get(key))

    def get_uint(self, key: str) -> int:
        return to_uint(self.get(key))

    def get_uint8(self, key: str) -> int:
        return to_uint8(self.get(key))

    def get_uint16(self, key: str) -> int:
        return to_uint16(self.get(key))

    def get_uint32(self, key: str) -> int:
        return to_uint32(self.get(key))

    def get_uint64(self, key: str) -> int:
        return to_uint64(self.get(key))

    def get_float32(self, key: str) -> float:
        return to_float32(self.get(key))

    def get_float64(self, key: str) -> float:
        return to_float64(self.get(key))

    def get_string(self, key: str) -> str:
        return to_string(self.get(key))

    def get_map(self, key: str) -> Map | None:
        """Return a copy of a nested mapping as a Map, or None."""
        value = self.get(key)
        if not isinstance(value, Mapping):
            return None
        return new_map(value)

    def get_slice(self, key: str) -> list[Any] | None:
        """Return a nested sequence as a new list, or None."""
        value = self.get(key)
        if not is_slice(value):
            return None
        return list(value)

    def get_bytes(self, key: str) -> bytes | None:
        """Return a bytes or string value as bytes, or None."""
        value = self.get(key)
        if isinstance(value, (bytes, bytearray)):
            return bytes(value)
        if isinstance(value, str):
            return value.encode("utf-8")
        return None

    def increase(self, key: str, delta: Any) -> Any:
        """Add ``delta`` to a numeric value and return the result.

        A missing or ``None`` value is replaced by ``delta``; non-numeric
        values are left as they are.
        """
        value = self.get(key)
        if value is None:
            self[key] = delta
        elif isinstance(value, bool):
            pass
        elif isinstance(value, int):
            self[key] = value + to_int(delta)
        elif isinstance(value, float):
            self[key] = value + to_float64(delta)
        return self[key]

    def delete(self, *keys: str) -> None:
        """Remove the given keys; missing keys are ignored."""
        for key in keys:
            self.pop(key, None)

    def _dumps(self, **options: Any) -> bytes:
        try:
            text = json.dumps(
                self,
                sort_keys=True,
                ensure_ascii=False,
                allow_nan=False,
                default=_json_default,
                **options,
            )
        except (TypeError, ValueError):
            return b""
        return text.translate(_JSON_ESCAPES).encode("utf-8")

    def as_json(self) -> bytes:
        """Encode as compact JSON with sorted keys; empty bytes on failure."""
        return self._dumps(separators=(",", ":"))

    def as_pretty_json(self) -> bytes:
        """Encode as JSON indented by three spaces; empty bytes on failure."""
        return self._dumps(indent=3, separators=(",", ": "))


def new_map(*args: Any) -> Map:
    """Merge the mappings among ``args`` into a new Map with string keys.

    Arguments that are not mappings are skipped.
    """
    result = Map()
    for arg in args:
        if not isinstance(arg, Mapping):
            continue
        for key, value in arg.items():
            result[to_string(key)] = value
    return result


def decode_json(data: bytes | str) -> Map:
    """Decode a JSON object into a Map; numbers become floats.

    Raises ValueError when the data is not valid JSON or not an object.
    """
    decoded = json.loads(data, parse_int=float, parse_constant=_reject_constant)
    if decoded is None:
        return Map()
    if not isinstance(decoded, dict):
        raise ValueError(f"cannot decode JSON {type(decoded).__name__} into a map")
    return Map(decoded)