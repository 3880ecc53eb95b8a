"""A mapping that remembers insertion order and can be reordered."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Iterator

from corekit.typecheck import compare

__all__ = ["OrderedMap"]


class OrderedMap:
    """Key/value store whose key order can be sorted or reversed."""

    def __init__(self) -> None:
        self._keys: list[Any] = []
        self._values: dict[Any, Any] = {}

    def keys(self) -> list[Any]:
        """Return the keys in their current order."""
        return list(self._keys)

    def sort(self) -> None:
        """Order the keys by their values."""
        self._keys.sort(key=cmp_to_key(lambda a, b: compare(self._values[a], self._values[b])))

    def sort_keys(self) -> None:
        """Order the keys by the keys themselves."""
        self._keys.sort(key=cmp_to_key(compare))

    def reverse(self) -> None:
        """Reverse the key order."""
        self._keys.reverse()

    def put(self, key: Any, value: Any) -> None:
        """Set a value; a new key goes to the end, an existing one keeps its place."""
        if key not in self._values:
            self._keys.append(key)
        self._values[key] = value

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the value for ``key``, or ``default`` when absent."""
        return self._values.get(key, default)

    def delete(self, key: Any) -> None:
        """Remove a key if present."""
        if key in self._values:
            self._keys.remove(key)
            del self._values[key]

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield (key, value) pairs in key order."""
        for key in list(self._keys):
            yield key, self._values[key]

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._keys))

    def __repr__(self) -> str:
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"OrderedMap({{{pairs}}})"