"""Thread-safe pseudo-random booleans, integers and strings."""

from __future__ import annotations

import random
import threading
import time

__all__ = [
    "rand_bool",
    "rand_int",
    "rand_int64",
    "rand_string",
    "rand_hex_string",
]

HEX_CHARS = "0123456789abcdef"
LETTER_CHARS = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

_source = random.Random(time.time_ns())
_lock = threading.Lock()


def _next63() -> int:
    """Return a non-negative 63-bit random integer; the caller holds the lock."""
    return _source.getrandbits(63)


def rand_int(min_value: int, max_value: int) -> int:
    """Return a random integer in the closed range between the two bounds.

    The bounds may be given in either order.
    """
    if min_value > max_value:
        min_value, max_value = max_value, min_value
    span = max_value - min_value + 1
    with _lock:
        return min_value + _next63() % span


def rand_int64() -> int:
    """Return a random non-negative 63-bit integer."""
    with _lock:
        return _next63()


def rand_bool() -> bool:
    """Return True or False with equal chance."""
    return rand_int(0, 1) == 0


def _random_text(n: int, alphabet: str) -> str:
    if n <= 0:
        return ""
    size = len(alphabet)
    with _lock:
        return "".join(alphabet[_next63() % size] for _ in range(n))


def rand_string(n: int) -> str:
    """Return ``n`` random characters drawn from digits and ASCII letters."""
    return _random_text(n, LETTER_CHARS)


def rand_hex_string(n: int) -> str:
    """Return ``n`` random characters drawn from ``[0-9a-f]``."""
    return _random_text(n, HEX_CHARS)