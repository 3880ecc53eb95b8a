"""A timestamp that serializes as ``YYYY-MM-DD HH:MM:SS`` and maps to database values."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone

__all__ = ["Time", "to_time", "now"]

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_PATTERN = re.compile(
    r"(\d{4})-(\d{2})-(\d{2}) (\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?"
)


def _same_instant(left: datetime, right: datetime) -> bool:
    if left.tzinfo is None:
        left = left.replace(tzinfo=timezone.utc)
    return left == right


@dataclass(frozen=True)
class Time:
    """A point in time with a fixed text form."""

    moment: datetime = _ZERO_TIME

    def __str__(self) -> str:
        m = self.moment
        return (
            f"{m.year:04d}-{m.month:02d}-{m.day:02d} "
            f"{m.hour:02d}:{m.minute:02d}:{m.second:02d}"
        )

    def to_json(self) -> bytes:
        """Return the JSON string form, quoted."""
        return f'"{self}"'.encode("ascii")

    def value(self) -> datetime | None:
        """Return the value to store in a database; None for the zero time."""
        if _same_instant(self.moment, _ZERO_TIME):
            return None
        return self.moment

    @classmethod
    def scan(cls, value: object) -> Time:
        """Build a Time from a database value; raises TypeError for non-datetimes."""
        if isinstance(value, datetime):
            return cls(moment=value)
        raise TypeError(f"can not convert {value!r} to timestamp")


def to_time(text: str) -> Time:
    """Parse ``YYYY-MM-DD HH:MM:SS`` in the local time zone.

    Raises ValueError when the text does not match or names an impossible date.
    """
    match = _PATTERN.fullmatch(text)
    if match is None:
        raise ValueError(f"cannot parse {text!r} as a time")
    year, month, day, hour, minute, second = (int(part) for part in match.groups()[:6])
    fraction = match.group(7) or ""
    microsecond = int(fraction[:6].ljust(6, "0")) if fraction else 0
    naive = datetime(year, month, day, hour, minute, second, microsecond)
    return Time(moment=naive.astimezone())


def now() -> Time:
    """Return the current local time."""
    return Time(moment=datetime.now().astimezone())