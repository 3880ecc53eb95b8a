"""Operators relating a key or field to its values in a selector."""

from __future__ import annotations

import enum

__all__ = ["Operator"]


class Operator(str, enum.Enum):
    """A key's relationship to one or more values."""

    DOES_NOT_EXIST = "!"
    EQUALS = "="
    DOUBLE_EQUALS = "=="
    IN = "in"
    NOT_EQUALS = "!="
    NOT_IN = "notin"
    EXISTS = "exists"
    GREATER_THAN = "gt"
    LESS_THAN = "lt"

    def __str__(self) -> str:
        return self.value