"""Metadata types shared by all API objects: type, list and object metadata, and request options.

The types fall into two groups: serialized metadata that has no version of
its own (such as ``TypeMeta``), and option records used by many API groups.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from corekit.scheme import GroupVersionKind, ObjectKind, from_api_version_and_kind

__all__ = [
    "Extend",
    "TypeMeta",
    "ListMeta",
    "ObjectMeta",
    "ListOptions",
    "ExportOptions",
    "GetOptions",
    "DeleteOptions",
    "CreateOptions",
    "PatchOptions",
    "UpdateOptions",
    "AuthorizeOptions",
    "TableOptions",
]

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


def _dumps(value: Any) -> str:
    return json.dumps(
        value,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )


def _loads(text: str) -> Any:
    return json.loads(text, parse_int=float)


def _format_time(moment: datetime) -> str:
    """Format a datetime as RFC 3339 with trailing fractional zeros removed."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    text = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    if moment.microsecond:
        text += "." + f"{moment.microsecond:06d}".rstrip("0")
    offset = moment.utcoffset()
    if not offset:
        return text + "Z"
    total = int(offset.total_seconds())
    sign = "+" if total >= 0 else "-"
    hours, minutes = divmod(abs(total) // 60, 60)
    return f"{text}{sign}{hours:02d}:{minutes:02d}"


class Extend(dict):
    """Extra fields stored alongside an object without a column of their own."""

    def __str__(self) -> str:
        try:
            return _dumps(self)
        except (TypeError, ValueError):
            return ""

    def merge(self, extend_shadow: str) -> Extend:
        """Add the fields of a JSON shadow that this mapping does not yet have.

        An unreadable shadow is ignored. Returns this mapping.
        """
        try:
            shadow = _loads(extend_shadow)
        except ValueError:
            shadow = None
        if isinstance(shadow, dict):
            for key, value in shadow.items():
                self.setdefault(key, value)
        return self


def _extend_text(extend: Extend | None) -> str:
    if extend is None:
        return "null"
    return str(Extend(extend))


@dataclass
class TypeMeta(ObjectKind):
    """The kind and API version of an object in a request or response."""

    kind: str = ""
    api_version: str = ""

    def set_group_version_kind(self, gvk: GroupVersionKind) -> None:
        self.api_version, self.kind = gvk.to_api_version_and_kind()

    def group_version_kind(self) -> GroupVersionKind:
        return from_api_version_and_kind(self.api_version, self.kind)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, leaving out empty fields."""
        data: dict[str, Any] = {}
        if self.kind:
            data["kind"] = self.kind
        if self.api_version:
            data["apiVersion"] = self.api_version
        return data


@dataclass
class ListMeta:
    """Metadata of list responses."""

    total_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, leaving out a zero count."""
        if self.total_count:
            return {"totalCount": self.total_count}
        return {}


@dataclass
class ObjectMeta:
    """Metadata every persisted resource carries."""

    id: int = 0
    instance_id: str = ""
    name: str = ""
    extend: Extend | None = None
    extend_shadow: str = ""
    created_at: datetime = _ZERO_TIME
    updated_at: datetime = _ZERO_TIME

    def before_create(self) -> None:
        """Store the extended fields in their shadow before a record is created."""
        self.extend_shadow = _extend_text(self.extend)

    def before_update(self) -> None:
        """Store the extended fields in their shadow before a record is updated."""
        self.extend_shadow = _extend_text(self.extend)

    def after_find(self) -> None:
        """Restore the extended fields from their shadow after a record is read.

        Raises ValueError when the shadow is not a JSON object or null.
        """
        decoded = _loads(self.extend_shadow)
        if decoded is None:
            self.extend = None
            return
        if not isinstance(decoded, dict):
            raise ValueError(f"cannot decode JSON {type(decoded).__name__} into extend fields")
        if self.extend is None:
            self.extend = Extend()
        self.extend.update(decoded)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form; the shadow is never included."""
        data: dict[str, Any] = {}
        if self.id:
            data["id"] = self.id
        if self.instance_id:
            data["instanceID"] = self.instance_id
        if self.name:
            data["name"] = self.name
        if self.extend:
            data["extend"] = dict(self.extend)
        data["createdAt"] = _format_time(self.created_at)
        data["updatedAt"] = _format_time(self.updated_at)
        return data


@dataclass
class ListOptions(TypeMeta):
    """Query options of a list call."""

    label_selector: str = ""
    field_selector: str = ""
    timeout_seconds: int | None = None
    offset: int | None = None
    limit: int | None = None

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.label_selector:
            data["labelSelector"] = self.label_selector
        if self.field_selector:
            data["fieldSelector"] = self.field_selector
        if self.timeout_seconds is not None:
            data["timeoutSeconds"] = self.timeout_seconds
        if self.offset is not None:
            data["offset"] = self.offset
        if self.limit is not None:
            data["limit"] = self.limit
        return data


@dataclass
class ExportOptions(TypeMeta):
    """Query options of an export get call (deprecated)."""

    export: bool = False
    exact: bool = False

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["export"] = self.export
        data["exact"] = self.exact
        return data


@dataclass
class GetOptions(TypeMeta):
    """Query options of a get call."""


@dataclass
class DeleteOptions(TypeMeta):
    """Options of a delete call."""

    unscoped: bool = False

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["unscoped"] = self.unscoped
        return data


@dataclass
class CreateOptions(TypeMeta):
    """Options of a create call."""

    dry_run: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.dry_run:
            data["dryRun"] = list(self.dry_run)
        return data


@dataclass
class PatchOptions(TypeMeta):
    """Options of a patch call."""

    dry_run: list[str] = field(default_factory=list)
    force: bool = False

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.dry_run:
            data["dryRun"] = list(self.dry_run)
        if self.force:
            data["force"] = self.force
        return data


@dataclass
class UpdateOptions(TypeMeta):
    """Options of an update call."""

    dry_run: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.dry_run:
            data["dryRun"] = list(self.dry_run)
        return data


@dataclass
class AuthorizeOptions(TypeMeta):
    """Options of an authorize call."""


@dataclass
class TableOptions(TypeMeta):
    """Options used when a table is requested; ``no_headers`` is never serialized."""

    no_headers: bool = False