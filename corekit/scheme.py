"""Group, version, kind and resource identifiers for API objects."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Iterable, Sequence

__all__ = [
    "GroupResource",
    "GroupVersionResource",
    "GroupKind",
    "GroupVersionKind",
    "GroupVersion",
    "GroupVersions",
    "ObjectKind",
    "EmptyObjectKind",
    "EMPTY_OBJECT_KIND",
    "parse_resource_arg",
    "parse_kind_arg",
    "parse_group_kind",
    "parse_group_resource",
    "parse_group_version",
    "from_api_version_and_kind",
]


@dataclass(frozen=True)
class GroupResource:
    """A group and a resource, without a version."""

    group: str = ""
    resource: str = ""

    def with_version(self, version: str) -> GroupVersionResource:
        return GroupVersionResource(group=self.group, version=version, resource=self.resource)

    def empty(self) -> bool:
        return not self.group and not self.resource

    def __str__(self) -> str:
        if not self.group:
            return self.resource
        return f"{self.resource}.{self.group}"


@dataclass(frozen=True)
class GroupVersionResource:
    """A resource identified by group, version and name."""

    group: str = ""
    version: str = ""
    resource: str = ""

    def empty(self) -> bool:
        return not self.group and not self.version and not self.resource

    def group_resource(self) -> GroupResource:
        return GroupResource(group=self.group, resource=self.resource)

    def group_version(self) -> GroupVersion:
        return GroupVersion(group=self.group, version=self.version)

    def __str__(self) -> str:
        return f"{self.group}/{self.version}, Resource={self.resource}"


@dataclass(frozen=True)
class GroupKind:
    """A group and a kind, without a version."""

    group: str = ""
    kind: str = ""

    def empty(self) -> bool:
        return not self.group and not self.kind

    def with_version(self, version: str) -> GroupVersionKind:
        return GroupVersionKind(group=self.group, version=version, kind=self.kind)

    def __str__(self) -> str:
        if not self.group:
            return self.kind
        return f"{self.kind}.{self.group}"


@dataclass(frozen=True)
class GroupVersionKind:
    """A kind identified by group, version and name."""

    group: str = ""
    version: str = ""
    kind: str = ""

    def empty(self) -> bool:
        return not self.group and not self.version and not self.kind

    def group_kind(self) -> GroupKind:
        return GroupKind(group=self.group, kind=self.kind)

    def group_version(self) -> GroupVersion:
        return GroupVersion(group=self.group, version=self.version)

    def to_api_version_and_kind(self) -> tuple[str, str]:
        """Return the ``apiVersion`` string and the kind; both empty when empty."""
        if self.empty():
            return "", ""
        return str(self.group_version()), self.kind

    def __str__(self) -> str:
        return f"{self.group}/{self.version}, Kind={self.kind}"


@dataclass(frozen=True)
class GroupVersion:
    """A group and a version, which together identify an API."""

    group: str = ""
    version: str = ""

    def empty(self) -> bool:
        return not self.group and not self.version

    def __str__(self) -> str:
        if self.group:
            return f"{self.group}/{self.version}"
        return self.version

    def identifier(self) -> str:
        return str(self)

    def kind_for_group_version_kinds(
        self, kinds: Iterable[GroupVersionKind]
    ) -> GroupVersionKind | None:
        """Pick the preferred kind: an exact group and version match first, then a group match.

        Returns None when no kind shares this group.
        """
        kinds = list(kinds)
        for gvk in kinds:
            if gvk.group == self.group and gvk.version == self.version:
                return gvk
        for gvk in kinds:
            if gvk.group == self.group:
                return self.with_kind(gvk.kind)
        return None

    def with_kind(self, kind: str) -> GroupVersionKind:
        return GroupVersionKind(group=self.group, version=self.version, kind=kind)

    def with_resource(self, resource: str) -> GroupVersionResource:
        return GroupVersionResource(group=self.group, version=self.version, resource=resource)


class GroupVersions(tuple):
    """An ordered set of desired group versions."""

    def __new__(cls, versions: Iterable[GroupVersion] = ()) -> GroupVersions:
        return super().__new__(cls, versions)

    def identifier(self) -> str:
        return "[" + ",".join(str(gv) for gv in self) + "]"

    def kind_for_group_version_kinds(
        self, kinds: Iterable[GroupVersionKind]
    ) -> GroupVersionKind | None:
        """Pick the preferred kind across all group versions, or None if none match."""
        kinds = list(kinds)
        targets = [
            target
            for target in (gv.kind_for_group_version_kinds(kinds) for gv in self)
            if target is not None
        ]
        if not targets:
            return None
        if len(targets) == 1:
            return targets[0]
        return _best_match(kinds, targets)


def _best_match(
    kinds: Sequence[GroupVersionKind], targets: Sequence[GroupVersionKind]
) -> GroupVersionKind:
    for target in targets:
        if target in kinds:
            return target
    return targets[0]


class ObjectKind(abc.ABC):
    """Carries the serialized group, version and kind of an object."""

    @abc.abstractmethod
    def set_group_version_kind(self, gvk: GroupVersionKind) -> None:
        """Set or clear the intended serialized kind."""

    @abc.abstractmethod
    def group_version_kind(self) -> GroupVersionKind:
        """Return the stored group, version and kind."""


class EmptyObjectKind(ObjectKind):
    """An object kind that stores nothing."""

    def set_group_version_kind(self, gvk: GroupVersionKind) -> None:
        return None

    def group_version_kind(self) -> GroupVersionKind:
        return GroupVersionKind()


EMPTY_OBJECT_KIND = EmptyObjectKind()


def parse_resource_arg(arg: str) -> tuple[GroupVersionResource | None, GroupResource]:
    """Read ``resource.group.com`` or ``resource.version.group.com`` both ways.

    The first element is None unless the argument has at least two dots.
    """
    gvr = None
    if arg.count(".") >= 2:
        resource, version, group = arg.split(".", 2)
        gvr = GroupVersionResource(group=group, version=version, resource=resource)
    return gvr, parse_group_resource(arg)


def parse_kind_arg(arg: str) -> tuple[GroupVersionKind | None, GroupKind]:
    """Read ``Kind.group.com`` or ``Kind.version.group.com`` both ways.

    The first element is None unless the argument has at least two dots.
    """
    gvk = None
    if arg.count(".") >= 2:
        kind, version, group = arg.split(".", 2)
        gvk = GroupVersionKind(group=group, version=version, kind=kind)
    return gvk, parse_group_kind(arg)


def parse_group_kind(gk: str) -> GroupKind:
    """Split ``kind.group`` at the first dot."""
    kind, sep, group = gk.partition(".")
    if not sep:
        return GroupKind(kind=gk)
    return GroupKind(group=group, kind=kind)


def parse_group_resource(gr: str) -> GroupResource:
    """Split ``resource.group`` at the first dot."""
    resource, sep, group = gr.partition(".")
    if not sep:
        return GroupResource(resource=gr)
    return GroupResource(group=group, resource=resource)


def parse_group_version(gv: str) -> GroupVersion:
    """Parse ``group/version`` or a bare ``version``.

    Raises ValueError when the string holds more than one slash.
    """
    if not gv or gv == "/":
        return GroupVersion()
    slashes = gv.count("/")
    if slashes == 0:
        return GroupVersion(group="", version=gv)
    if slashes == 1:
        group, _, version = gv.partition("/")
        return GroupVersion(group=group, version=version)
    raise ValueError(f"unexpected GroupVersion string: {gv}")


def from_api_version_and_kind(api_version: str, kind: str) -> GroupVersionKind:
    """Build a kind from an ``apiVersion`` string; an unparsable one is dropped."""
    try:
        gv = parse_group_version(api_version)
    except ValueError:
        return GroupVersionKind(kind=kind)
    return GroupVersionKind(group=gv.group, version=gv.version, kind=kind)