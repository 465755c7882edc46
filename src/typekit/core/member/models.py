"""Member models: how a definition entry is placed and how mixins are copied.

A definition entry resolves to exactly one MemberSpec variant at definition
time: InstanceMember lands on the prototype, ClassMember on the constructor.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

STATIC_MARKERS: tuple[str, ...] = ("cls", "classvar", "static")
"""Descriptor keys that turn an entry into a class-level member, in priority order."""


@dataclass(frozen=True, slots=True)
class InstanceMember:
    """Member defined on the prototype, shared by instances until shadowed."""

    name: str
    record: Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class ClassMember:
    """Member defined once on the constructor itself."""

    name: str
    record: Mapping[str, Any]


type MemberSpec = InstanceMember | ClassMember
"""Placement of a single definition entry."""


@dataclass(frozen=True, slots=True)
class CopyOptions:
    """Options for copying mixin members onto a prototype.

    Attributes:
        key: Candidate member names to redirect each source through; the first
            one present wins. Empty means copy from the source itself.
        map: Source member name -> destination member name.
    """

    key: tuple[str, ...] = ("prototype",)
    map: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))


COPY_DEFAULTS = CopyOptions()
"""Default copy options: redirect through `prototype`, no renaming."""
