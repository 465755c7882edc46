"""Pure functions resolving definition entries and copy options."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any

from typekit.core.member.models import (
    COPY_DEFAULTS,
    STATIC_MARKERS,
    ClassMember,
    CopyOptions,
    InstanceMember,
    MemberSpec,
)
from typekit.core.props.models import DESCRIPTOR_FIELDS, PropertyDescriptor
from typekit.core.props.operations import with_defaults


def is_descriptor_record(value: Any, markers: Sequence[str] = STATIC_MARKERS) -> bool:
    """Check whether a definition entry is an annotated descriptor or a plain value.

    A non-empty mapping naming at least one descriptor field or static marker
    is a descriptor record; anything else is a plain value.
    """
    if isinstance(value, PropertyDescriptor):
        return True
    if not isinstance(value, Mapping) or not value:
        return False
    return any(key in DESCRIPTOR_FIELDS or key in markers for key in value)


def parse_member(name: str, value: Any, markers: Sequence[str] = STATIC_MARKERS) -> MemberSpec:
    """Resolve one definition entry to its placement.

    Args:
        name: Member name.
        value: Plain value, PropertyDescriptor, or descriptor mapping possibly
            carrying a static marker.
        markers: Static marker keys, first match wins.

    Returns:
        ClassMember if a marker is present (its value becomes the member value
        and every marker key is stripped), InstanceMember otherwise.
    """
    if isinstance(value, PropertyDescriptor):
        return InstanceMember(name, value.fields())
    if not is_descriptor_record(value, markers):
        return InstanceMember(name, {"value": value})

    record = dict(value)
    marker = next((key for key in markers if key in record), None)
    if marker is None:
        return InstanceMember(name, record)

    record["value"] = record[marker]
    for key in markers:
        record.pop(key, None)
    return ClassMember(name, record)


def resolve_copy_options(options: Any, defaults: CopyOptions = COPY_DEFAULTS) -> CopyOptions:
    """Merge partial copy options onto defaults.

    Malformed fields fall back to the default: a string key becomes a single
    candidate, a non-sequence key or non-mapping map is ignored.
    """
    if not options:
        return defaults
    if isinstance(options, CopyOptions):
        return options
    if not isinstance(options, Mapping):
        return defaults

    merged = with_defaults(options, {"key": defaults.key, "map": defaults.map})
    key = merged["key"]
    if isinstance(key, str):
        key = (key,)
    elif isinstance(key, Sequence):
        key = tuple(str(k) for k in key)
    else:
        key = defaults.key

    rename = merged["map"]
    if not isinstance(rename, Mapping):
        rename = defaults.map

    return CopyOptions(key=key, map=MappingProxyType(dict(rename)))
