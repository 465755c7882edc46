"""Member placement and mixin copy options."""

from typekit.core.member.models import (
    COPY_DEFAULTS,
    STATIC_MARKERS,
    ClassMember,
    CopyOptions,
    InstanceMember,
    MemberSpec,
)
from typekit.core.member.operations import (
    is_descriptor_record,
    parse_member,
    resolve_copy_options,
)

__all__ = [
    "COPY_DEFAULTS",
    "STATIC_MARKERS",
    "ClassMember",
    "CopyOptions",
    "InstanceMember",
    "MemberSpec",
    "is_descriptor_record",
    "parse_member",
    "resolve_copy_options",
]
