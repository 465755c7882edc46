"""Core functionalities: the prototype object model and member resolution.

Architecture Note:
    core/ contains the object model and pure functions over it. The chainable
    builder that drives them lives in builder/.
"""

from typekit.core.member import (
    COPY_DEFAULTS,
    STATIC_MARKERS,
    ClassMember,
    CopyOptions,
    InstanceMember,
    MemberSpec,
    parse_member,
    resolve_copy_options,
)
from typekit.core.props import (
    OBJECT_PROTOTYPE,
    Constructor,
    InvalidDescriptorError,
    ObjectType,
    PropertyDescriptor,
    ProtoObject,
    ReadOnlyPropertyError,
    create,
    define_properties,
    define_property,
    get_own_property_descriptor,
    get_prototype_of,
    instance_of,
    own_property_names,
)

__all__ = [
    # Objects
    "ProtoObject",
    "Constructor",
    "ObjectType",
    "OBJECT_PROTOTYPE",
    "PropertyDescriptor",
    "InvalidDescriptorError",
    "ReadOnlyPropertyError",
    "create",
    "define_property",
    "define_properties",
    "get_own_property_descriptor",
    "get_prototype_of",
    "instance_of",
    "own_property_names",
    # Members
    "MemberSpec",
    "InstanceMember",
    "ClassMember",
    "CopyOptions",
    "COPY_DEFAULTS",
    "STATIC_MARKERS",
    "parse_member",
    "resolve_copy_options",
]
