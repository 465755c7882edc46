"""Property utility: descriptors, prototype objects and their operations."""

from typekit.core.props.models import (
    DESCRIPTOR_FIELDS,
    InvalidDescriptorError,
    PropertyDescriptor,
    ReadOnlyPropertyError,
    normalize_descriptor,
)
from typekit.core.props.objects import OBJECT_PROTOTYPE, Constructor, ObjectType, ProtoObject
from typekit.core.props.operations import (
    assign,
    create,
    define_properties,
    define_property,
    delete_property,
    enumerable_items,
    enumerable_keys,
    get_member,
    get_own_property_descriptor,
    get_property,
    get_prototype_of,
    has_member,
    has_property,
    instance_of,
    own_property_names,
    set_property,
    set_prototype_of,
    to_object,
    with_defaults,
)

__all__ = [
    # Models
    "DESCRIPTOR_FIELDS",
    "PropertyDescriptor",
    "InvalidDescriptorError",
    "ReadOnlyPropertyError",
    "normalize_descriptor",
    # Objects
    "ProtoObject",
    "Constructor",
    "ObjectType",
    "OBJECT_PROTOTYPE",
    # Operations
    "assign",
    "create",
    "define_properties",
    "define_property",
    "delete_property",
    "enumerable_items",
    "enumerable_keys",
    "get_member",
    "get_own_property_descriptor",
    "get_property",
    "get_prototype_of",
    "has_member",
    "has_property",
    "instance_of",
    "own_property_names",
    "set_property",
    "set_prototype_of",
    "to_object",
    "with_defaults",
]
