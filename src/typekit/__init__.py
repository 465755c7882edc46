"""typekit: prototype-based type definitions through a chainable builder.

Usage:
    from typekit import typedef

    def Shape(this):
        this.uid = Shape.uid
        Shape.uid += 1

    Shape = typedef(Shape).implements({
        "uid": {"static": 0, "writable": True},
        "get_uid": lambda this: this.uid,
    }).identity

    def Circle(this, radius):
        this.radius = radius

    Circle = typedef(Circle).extends(Shape).identity

    circle = Circle(2.0)
    circle.get_uid()          # resolved through Circle.prototype -> Shape.prototype
"""

__version__ = "0.1.0"

# Builder
from typekit.builder import TypeDefinition, typedef

# Object model
from typekit.core import (
    OBJECT_PROTOTYPE,
    ClassMember,
    Constructor,
    CopyOptions,
    InstanceMember,
    InvalidDescriptorError,
    MemberSpec,
    ObjectType,
    PropertyDescriptor,
    ProtoObject,
    ReadOnlyPropertyError,
    get_prototype_of,
    instance_of,
)

__all__ = [
    # Version
    "__version__",
    # Builder
    "typedef",
    "TypeDefinition",
    # Object model
    "ProtoObject",
    "Constructor",
    "ObjectType",
    "OBJECT_PROTOTYPE",
    "PropertyDescriptor",
    "get_prototype_of",
    "instance_of",
    # Members
    "MemberSpec",
    "InstanceMember",
    "ClassMember",
    "CopyOptions",
    # Errors
    "InvalidDescriptorError",
    "ReadOnlyPropertyError",
]
