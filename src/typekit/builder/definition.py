"""Type definitions: chainable inheritance, mixin and member declarations.

Usage:
    def Shape(this):
        this.uid = Shape.uid
        Shape.uid += 1

    Shape = typedef(Shape).implements({
        "uid": {"static": 0, "writable": True},
        "get_uid": lambda this: this.uid,
    }).identity

    Circle = typedef(lambda this, r: setattr(this, "r", r)).extends(Shape).identity

    # Copy mixin members onto the prototype
    Named = typedef(Circle).copies([{"label": "circle"}], {"key": []})
"""

from __future__ import annotations

import warnings
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from typekit.core.member import (
    COPY_DEFAULTS,
    STATIC_MARKERS,
    ClassMember,
    CopyOptions,
    parse_member,
    resolve_copy_options,
)
from typekit.core.props import (
    OBJECT_PROTOTYPE,
    Constructor,
    ObjectType,
    ProtoObject,
    create,
    define_properties,
    define_property,
    enumerable_items,
    get_member,
    get_own_property_descriptor,
    has_member,
    own_property_names,
    set_property,
    to_object,
)

if TYPE_CHECKING:
    from typekit.config import TypeKitSettings

_UNSET: Any = object()


def _synthesize(template: Any) -> tuple[Constructor, Any]:
    """Build an auto-instantiating constructor from a non-callable template.

    A fresh prototype delegates to the template (coerced to an object), which
    is left untouched. The template's `constructor` member (if any) becomes
    the default supertype.
    """
    template = to_object(template)
    supertype = get_member(template, "constructor", ObjectType)
    if not isinstance(supertype, ProtoObject):
        supertype = ObjectType
    return Constructor(prototype=create(template)), supertype


def _unwrap(value: Any) -> Any:
    """Replace a TypeDefinition with the constructor it defines."""
    if isinstance(value, TypeDefinition):
        return value.identity
    return value


class TypeDefinition:
    """Chainable definition of a single type.

    Wraps exactly one constructor (`identity`). `extends` rewires the chain,
    `copies` mixes members into the prototype and `implements` defines static
    and instance members. Every method returns the definition itself.

    Args:
        constructor: Constructor to define, TypeDefinition to reuse, any other
            callable (used as initializer), or a non-callable template.
        settings: Optional TypeKitSettings overriding copy keys, static markers
            and overlap warnings.
    """

    __slots__ = ("_identity", "_copy_defaults", "_markers", "_warn_on_overlap")

    def __init__(self, constructor: Any, *, settings: TypeKitSettings | None = None) -> None:
        supertype: Any = ObjectType
        if isinstance(constructor, TypeDefinition):
            identity = constructor.identity
        elif isinstance(constructor, Constructor):
            identity = constructor
        elif callable(constructor):
            identity = Constructor(constructor)
        else:
            identity, supertype = _synthesize(constructor)

        # A constructor that already went through extends keeps its chain
        if get_own_property_descriptor(identity, "supertype") is None:
            define_properties(
                identity,
                {
                    "superprototype": {
                        "value": get_member(supertype, "prototype", OBJECT_PROTOTYPE),
                        "writable": True,
                        "configurable": True,
                    },
                    "supertype": {"value": supertype, "writable": True, "configurable": True},
                },
            )

        self._identity = identity
        if settings is None:
            self._copy_defaults = COPY_DEFAULTS
            self._markers: tuple[str, ...] = STATIC_MARKERS
            self._warn_on_overlap = True
        else:
            self._copy_defaults = CopyOptions(key=tuple(settings.copy_keys))
            self._markers = tuple(settings.static_markers)
            self._warn_on_overlap = settings.warn_on_overlap

    @property
    def identity(self) -> Constructor:
        """The constructor being defined."""
        return self._identity

    def copies(self, sources: Iterable[Any], options: Any = None) -> TypeDefinition:
        """Copy members from one or more sources onto the prototype.

        Args:
            sources: Mixins (ProtoObjects, constructors, mappings, classes or
                plain objects). Later sources overwrite earlier ones.
            options: Partial CopyOptions or mapping with `key` (candidate names
                to redirect each source through, first match wins; `[]` copies
                the source itself) and `map` (source name -> destination name).

        Returns:
            This definition for chaining.
        """
        opts = resolve_copy_options(options, self._copy_defaults)
        prototype = get_member(self._identity, "prototype")
        contributed: set[str] = set()

        for source in sources:
            source = _unwrap(source)
            resolved = source
            for key in opts.key:
                if has_member(source, key):
                    resolved = get_member(source, key)
                    break

            written: set[str] = set()
            for name, value in list(enumerable_items(resolved)):
                target = opts.map.get(name) or name
                if self._warn_on_overlap and target in contributed and target not in written:
                    warnings.warn(
                        f"copies() received member '{target}' from multiple sources. "
                        f"Only the last one will be kept.",
                        stacklevel=2,
                    )
                written.add(target)
                set_property(prototype, target, value)
            contributed |= written

        return self

    def extends(self, supertype: Any) -> TypeDefinition:
        """Inherit members from `supertype`.

        The prototype is rebuilt to delegate to `supertype.prototype` (or to
        `supertype` itself when it has none). Own members already on the old
        prototype are carried over with their exact descriptors, so `extends`
        may come before or after `implements`/`copies`. May be called again to
        re-resolve the chain.

        A mapping or plain Python object supertype is coerced with `to_object`
        first, so the chain links to a snapshot of its members: later changes
        to the mapping or class are not seen, and `supertype` records the
        original value while the prototype delegates to the snapshot.

        Args:
            supertype: Constructor, TypeDefinition, ProtoObject to delegate to
                directly, or a mapping/plain object to snapshot.

        Returns:
            This definition for chaining.
        """
        supertype = _unwrap(supertype)
        subtype = self._identity
        super_proto = get_member(supertype, "prototype", None)
        if not isinstance(super_proto, ProtoObject):
            super_proto = None
        prototype = create(super_proto if super_proto is not None else to_object(supertype))

        current = get_member(subtype, "prototype")
        for name in own_property_names(current):
            define_property(prototype, name, get_own_property_descriptor(current, name))

        set_property(prototype, "constructor", subtype)

        define_properties(
            subtype,
            {
                "constructor": {"value": subtype, "writable": False},
                "superprototype": {"value": super_proto, "writable": False},
                "prototype": {"value": prototype, "writable": False},
                "supertype": {"value": supertype, "writable": False},
            },
        )
        return self

    def _define(self, name: str, descriptor: Any) -> None:
        """Define one member on the constructor (static) or the prototype."""
        member = parse_member(name, descriptor, self._markers)
        if isinstance(member, ClassMember):
            define_property(self._identity, member.name, member.record)
        else:
            define_property(get_member(self._identity, "prototype"), member.name, member.record)

    def implements(self, descriptors: Any, descriptor: Any = _UNSET) -> TypeDefinition:
        """Define static and instance members.

        Members are read-only, non-enumerable and non-configurable unless the
        descriptor says otherwise. A descriptor carrying a static marker
        (`cls`, `classvar` or `static`) defines a class-level member whose
        value is the marker's value.

        Example:
            typedef(Bicycle).implements({
                "count": {"static": 0, "writable": True},   # static field
                "describe": {"static": lambda cls: cls.name},  # static method
                "get_gears": lambda this: this.gears,       # instance method
            })

        Args:
            descriptors: Mapping (or ProtoObject) of name -> descriptor, or a
                single member name when `descriptor` is given.
            descriptor: Descriptor for the single-member form.

        Returns:
            This definition for chaining.
        """
        if descriptor is _UNSET:
            for name, entry in list(enumerable_items(descriptors)):
                self._define(name, entry)
        else:
            self._define(descriptors, descriptor)
        return self

    def value_of(self) -> Constructor:
        """Return the constructor being defined (same object as `identity`)."""
        return self._identity

    def to_string(self) -> str:
        return str(self)

    def __call__(self, *args: Any, **kwargs: Any) -> ProtoObject:
        return self._identity(*args, **kwargs)

    def __str__(self) -> str:
        name = get_member(self._identity, "name", "") or type(self._identity).__name__
        return f"[Type: {name}]"

    def __repr__(self) -> str:
        return f"<TypeDefinition {self._identity!r}>"

    # Imperative spellings of the fluent methods
    extend = extends
    copy = copies
    implement = implements


def typedef(constructor: Any, *, settings: TypeKitSettings | None = None) -> TypeDefinition:
    """Start a chainable type definition.

    Args:
        constructor: Constructor, initializer callable, or non-callable template.
        settings: Optional TypeKitSettings.

    Returns:
        TypeDefinition wrapping the constructor.
    """
    return TypeDefinition(constructor, settings=settings)
