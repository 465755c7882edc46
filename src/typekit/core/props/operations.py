"""Property utility: pure functions over the prototype object model.

Every function takes the object it works on as its first argument. Functions
that accept "any source" (`has_member`, `get_member`, `enumerable_items`,
`to_object`) also understand mappings and plain Python objects, so mixins and
templates do not have to be ProtoObjects.
"""

from __future__ import annotations

import inspect
from collections.abc import Iterator, Mapping
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from typekit.core.props.models import (
    ACCESSOR_FIELDS,
    DATA_FIELDS,
    InvalidDescriptorError,
    PropertyDescriptor,
    ReadOnlyPropertyError,
    normalize_descriptor,
    same_value,
)

if TYPE_CHECKING:
    from typekit.core.props.objects import Constructor, ProtoObject


def _is_proto(obj: Any) -> bool:
    # Late import to avoid circular dependency
    from typekit.core.props.objects import ProtoObject

    return isinstance(obj, ProtoObject)


def _lookup(obj: ProtoObject, name: str) -> tuple[PropertyDescriptor | None, ProtoObject | None]:
    """Walk the prototype chain; return (descriptor, owner) or (None, None)."""
    current: ProtoObject | None = obj
    while current is not None:
        descriptor = current._props.get(name)
        if descriptor is not None:
            return descriptor, current
        current = current._proto
    return None, None


def _bind(value: Any, receiver: Any) -> Any:
    """Bind a looked-up value to its receiver the way class attributes bind."""
    binder = getattr(type(value), "__get__", None)
    if binder is None:
        return value
    return binder(value, receiver, type(receiver))


# Chain navigation


def get_prototype_of(obj: ProtoObject) -> ProtoObject | None:
    """Return the object `obj` delegates to, or None at the root."""
    return obj._proto


def set_prototype_of(obj: ProtoObject, proto: ProtoObject | None) -> None:
    """Relink `obj` to delegate to `proto`.

    Raises:
        TypeError: If the new link would make the chain cyclic.
    """
    current = proto
    while current is not None:
        if current is obj:
            raise TypeError("Cyclic prototype chain")
        current = current._proto
    object.__setattr__(obj, "_proto", proto)


def instance_of(obj: Any, constructor: Constructor) -> bool:
    """Check whether `constructor.prototype` appears on the chain of `obj`."""
    if not _is_proto(obj):
        return False
    target = get_member(constructor, "prototype", None)
    current = obj._proto
    while current is not None:
        if current is target:
            return True
        current = current._proto
    return False


# Descriptor primitives


def create(proto: ProtoObject | None, descriptors: Mapping[str, Any] | None = None) -> ProtoObject:
    """Create an object with the given prototype and optional own properties."""
    # Late import to avoid circular dependency
    from typekit.core.props.objects import ProtoObject

    obj = ProtoObject(proto)
    if descriptors:
        define_properties(obj, descriptors)
    return obj


def get_own_property_descriptor(obj: ProtoObject, name: str) -> PropertyDescriptor | None:
    """Fetch the own descriptor for `name`, or None."""
    return obj._props.get(name)


def own_property_names(obj: ProtoObject) -> list[str]:
    """List own property names, enumerable or not, in definition order."""
    return list(obj._props)


def define_property(obj: ProtoObject, name: str, descriptor: Any) -> ProtoObject:
    """Define or redefine a single own property.

    Args:
        obj: Target object.
        name: Property name.
        descriptor: PropertyDescriptor or mapping of descriptor fields. Absent
            fields default to false/None for new properties and are kept when
            redefining.

    Returns:
        The target object.

    Raises:
        InvalidDescriptorError: If the record is malformed or the redefinition
            is not allowed by the current descriptor.
    """
    fields = normalize_descriptor(descriptor)
    current = obj._props.get(name)

    if current is None:
        if fields.keys() & ACCESSOR_FIELDS:
            obj._props[name] = PropertyDescriptor(
                get=fields.get("get"),
                set=fields.get("set"),
                enumerable=fields.get("enumerable", False),
                configurable=fields.get("configurable", False),
            )
        else:
            obj._props[name] = PropertyDescriptor(**fields)
        return obj

    to_accessor = bool(fields.keys() & ACCESSOR_FIELDS)
    to_data = bool(fields.keys() & DATA_FIELDS)
    changes_kind = (to_accessor and not current.is_accessor) or (to_data and current.is_accessor)

    if not current.configurable:
        if fields.get("configurable"):
            raise InvalidDescriptorError(f"Cannot redefine property: {name}")
        if "enumerable" in fields and fields["enumerable"] != current.enumerable:
            raise InvalidDescriptorError(f"Cannot redefine property: {name}")
        if changes_kind:
            raise InvalidDescriptorError(f"Cannot redefine property: {name}")
        if current.is_accessor:
            if ("get" in fields and fields["get"] is not current.get) or (
                "set" in fields and fields["set"] is not current.set
            ):
                raise InvalidDescriptorError(f"Cannot redefine property: {name}")
        elif not current.writable:
            if fields.get("writable"):
                raise InvalidDescriptorError(f"Cannot redefine property: {name}")
            if "value" in fields and not same_value(fields["value"], current.value):
                raise InvalidDescriptorError(f"Cannot redefine property: {name}")

    if changes_kind:
        # Flags survive a kind switch, the rest starts from defaults
        base = PropertyDescriptor(enumerable=current.enumerable, configurable=current.configurable)
        obj._props[name] = replace(base, **fields)
    else:
        obj._props[name] = replace(current, **fields)
    return obj


def define_properties(obj: ProtoObject, descriptors: Mapping[str, Any]) -> ProtoObject:
    """Define several own properties from a name -> descriptor mapping."""
    for name, descriptor in descriptors.items():
        define_property(obj, name, descriptor)
    return obj


# Member access


def has_property(obj: ProtoObject, name: str) -> bool:
    """Check for `name` anywhere on the chain of `obj`."""
    return _lookup(obj, name)[0] is not None


def get_property(obj: ProtoObject, name: str, receiver: Any = None) -> Any:
    """Read `name` through the chain, binding functions to the receiver.

    Raises:
        AttributeError: If no object on the chain defines `name`.
    """
    receiver = obj if receiver is None else receiver
    descriptor, _ = _lookup(obj, name)
    if descriptor is None:
        raise AttributeError(f"{obj!r} has no property {name!r}")
    if descriptor.is_accessor:
        return descriptor.get(receiver) if descriptor.get is not None else None
    return _bind(descriptor.value, receiver)


def set_property(obj: ProtoObject, name: str, value: Any, receiver: ProtoObject | None = None) -> None:
    """Assign `name`: update a writable own slot, otherwise shadow on the receiver.

    Raises:
        ReadOnlyPropertyError: If the property found on the chain is not
            writable, or is an accessor without a setter.
    """
    receiver = obj if receiver is None else receiver
    descriptor, owner = _lookup(obj, name)

    if descriptor is None:
        receiver._props[name] = PropertyDescriptor(
            value=value, writable=True, enumerable=True, configurable=True
        )
    elif descriptor.is_accessor:
        if descriptor.set is None:
            raise ReadOnlyPropertyError(
                f"Cannot set property {name!r} of {receiver!r} which has only a getter"
            )
        descriptor.set(receiver, value)
    elif not descriptor.writable:
        raise ReadOnlyPropertyError(
            f"Cannot assign to read only property {name!r} of {receiver!r}"
        )
    elif owner is receiver:
        receiver._props[name] = replace(descriptor, value=value)
    else:
        receiver._props[name] = PropertyDescriptor(
            value=value, writable=True, enumerable=True, configurable=True
        )


def delete_property(obj: ProtoObject, name: str) -> None:
    """Remove an own property.

    Raises:
        AttributeError: If `obj` has no own property `name`.
        ReadOnlyPropertyError: If the property is not configurable.
    """
    descriptor = obj._props.get(name)
    if descriptor is None:
        raise AttributeError(f"{obj!r} has no own property {name!r}")
    if not descriptor.configurable:
        raise ReadOnlyPropertyError(f"Cannot delete property {name!r} of {obj!r}")
    del obj._props[name]


def enumerable_keys(obj: ProtoObject) -> Iterator[str]:
    """Yield enumerable names, own first then inherited, each name once.

    A non-enumerable own property hides an enumerable inherited one.
    """
    seen: set[str] = set()
    current: ProtoObject | None = obj
    while current is not None:
        for name, descriptor in list(current._props.items()):
            if name in seen:
                continue
            seen.add(name)
            if descriptor.enumerable:
                yield name
        current = current._proto


# Any-source helpers


def has_member(source: Any, name: str) -> bool:
    """`name in source` for ProtoObjects, mappings and plain objects."""
    if _is_proto(source):
        return has_property(source, name)
    if isinstance(source, Mapping):
        return name in source
    try:
        inspect.getattr_static(source, name)
    except AttributeError:
        return False
    return True


def get_member(source: Any, name: str, default: Any = ...) -> Any:
    """Read `name` from any source without binding functions.

    Accessors are still evaluated with `source` as the receiver.

    Raises:
        AttributeError: If the member is missing and no default is given.
    """
    if _is_proto(source):
        descriptor, _ = _lookup(source, name)
        if descriptor is not None:
            if descriptor.is_accessor:
                return descriptor.get(source) if descriptor.get is not None else None
            return descriptor.value
    elif isinstance(source, Mapping):
        if name in source:
            return source[name]
    else:
        try:
            return inspect.getattr_static(source, name)
        except AttributeError:
            pass
    if default is ...:
        raise AttributeError(f"{source!r} has no member {name!r}")
    return default


def enumerable_items(source: Any) -> Iterator[tuple[str, Any]]:
    """Yield (name, unbound value) for every enumerable member of a source.

    ProtoObjects enumerate own and inherited enumerable properties and mappings
    their items. Classes enumerate public attributes along their MRO (minus
    `object`), other objects the public entries of their `__dict__`.
    """
    if _is_proto(source):
        for name in enumerable_keys(source):
            yield name, get_member(source, name)
    elif isinstance(source, Mapping):
        yield from source.items()
    elif isinstance(source, type):
        seen: set[str] = set()
        for klass in source.__mro__:
            if klass is object:
                continue
            for name, value in vars(klass).items():
                if name.startswith("_") or name in seen:
                    continue
                seen.add(name)
                yield name, value
    elif hasattr(source, "__dict__"):
        for name, value in vars(source).items():
            if not name.startswith("_"):
                yield name, value


def assign(target: ProtoObject, *sources: Any) -> ProtoObject:
    """Shallow-copy enumerable own members of each source onto `target`."""
    for source in sources:
        if _is_proto(source):
            for name, descriptor in list(source._props.items()):
                if descriptor.enumerable:
                    set_property(target, name, get_member(source, name))
        else:
            for name, value in enumerable_items(source):
                set_property(target, name, value)
    return target


def with_defaults(options: Mapping[str, Any] | None, defaults: Mapping[str, Any]) -> dict[str, Any]:
    """Merge a partial options record onto defaults.

    Defaults fill in keys that are absent from `options` or set to None.
    """
    merged = dict(defaults)
    if options:
        for name, value in options.items():
            if value is not None:
                merged[name] = value
    return merged


def to_object(value: Any) -> ProtoObject:
    """Coerce a value to a ProtoObject.

    ProtoObjects are returned unchanged; None becomes an empty object; mappings
    and plain objects become objects holding their enumerable members.
    """
    # Late import to avoid circular dependency
    from typekit.core.props.objects import OBJECT_PROTOTYPE, ProtoObject

    if isinstance(value, ProtoObject):
        return value
    return ProtoObject(OBJECT_PROTOTYPE, dict(enumerable_items(value)))
