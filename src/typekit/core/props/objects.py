"""Prototype objects: member tables linked into delegation chains.

Usage:
    point = create(OBJECT_PROTOTYPE)
    point.x = 1                       # own, writable, enumerable property
    define_property(point, "origin", {"value": (0, 0)})
    point.origin = (1, 1)             # ReadOnlyPropertyError

    def Point(this, x):
        this.x = x

    ctor = Constructor(Point)
    p = ctor(3)                       # get_prototype_of(p) is ctor.prototype
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from typekit.core.props.operations import (
    define_property,
    delete_property,
    enumerable_keys,
    get_member,
    get_property,
    has_property,
    set_property,
)


class ProtoObject:
    """Object with an own property table and a prototype link.

    Attribute syntax maps onto the property operations: reads walk the
    chain, writes go through `set_property`, deletes through
    `delete_property`. Dunder names are never treated as properties.
    """

    __slots__ = ("_props", "_proto", "__weakref__")

    def __init__(
        self, proto: ProtoObject | None = None, members: Mapping[str, Any] | None = None
    ) -> None:
        object.__setattr__(self, "_props", {})
        object.__setattr__(self, "_proto", proto)
        if members:
            for name, value in members.items():
                set_property(self, name, value)

    def __getattr__(self, name: str) -> Any:
        if name in ProtoObject.__slots__ or (name.startswith("__") and name.endswith("__")):
            raise AttributeError(name)
        return get_property(self, name)

    def __setattr__(self, name: str, value: Any) -> None:
        set_property(self, name, value)

    def __delattr__(self, name: str) -> None:
        delete_property(self, name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and has_property(self, name)

    def __dir__(self) -> list[str]:
        names: set[str] = set()
        current: ProtoObject | None = self
        while current is not None:
            names.update(current._props)
            current = current._proto
        return sorted(names)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {{{', '.join(enumerable_keys(self))}}}>"


# Root of every chain; its `constructor` is attached once ObjectType exists
OBJECT_PROTOTYPE = ProtoObject()


class Constructor(ProtoObject):
    """Callable type identity.

    Calling a constructor creates an object delegating to its `prototype` and
    runs the initializer with that object as `this`. An initializer returning a
    ProtoObject replaces the fresh instance.

    Args:
        init: Initializer `init(this, *args, **kwargs)`, or None for no-op.
        name: Display name; defaults to the initializer's `__name__`.
        prototype: Prototype to use instead of a fresh one delegating to
            OBJECT_PROTOTYPE.
    """

    __slots__ = ("_init",)

    def __init__(
        self,
        init: Callable[..., Any] | None = None,
        *,
        name: str | None = None,
        prototype: ProtoObject | None = None,
    ) -> None:
        super().__init__(OBJECT_PROTOTYPE)
        object.__setattr__(self, "_init", init)
        if name is None:
            name = getattr(init, "__name__", "") or ""
        define_property(self, "name", {"value": name, "configurable": True})

        if prototype is None:
            prototype = ProtoObject(OBJECT_PROTOTYPE)
        define_property(prototype, "constructor", {"value": self, "writable": True, "configurable": True})
        define_property(self, "prototype", {"value": prototype, "writable": True, "configurable": True})

    def __call__(self, *args: Any, **kwargs: Any) -> ProtoObject:
        instance = ProtoObject(get_member(self, "prototype", None))
        if self._init is not None:
            result = self._init(instance, *args, **kwargs)
            if isinstance(result, ProtoObject):
                return result
        return instance

    def __repr__(self) -> str:
        name = get_member(self, "name", "")
        return f"<Constructor {name}>" if name else "<Constructor>"


ObjectType = Constructor(name="Object", prototype=OBJECT_PROTOTYPE)
"""Universal base type: the default supertype of every definition."""
