"""Property models: descriptors and the errors raised while applying them.

A descriptor record is either a `PropertyDescriptor` or a mapping whose keys are
drawn from `DESCRIPTOR_FIELDS`. Records are partial: a field that is absent
keeps its current value when redefining and defaults to false/None otherwise.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

DATA_FIELDS = frozenset({"value", "writable"})
ACCESSOR_FIELDS = frozenset({"get", "set"})
FLAG_FIELDS = frozenset({"enumerable", "configurable"})
DESCRIPTOR_FIELDS = DATA_FIELDS | ACCESSOR_FIELDS | FLAG_FIELDS


class InvalidDescriptorError(TypeError):
    """Raised when a descriptor record is malformed or cannot be applied."""

    pass


class ReadOnlyPropertyError(AttributeError):
    """Raised when assigning a read-only property or deleting a fixed one."""

    pass


@dataclass(frozen=True, slots=True)
class PropertyDescriptor:
    """Complete description of one property slot.

    Data descriptors carry `value` and `writable`; accessor descriptors carry
    `get` and/or `set`. Both kinds carry `enumerable` and `configurable`.
    """

    value: Any = None
    writable: bool = False
    enumerable: bool = False
    configurable: bool = False
    get: Callable[[Any], Any] | None = None
    set: Callable[[Any, Any], None] | None = None

    @property
    def is_accessor(self) -> bool:
        return self.get is not None or self.set is not None

    def fields(self) -> dict[str, Any]:
        """Return the record form of this descriptor (only fields of its kind)."""
        if self.is_accessor:
            return {
                "get": self.get,
                "set": self.set,
                "enumerable": self.enumerable,
                "configurable": self.configurable,
            }
        return {
            "value": self.value,
            "writable": self.writable,
            "enumerable": self.enumerable,
            "configurable": self.configurable,
        }


def normalize_descriptor(record: Any) -> dict[str, Any]:
    """Validate a descriptor record and return its present fields.

    Args:
        record: PropertyDescriptor or mapping of descriptor fields.

    Returns:
        Dict containing only the fields the record specifies, flags coerced to bool.

    Raises:
        InvalidDescriptorError: If the record is not a descriptor, names unknown
            fields, has a non-callable accessor, or mixes data and accessor fields.
    """
    if isinstance(record, PropertyDescriptor):
        return record.fields()
    if not isinstance(record, Mapping):
        raise InvalidDescriptorError(
            f"Property description must be a mapping, got {type(record).__name__}"
        )

    unknown = set(record) - DESCRIPTOR_FIELDS
    if unknown:
        raise InvalidDescriptorError(
            f"Invalid property descriptor: unknown field(s) {sorted(map(str, unknown))}"
        )

    fields: dict[str, Any] = {}
    for name in ("enumerable", "configurable", "writable"):
        if name in record:
            fields[name] = bool(record[name])
    if "value" in record:
        fields["value"] = record["value"]
    for name in ("get", "set"):
        if name in record:
            accessor = record[name]
            if accessor is not None and not callable(accessor):
                raise InvalidDescriptorError(
                    f"Invalid property descriptor: {name} must be callable, "
                    f"got {type(accessor).__name__}"
                )
            fields[name] = accessor

    if fields.keys() & DATA_FIELDS and fields.keys() & ACCESSOR_FIELDS:
        raise InvalidDescriptorError(
            "Invalid property descriptor: cannot both specify accessors "
            "and a value or writable attribute"
        )
    return fields


def same_value(a: Any, b: Any) -> bool:
    """Identity, or equality for values of the same type."""
    if a is b:
        return True
    return type(a) is type(b) and bool(a == b)
