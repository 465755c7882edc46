"""Tests for the property utility and the prototype object model.

Critical Invariants:
- Members default to read-only, non-enumerable, non-configurable
- Non-configurable properties cannot be loosened or change value when read-only
- Reads walk the chain; writes never touch the prototype
- Malformed descriptors raise InvalidDescriptorError
"""

import pytest

from typekit.core.props import (
    OBJECT_PROTOTYPE,
    Constructor,
    InvalidDescriptorError,
    ObjectType,
    PropertyDescriptor,
    ProtoObject,
    ReadOnlyPropertyError,
    assign,
    create,
    define_properties,
    define_property,
    enumerable_items,
    enumerable_keys,
    get_member,
    get_own_property_descriptor,
    get_prototype_of,
    has_member,
    instance_of,
    own_property_names,
    set_prototype_of,
    to_object,
    with_defaults,
)


@pytest.fixture
def obj():
    """Plain object delegating to the root prototype."""
    return create(OBJECT_PROTOTYPE)


# Descriptor defaults and validation


def test_define_property_defaults_to_locked(obj):
    """CRITICAL: Absent flags default to false.

    Why: Members must be read-only unless a descriptor opts in.
    """
    define_property(obj, "answer", {"value": 42})

    descriptor = get_own_property_descriptor(obj, "answer")
    assert descriptor == PropertyDescriptor(value=42)
    assert obj.answer == 42
    with pytest.raises(ReadOnlyPropertyError):
        obj.answer = 43


def test_assignment_creates_open_property(obj):
    obj.label = "a"

    descriptor = get_own_property_descriptor(obj, "label")
    assert descriptor.writable and descriptor.enumerable and descriptor.configurable


def test_unknown_descriptor_field_rejected(obj):
    with pytest.raises(InvalidDescriptorError, match="unknown field"):
        define_property(obj, "x", {"value": 1, "readonly": True})


def test_mixed_data_and_accessor_rejected(obj):
    with pytest.raises(InvalidDescriptorError, match="cannot both specify"):
        define_property(obj, "x", {"value": 1, "get": lambda this: 2})


def test_non_mapping_descriptor_rejected(obj):
    with pytest.raises(InvalidDescriptorError):
        define_property(obj, "x", 5)


def test_non_callable_getter_rejected(obj):
    with pytest.raises(InvalidDescriptorError, match="get must be callable"):
        define_property(obj, "x", {"get": 5})


def test_invalid_descriptor_is_a_type_error(obj):
    with pytest.raises(TypeError):
        define_property(obj, "x", "nope")


# Redefinition rules


def test_non_configurable_cannot_become_configurable(obj):
    define_property(obj, "x", {"value": 1, "writable": True})

    with pytest.raises(InvalidDescriptorError, match="Cannot redefine property: x"):
        define_property(obj, "x", {"configurable": True})


def test_non_configurable_writable_can_change_value_and_lock(obj):
    define_property(obj, "x", {"value": 1, "writable": True})

    define_property(obj, "x", {"value": 2, "writable": False})

    assert obj.x == 2
    assert get_own_property_descriptor(obj, "x").writable is False


def test_read_only_value_cannot_change(obj):
    define_property(obj, "x", {"value": 1})

    define_property(obj, "x", {"value": 1})  # same value is allowed
    with pytest.raises(InvalidDescriptorError):
        define_property(obj, "x", {"value": 2})
    with pytest.raises(InvalidDescriptorError):
        define_property(obj, "x", {"writable": True})


def test_configurable_property_can_switch_kind(obj):
    define_property(obj, "x", {"value": 1, "configurable": True, "enumerable": True})

    define_property(obj, "x", {"get": lambda this: 10})

    descriptor = get_own_property_descriptor(obj, "x")
    assert descriptor.is_accessor
    assert descriptor.enumerable is True
    assert obj.x == 10


def test_partial_redefinition_keeps_absent_fields(obj):
    define_property(obj, "x", {"value": 1, "writable": True, "configurable": True})

    define_property(obj, "x", {"enumerable": True})

    assert get_own_property_descriptor(obj, "x") == PropertyDescriptor(
        value=1, writable=True, enumerable=True, configurable=True
    )


# Chain semantics


def test_reads_walk_chain_and_writes_shadow():
    """CRITICAL: Assigning through a child never mutates the prototype."""
    parent = create(OBJECT_PROTOTYPE, {"x": {"value": 1, "writable": True}})
    child = create(parent)

    assert child.x == 1
    child.x = 2

    assert child.x == 2
    assert parent.x == 1
    assert own_property_names(child) == ["x"]


def test_inherited_read_only_blocks_assignment():
    parent = create(OBJECT_PROTOTYPE, {"x": {"value": 1}})
    child = create(parent)

    with pytest.raises(ReadOnlyPropertyError, match="read only property 'x'"):
        child.x = 2


def test_missing_member_raises_attribute_error(obj):
    assert not hasattr(obj, "missing")
    assert getattr(obj, "missing", None) is None


def test_accessor_receives_receiver():
    parent = create(
        OBJECT_PROTOTYPE,
        {"double": {"get": lambda this: this.n * 2, "set": lambda this, v: setattr(this, "n", v // 2)}},
    )
    child = create(parent)
    child.n = 3

    assert child.double == 6
    child.double = 10
    assert child.n == 5


def test_getter_only_accessor_rejects_assignment(obj):
    define_property(obj, "x", {"get": lambda this: 1})

    with pytest.raises(ReadOnlyPropertyError, match="only a getter"):
        obj.x = 2


def test_functions_bind_to_receiver():
    proto = create(OBJECT_PROTOTYPE, {"whoami": {"value": lambda this: this.name}})
    a = create(proto)
    a.name = "a"

    assert a.whoami() == "a"
    assert get_member(a, "whoami")(a) == "a"  # unbound read


def test_delete_respects_configurable(obj):
    obj.open = 1
    define_property(obj, "fixed", {"value": 1})

    del obj.open
    assert "open" not in obj
    with pytest.raises(ReadOnlyPropertyError):
        del obj.fixed


def test_enumerable_keys_own_then_inherited_and_hidden():
    parent = create(OBJECT_PROTOTYPE)
    parent.a = 1
    parent.b = 2
    child = create(parent)
    child.c = 3
    define_property(child, "b", {"value": 20})  # non-enumerable shadow

    assert list(enumerable_keys(child)) == ["c", "a"]


def test_set_prototype_of_rejects_cycles():
    a = create(OBJECT_PROTOTYPE)
    b = create(a)

    with pytest.raises(TypeError, match="Cyclic"):
        set_prototype_of(a, b)


def test_root_prototype_constructor_is_object_type():
    assert get_prototype_of(OBJECT_PROTOTYPE) is None
    assert OBJECT_PROTOTYPE.constructor is ObjectType
    assert ObjectType.prototype is OBJECT_PROTOTYPE


# Constructors


def test_constructor_runs_initializer_with_instance():
    def Point(this, x, y=0):
        this.x = x
        this.y = y

    ctor = Constructor(Point)
    p = ctor(1, y=2)

    assert (p.x, p.y) == (1, 2)
    assert get_prototype_of(p) is ctor.prototype
    assert p.constructor is ctor
    assert ctor.name == "Point"
    assert instance_of(p, ctor)
    assert instance_of(p, ObjectType)


def test_initializer_returning_object_replaces_instance():
    replacement = ProtoObject()
    ctor = Constructor(lambda this: replacement)

    assert ctor() is replacement


def test_instance_of_rejects_foreign_values():
    assert not instance_of({"a": 1}, ObjectType)


# Any-source helpers


def test_with_defaults_fills_absent_and_none():
    merged = with_defaults({"key": None, "map": {"a": "b"}}, {"key": ["prototype"], "map": {}})

    assert merged == {"key": ["prototype"], "map": {"a": "b"}}


def test_has_and_get_member_across_source_kinds():
    class Mixin:
        prototype = "p"

    assert has_member({"prototype": 1}, "prototype")
    assert has_member(Mixin, "prototype")
    assert not has_member(object(), "prototype")
    assert get_member(Mixin, "prototype") == "p"
    assert get_member({}, "missing", "default") == "default"
    with pytest.raises(AttributeError):
        get_member({}, "missing")


def test_enumerable_items_of_class_follows_mro():
    class Base:
        def greet(self):
            return "base"

        def wave(self):
            return "wave"

    class Child(Base):
        def greet(self):
            return "child"

        def _private(self):
            return None

    items = dict(enumerable_items(Child))

    assert set(items) == {"greet", "wave"}
    assert items["greet"] is Child.__dict__["greet"]


def test_assign_copies_enumerable_own_members(obj):
    source = create(OBJECT_PROTOTYPE)
    source.a = 1
    define_property(source, "hidden", {"value": 2})

    assign(obj, source, {"b": 3})

    assert obj.a == 1
    assert obj.b == 3
    assert "hidden" not in obj


def test_to_object_coerces_mappings_and_none():
    from_mapping = to_object({"a": 1})
    from_none = to_object(None)

    assert from_mapping.a == 1
    assert get_prototype_of(from_mapping) is OBJECT_PROTOTYPE
    assert own_property_names(from_none) == []
    assert to_object(from_mapping) is from_mapping


def test_define_properties_applies_all(obj):
    define_properties(obj, {"a": {"value": 1}, "b": PropertyDescriptor(value=2, enumerable=True)})

    assert (obj.a, obj.b) == (1, 2)
    assert list(enumerable_keys(obj)) == ["b"]
