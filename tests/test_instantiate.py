from dataclasses import InitVar, dataclass, field

import pytest

from typeregistry import Reference, TypeRegistry, UnknownTypeError
from sample_types import Color, Counter, Inner, NameType, NeedsArgs, Node, NothingType, Outer


@pytest.mark.parametrize("value, want", [
	(NothingType(), NothingType()),
	(Reference(NothingType()), Reference(NothingType())),
	(Reference(NameType("Hi")), Reference(NameType(""))),
	(NameType("Hi"), NameType("")),
	(5, 0),
	(2.5, 0.0),
	(True, False),
	("hi", ""),
	(b"hi", b""),
	([1, 2], []),
	({"a": 1}, {}),
	(Color.GREEN, Color.RED),
	(Counter(7), Counter(0)),
])
def test_instantiate_zero_value(value, want):
	registry = TypeRegistry()
	name = registry.register(value)
	got = registry.instantiate(name)
	assert type(got) is type(want)
	assert got == want

def test_instantiate_nested_dataclass():
	registry = TypeRegistry()
	name = registry.register(Outer("x", Inner(3), ["a"], 1.5, Color.GREEN, None, "bob"))
	assert registry.instantiate(name) == Outer(
		name="",
		inner=Inner(0),
		tags=[],
		ratio=0.0,
		color=Color.RED,
		parent=None,
		nickname="anon"
	)

def test_instantiate_returns_fresh_instances():
	registry = TypeRegistry()
	name = registry.register(Outer("x", Inner(3), ["a"], 1.5, Color.GREEN, None))
	first = registry.instantiate(name)
	second = registry.instantiate(name)
	assert first is not second
	assert first.tags is not second.tags
	assert first.inner is not second.inner

def test_instantiate_reference_is_never_an_alias():
	registry = TypeRegistry()
	sample = Reference(NameType("Hi"))
	name = registry.register(sample)
	first = registry.instantiate(name)
	second = registry.instantiate(name)
	assert isinstance(first, Reference)
	assert first is not sample
	assert first is not second
	assert first.target is not second.target

def test_instantiate_without_no_arg_constructor():
	registry = TypeRegistry()
	name = registry.register(NeedsArgs("x"))
	got = registry.instantiate(name)
	assert isinstance(got, NeedsArgs)
	assert not hasattr(got, "required")

@pytest.mark.parametrize("name", ["foo", "", "NameType", "*foo"])
def test_instantiate_unknown_name_is_fatal(name):
	registry = TypeRegistry()
	registry.register(NameType(""))
	with pytest.raises(UnknownTypeError) as exc_info:
		registry.instantiate(name)
	assert exc_info.value.type_name == name

def test_instantiate_name_from_other_registry_is_fatal():
	other_registry = TypeRegistry()
	name = other_registry.register(NameType(""))
	registry = TypeRegistry()
	with pytest.raises(UnknownTypeError, match="typeregistry does not know"):
		registry.instantiate(name)

def test_instantiate_dataclass_with_init_var():
	@dataclass
	class WithInitVar:
		seed: InitVar[int]
		doubled: int = field(init=False, default=-1)

		def __post_init__(self, seed: int) -> None:
			self.doubled = seed * 2

	registry = TypeRegistry()
	name = registry.register(WithInitVar(seed=4))
	assert registry.instantiate(name).doubled == 0

def test_instantiate_self_referencing_dataclass():
	registry = TypeRegistry()
	name = registry.register(Node("root", Node("leaf", None))) # type: ignore
	assert registry.instantiate(name) == Node(label="", child=None) # type: ignore
