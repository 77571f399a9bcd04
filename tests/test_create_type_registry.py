import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from typeregistry import Reference, TypeRegistry, create_type_registry
from sample_types import NameType, NothingType


class Message(ABC):
	@abstractmethod
	def kind(self) -> str: ...

class AbstractNotice(Message):
	pass

@dataclass
class Ping(Message):
	sequence: int = 0

	def kind(self) -> str:
		return "ping"

@dataclass
class Urgent(AbstractNotice):
	text: str = ""

	def kind(self) -> str:
		return "urgent"


def test_create_empty_registry():
	registry = create_type_registry()
	assert isinstance(registry, TypeRegistry)
	assert len(registry) == 0

def test_create_registry_with_values():
	registry = create_type_registry(values=[NameType("x"), Reference(NothingType())])
	assert registry.names() == sorted([
		f"{NameType.__module__}.NameType",
		f"*{NothingType.__module__}.NothingType",
	])

def test_create_registry_registers_concrete_subclasses():
	registry = create_type_registry(base_classes=[Message])
	assert registry.names() == [f"{__name__}.Ping", f"{__name__}.Urgent"]
	assert registry.instantiate(f"{__name__}.Urgent") == Urgent()

def test_create_registry_subclasses_by_reference():
	registry = create_type_registry(base_classes=[Message], by_reference=True)
	assert f"*{__name__}.Ping" in registry
	assert registry.instantiate(f"*{__name__}.Ping") == Reference(Ping())

def test_create_registry_logs_names(caplog):
	with caplog.at_level(logging.DEBUG, logger="typeregistry"):
		create_type_registry(base_classes=[Message])
	assert "Creating type registry..." in caplog.text
	assert f"{__name__}.Ping" in caplog.text

def test_lookup_type():
	registry = create_type_registry(base_classes=[Message])
	assert registry.lookup_type(f"{__name__}.Ping") is Ping
	assert registry.lookup_type("unknown") is None

def test_name_of():
	registry = TypeRegistry()
	name = registry.register(Ping())
	assert registry.name_of(Ping) == name
	assert registry.name_of(Ping, by_reference=True) is None
	assert registry.name_of(Urgent) is None

def test_membership():
	registry = TypeRegistry()
	name = registry.register(Ping())
	assert name in registry
	assert registry.is_registered(name)
	assert "unknown" not in registry
	assert not registry.is_registered("unknown")
