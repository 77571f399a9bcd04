from dataclasses import dataclass, field
from typing import Any
from bidict import bidict

from .get_type_name import get_class_name, get_type_name
from .type_descriptor import TypeDescriptor
from ..capabilities.reference import Reference
from ..utilities.contract_error import ContractError, NilValueError, UnknownTypeError
from ..utilities.logger import logger

from typing import TYPE_CHECKING
if TYPE_CHECKING:
	from ..serialization.injector import Injector
	from ..utilities.result import DecodeResult, EncodeResult


@dataclass
class TypeRegistry:
	""" A registry of types that can be instantiated by name, and encoded or decoded through their own capabilities.

	Registration mutates the registry and is expected to happen once, at startup, before concurrent use.
	Concurrent register() calls need external synchronization. Once registration is done, instantiate(), encode()
	and decode() are safe to call concurrently.
	"""
	type_name_dict: bidict[str, TypeDescriptor] = field(default_factory=bidict)
	""" Maps registered name -> TypeDescriptor. The inverse maps (type, form) back to the name. """

	def register(self, value: Any) -> str:
		""" Registers the runtime type of value so that it can be instantiated by name later.
		Pass Reference(value) to register the reference form. Returns the registered name. """
		if value is None:
			raise NilValueError("typeregistry cannot add nil")
		if isinstance(value, Reference):
			if value.target is None:
				raise NilValueError("typeregistry cannot add a reference to nil")
			return self.register_type(type(value.target), by_reference=True)
		return self.register_type(type(value))

	def register_type(self, type_: type, *, by_reference: bool = False) -> str:
		""" Registers a class directly, without a sample value. Returns the registered name. """
		if type_ is None:
			raise NilValueError("typeregistry cannot add nil")
		if not isinstance(type_, type):
			raise ContractError(f"typeregistry can only register classes, got {type_!r}")

		name = get_class_name(type_, by_reference=by_reference)
		self.type_name_dict[name] = TypeDescriptor.for_type(type_, by_reference=by_reference)
		logger.debug(f"Registered type '{name}'.")
		return name

	def instantiate(self, name: str) -> Any:
		""" Returns a new zero-valued instance of the type registered under name. Raises UnknownTypeError for unknown names. """
		descriptor = self.type_name_dict.get(name)
		if descriptor is None:
			raise UnknownTypeError(name)
		logger.debug(f"Instantiating type '{name}'.")
		return descriptor.new_instance()

	def encode(self, value: Any) -> 'EncodeResult':
		""" Wraps encode_value for easy access. """
		from ..serialization.encode_value import encode_value
		return encode_value(value)

	def decode(self, name: str, data: bytes, injector: 'Injector | None' = None) -> 'DecodeResult':
		""" Wraps decode_value for easy access. """
		from ..serialization.decode_value import decode_value
		return decode_value(self, name, data, injector)

	def name(self, value: Any) -> str:
		""" Returns the name value would be registered under. Does not require value to be registered. """
		return get_type_name(value)

	def lookup_type(self, name: str) -> type | None:
		""" Returns None if no type is registered under name. """
		descriptor = self.type_name_dict.get(name)
		if descriptor is None:
			return None
		return descriptor.type_

	def name_of(self, type_: type, *, by_reference: bool = False) -> str | None:
		""" Returns the registered name for the type, or None if that form of the type was never registered. """
		if not isinstance(type_, type):
			raise ContractError(f"typeregistry can only look up classes, got {type_!r}")
		return self.type_name_dict.inverse.get(TypeDescriptor.lookup_key(type_, by_reference=by_reference))

	def is_registered(self, name: str) -> bool:
		return name in self.type_name_dict

	def names(self) -> list[str]:
		""" Returns all registered names, sorted. """
		return sorted(self.type_name_dict)

	def __contains__(self, name: object) -> bool:
		return name in self.type_name_dict

	def __len__(self) -> int:
		return len(self.type_name_dict)
