from dataclasses import dataclass, field
from typing import Any, Callable

from .zero_value import create_zero_factory
from ..capabilities.reference import Reference
from ..utilities.contract_error import ContractError


@dataclass(frozen=True)
class TypeDescriptor:
	""" Internal record of a registered type: the class, its form, and the factory for its zero value.
	Equality and hashing only consider the class and the form. """
	type_: type
	by_reference: bool
	factory: Callable[[], Any] | None = field(default=None, compare=False, repr=False)
	""" None only for descriptors built as lookup keys, which are never stored. """

	@classmethod
	def for_type(cls, type_: type, *, by_reference: bool = False) -> 'TypeDescriptor':
		""" Raises ContractError if no zero value can be built for type_, so that instantiate() never fails later. """
		factory = create_zero_factory(type_)
		try:
			factory()
		except Exception as e:
			raise ContractError(f"typeregistry cannot instantiate '{type_.__qualname__}' without arguments: {e}") from e
		return cls(
			type_=type_,
			by_reference=by_reference,
			factory=factory
		)

	@classmethod
	def lookup_key(cls, type_: type, *, by_reference: bool = False) -> 'TypeDescriptor':
		""" A descriptor equal to the registered one, for reverse lookups. """
		return cls(type_=type_, by_reference=by_reference)

	def new_instance(self) -> Any:
		""" Returns a new zero-valued instance. The reference form wraps a new target in a new Reference, never an alias. """
		assert self.factory is not None
		target = self.factory()
		if self.by_reference:
			return Reference(target)
		return target
