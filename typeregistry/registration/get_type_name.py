from typing import Any

from .vars import __type_name__, REFERENCE_PREFIX
from ..capabilities.reference import Reference
from ..utilities.contract_error import ContractError, NilValueError


def get_class_name(cls: type, *, by_reference: bool = False) -> str:
	""" Derives the registered name of a class, e.g. 'shapes.Point', or '*shapes.Point' for the reference form. """
	# Only look at the class's own __dict__, so that subclasses never share a name with their parent
	type_name = cls.__dict__.get(__type_name__)
	if type_name is None:
		if cls.__module__ == "builtins":
			type_name = cls.__qualname__
		else:
			type_name = f"{cls.__module__}.{cls.__qualname__}"
	elif not isinstance(type_name, str) or not type_name:
		raise ContractError(f"{cls.__name__}.{__type_name__} must be a non-empty string, got {type_name!r}.")

	if by_reference:
		return REFERENCE_PREFIX + type_name
	return type_name

def get_type_name(value: Any) -> str:
	""" Derives the registered name from a value's runtime type. Pure function: no registry lookup is involved. """
	if value is None:
		raise NilValueError("typeregistry cannot name nil")
	if isinstance(value, Reference):
		if value.target is None:
			raise NilValueError("typeregistry cannot name a reference to nil")
		return get_class_name(type(value.target), by_reference=True)
	return get_class_name(type(value))
