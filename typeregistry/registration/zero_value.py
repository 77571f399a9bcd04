import dataclasses
import inspect
from enum import Enum
from types import NoneType, UnionType
from typing import Annotated, Any, Callable, Union, get_args, get_origin, get_type_hints

"""
Zero values: the fresh, empty instance a registered type is instantiated as.

The factory for a class is chosen once, at registration, in this order:
	1. Primitives: their no-argument constructor ("", 0, 0.0, False, empty containers)
	2. Enums: the first member
	3. Dataclasses: each required init argument (InitVars included) is set to the zero value of its annotation. Defaults are left to the dataclass
	4. Classes callable without arguments: cls()
	5. Anything else: cls.__new__(cls), an instance with no fields set
"""

# By placing a type here, we assert that calling it with no arguments produces its zero value
PRIMITIVE_ZERO_FACTORIES: dict[type, Callable[[], Any]] = {
	str: str,
	bytes: bytes,
	bytearray: bytearray,
	int: int,
	float: float,
	bool: bool,
	complex: complex,
	list: list,
	dict: dict,
	set: set,
	frozenset: frozenset,
	tuple: tuple,
}

def create_zero_factory(cls: type) -> Callable[[], Any]:
	""" Returns a function producing a new zero-valued instance of cls on every call. """
	# Exact match only; subclasses of primitives are handled like any other class
	if cls in PRIMITIVE_ZERO_FACTORIES:
		return PRIMITIVE_ZERO_FACTORIES[cls]
	elif issubclass(cls, Enum):
		return lambda: _first_enum_member(cls)
	elif dataclasses.is_dataclass(cls):
		return lambda: zero_dataclass(cls)
	elif _is_callable_without_args(cls):
		return cls
	else:
		return lambda: cls.__new__(cls)

def zero_dataclass(cls: type, _building: frozenset[type] = frozenset()) -> Any:
	""" Instantiates a dataclass with every required init argument (InitVars included) at its zero value.
	Arguments with a default or default_factory are left to the dataclass. """
	building = _building | {cls}
	type_hints = _get_type_hints(cls)
	kwargs: dict[str, Any] = {}
	for parameter in inspect.signature(cls).parameters.values():
		if parameter.default is not inspect.Parameter.empty:
			continue
		if parameter.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
			continue
		annotation = type_hints.get(parameter.name, parameter.annotation)
		kwargs[parameter.name] = zero_value_for_annotation(annotation, building)
	return cls(**kwargs)

def zero_value_for_annotation(annotation: Any, _building: frozenset[type] = frozenset()) -> Any:
	""" Returns the zero value for a type annotation. Optional annotations and unknown types are None.
	A dataclass already being built further up (a self-referencing field) is also None. """
	if isinstance(annotation, dataclasses.InitVar):
		annotation = annotation.type

	origin = get_origin(annotation)

	if origin is Annotated:
		return zero_value_for_annotation(get_args(annotation)[0], _building)
	elif origin in {Union, UnionType}:
		args = get_args(annotation)
		if NoneType in args:
			return None
		return zero_value_for_annotation(args[0], _building)
	elif origin is not None:
		# Generic aliases such as list[int] or dict[str, int] zero to their empty container
		annotation = origin

	if not isinstance(annotation, type):
		return None # Unresolved forward refs, Any, TypeVars
	elif annotation in PRIMITIVE_ZERO_FACTORIES:
		return PRIMITIVE_ZERO_FACTORIES[annotation]()
	elif issubclass(annotation, Enum):
		return _first_enum_member(annotation)
	elif dataclasses.is_dataclass(annotation):
		if annotation in _building:
			return None
		return zero_dataclass(annotation, _building)
	else:
		return None

def _first_enum_member(cls: type[Enum]) -> Enum | None:
	return next(iter(cls), None)

def _get_type_hints(cls: type) -> dict[str, Any]:
	# String annotations that cannot be resolved fall back to the raw dataclass field types
	try:
		return get_type_hints(cls)
	except (NameError, TypeError):
		return {}

def _is_callable_without_args(cls: type) -> bool:
	try:
		signature = inspect.signature(cls)
	except (ValueError, TypeError):
		# Builtin types (and classes inheriting their constructor) may not expose a signature
		return issubclass(cls, tuple(PRIMITIVE_ZERO_FACTORIES))
	try:
		signature.bind()
	except TypeError:
		return False
	return True
