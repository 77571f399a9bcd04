from typing import Any, Generic, TypeVar


T = TypeVar('T')

class Reference(Generic[T]):
	""" Marks the reference form of a type for registration.

	registry.register(Point()) registers the value form, named e.g. 'shapes.Point'.
	registry.register(Reference(Point())) registers the reference form, named '*shapes.Point'.
	Instantiating a reference form name produces a new Reference holding a new zero-valued target.
	"""
	__slots__ = ("target",)

	def __init__(self, target: T) -> None:
		self.target = target

	def __eq__(self, other: Any) -> bool:
		if not isinstance(other, Reference):
			return NotImplemented
		return self.target == other.target

	__hash__ = None # type: ignore

	def __repr__(self) -> str:
		return f"Reference({self.target!r})"
