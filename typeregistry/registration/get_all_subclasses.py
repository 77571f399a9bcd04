import inspect
from typing import TypeVar


T = TypeVar('T')

def get_all_subclasses(cls: type[T]) -> set[type[T]]:
	""" Get all subclasses of a class, including indirect subclasses. """
	subclasses = set()
	for subclass in cls.__subclasses__():
		subclasses.add(subclass)
		subclasses.update(get_all_subclasses(subclass))
	return subclasses

def get_concrete_subclasses(cls: type[T]) -> list[type[T]]:
	""" Get all non-abstract subclasses of a class, sorted by qualified name so registration order is stable. """
	concrete_subclasses = [subclass for subclass in get_all_subclasses(cls) if not inspect.isabstract(subclass)]
	return sorted(concrete_subclasses, key=lambda subclass: f"{subclass.__module__}.{subclass.__qualname__}")
