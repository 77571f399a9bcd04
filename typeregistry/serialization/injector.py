from typing import Any, Callable


Injector = Callable[[Any], None]
"""
Passed to decode() to manually manipulate the instance after it's instantiated, but before it's decoded.
This can be used to set collaborators that are needed during decoding. For example, to convert a user's id into a user object.
Injectors are expected not to fail. Exceptions they raise are not caught by the registry.
"""

def no_deps(instance: Any) -> None:
	""" An Injector that does nothing. """
	return

NO_DEPS: Injector = no_deps
""" Functionally equivalent to passing None, but more descriptive, so please do. """
