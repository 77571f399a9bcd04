from typing import Any, Iterable

from .get_all_subclasses import get_concrete_subclasses
from .type_registry import TypeRegistry
from ..utilities.logger import logger
"""
Documentation:
	- Subclasses are discovered through __subclasses__(), so every module defining a subclass must be imported before this runs.
	- Abstract subclasses are skipped. They can't be instantiated.
"""

def create_type_registry(
		values: Iterable[Any] = (),
		base_classes: Iterable[type] = (),
		*,
		by_reference: bool = False
	) -> TypeRegistry:
	""" Creates a new TypeRegistry, registering each sample value, then every concrete subclass of each base class.
	by_reference applies to the subclasses only. Sample values choose their own form (wrap them in Reference for the reference form). """

	logger.debug("Creating type registry...")
	registry = TypeRegistry()

	## Sample values ##
	value_names = [registry.register(value) for value in values]
	
	## Subclasses ##
	subclass_names: list[str] = []
	for base_class in base_classes:
		for subclass in get_concrete_subclasses(base_class):
			subclass_names.append(registry.register_type(subclass, by_reference=by_reference))
		
	# Log the registered names for debugging
	logger.debug(f"Registered sample values: {', '.join(value_names)}")
	logger.debug(f"Registered subclasses: {', '.join(subclass_names)}")

	return registry
