"""
Type Registry Module

This module provides a registry for instantiating types by name, and for encoding and decoding
them through whatever capability the type itself implements. There is no module-level registry:
create one with TypeRegistry() or create_type_registry(), and pass it to whatever needs it.
"""

from .registration.type_registry import TypeRegistry
from .registration.create_type_registry import create_type_registry
from .registration.get_type_name import get_class_name, get_type_name
from .capabilities.reference import Reference
from .capabilities.capabilities import BinaryDecodable, BinaryEncodable, TextDecodable, TextEncodable
from .serialization.injector import Injector, NO_DEPS, no_deps
from .utilities.contract_error import ContractError, NilValueError, UnknownTypeError
from .utilities.operation_error import DecodeError, EncodeError, OperationError
from .utilities.result import DecodeResult, EncodeResult
from .utilities.logger import set_log_level

__all__ = [
	"TypeRegistry",
	"create_type_registry",
	"get_class_name",
	"get_type_name",
	"Reference",
	# Capabilities
	"BinaryEncodable",
	"TextEncodable",
	"BinaryDecodable",
	"TextDecodable",
	# Injection
	"Injector",
	"NO_DEPS",
	"no_deps",
	# Errors
	"ContractError",
	"NilValueError",
	"UnknownTypeError",
	"OperationError",
	"EncodeError",
	"DecodeError",
	# Results
	"EncodeResult",
	"DecodeResult",
	# Logging
	"set_log_level",
]
