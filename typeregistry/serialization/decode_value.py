from .injector import Injector
from ..capabilities.capabilities import BinaryDecodable, get_capability_target, get_decode_capability
from ..utilities.contract_error import ContractError
from ..utilities.logger import logger
from ..utilities.operation_error import DecodeError
from ..utilities.result import DecodeResult

from typing import TYPE_CHECKING
if TYPE_CHECKING:
	from ..registration.type_registry import TypeRegistry


def decode_value(registry: 'TypeRegistry', name: str, data: bytes, injector: Injector | None = None) -> DecodeResult:
	"""
	Decodes data into a new instance of the type registered under name.

	Steps, in order:
	1. Instantiate the type by name. Unknown names raise UnknownTypeError.
	2. Run the injector, if any, so collaborators are in place before decoding.
	3. Run the instance's decode capability, if any (binary before text). Without one, data is ignored.

	A failing capability does not raise. The DecodeError is returned alongside the injected, partially decoded instance.
	"""
	instance = registry.instantiate(name)

	if injector is not None:
		injector(instance)

	capability = get_decode_capability(instance)
	if capability is None:
		return DecodeResult(instance)

	target = get_capability_target(instance)
	try:
		if capability is BinaryDecodable:
			target.decode_binary(bytes(data))
		else:
			target.decode_text(bytes(data).decode("utf-8"))
	except ContractError:
		# Fatal errors from nested registry calls propagate
		raise
	except Exception as e:
		error = DecodeError(name, e)
		logger.warning(error.message)
		return DecodeResult(instance, error)

	return DecodeResult(instance)
