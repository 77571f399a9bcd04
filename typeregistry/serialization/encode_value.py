from typing import Any

from ..capabilities.capabilities import BinaryEncodable, get_capability_target, get_encode_capability
from ..registration.get_type_name import get_type_name
from ..utilities.contract_error import ContractError
from ..utilities.logger import logger
from ..utilities.operation_error import EncodeError
from ..utilities.result import EncodeResult


def encode_value(value: Any) -> EncodeResult:
	"""
	Encodes a value into its registered name plus the bytes produced by its own encode capability.

	- A value with no encode capability encodes to empty bytes. This is not an error.
	- A failing capability does not raise. The EncodeError is returned in the result, with empty bytes.
	- Binary encoding takes precedence over text encoding.
	"""
	name = get_type_name(value)

	capability = get_encode_capability(value)
	if capability is None:
		return EncodeResult(name)

	target = get_capability_target(value)
	try:
		if capability is BinaryEncodable:
			data = target.encode_binary()
			if not isinstance(data, (bytes, bytearray, memoryview)):
				raise TypeError(f"encode_binary() returned {type(data).__name__}, expected bytes")
			data = bytes(data)
		else:
			text = target.encode_text()
			if not isinstance(text, str):
				raise TypeError(f"encode_text() returned {type(text).__name__}, expected str")
			data = text.encode("utf-8")
	except ContractError:
		# Fatal errors from nested registry calls propagate
		raise
	except Exception as e:
		error = EncodeError(name, e)
		logger.warning(error.message)
		return EncodeResult(name, error=error)

	return EncodeResult(name, data)
