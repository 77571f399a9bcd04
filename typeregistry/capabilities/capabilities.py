from typing import Any, Protocol, runtime_checkable

from .reference import Reference

"""
Capabilities a registrable type may implement. The registry only detects *that* a type can encode or decode itself, never *how*.

Precedence: when a type implements more than one style, binary wins over text. This holds for both encoding and decoding.
"""


@runtime_checkable
class BinaryEncodable(Protocol):
	def encode_binary(self) -> bytes: ...

@runtime_checkable
class TextEncodable(Protocol):
	def encode_text(self) -> str: ...

@runtime_checkable
class BinaryDecodable(Protocol):
	def decode_binary(self, data: bytes) -> None: ...

@runtime_checkable
class TextDecodable(Protocol):
	def decode_text(self, text: str) -> None: ...


ENCODE_PRECEDENCE: tuple[type, ...] = (BinaryEncodable, TextEncodable)
DECODE_PRECEDENCE: tuple[type, ...] = (BinaryDecodable, TextDecodable)


def get_capability_target(obj: Any) -> Any:
	""" Returns the object whose capabilities apply. A Reference exposes the capabilities of its target. """
	if isinstance(obj, Reference):
		return obj.target
	return obj

def get_encode_capability(obj: Any) -> type | None:
	""" Returns the first encode capability in ENCODE_PRECEDENCE implemented by obj, or None. """
	target = get_capability_target(obj)
	for capability in ENCODE_PRECEDENCE:
		if isinstance(target, capability):
			return capability
	return None

def get_decode_capability(obj: Any) -> type | None:
	""" Returns the first decode capability in DECODE_PRECEDENCE implemented by obj, or None. """
	target = get_capability_target(obj)
	for capability in DECODE_PRECEDENCE:
		if isinstance(target, capability):
			return capability
	return None
