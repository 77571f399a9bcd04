from dataclasses import dataclass
from typing import Any, Iterator

from .operation_error import DecodeError, EncodeError


@dataclass
class EncodeResult:
    """ Returns the result of an encode. Unpacks as (name, data, error). """
    name: str
    data: bytes = b""
    error: EncodeError | None = None

    @property
    def success(self) -> bool:
        return self.error is None

    def __iter__(self) -> Iterator[Any]:
        return iter((self.name, self.data, self.error))

@dataclass
class DecodeResult:
    """ Returns the result of a decode. Unpacks as (instance, error).
    On failure, instance is the injected but partially decoded object, kept for diagnostics. """
    instance: Any
    error: DecodeError | None = None

    @property
    def success(self) -> bool:
        return self.error is None

    def __iter__(self) -> Iterator[Any]:
        return iter((self.instance, self.error))
