class ContractError(Exception):
    """Exception raised when the registry is used outside of its contract.
    NOTE: These indicate a programming error in the caller. They are not meant to be caught and handled per call. """
    
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class NilValueError(ContractError):
    """Raised when None is given where a value is required to derive a type name."""


class UnknownTypeError(ContractError):
    """Raised when a name has not been registered."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"typeregistry does not know {type_name!r}")
