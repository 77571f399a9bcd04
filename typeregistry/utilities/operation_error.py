class OperationError(Exception):
    """Exception returned (not raised) when a type's own encode or decode capability fails.
    The original exception raised by the capability is chained as __cause__. """
    
    def __init__(self, type_name: str, message: str) -> None:
        self.type_name = type_name
        self.message = message
        super().__init__(self.message)


class EncodeError(OperationError):
    def __init__(self, type_name: str, cause: BaseException) -> None:
        super().__init__(type_name, f"Error encoding value of type '{type_name}': {cause}")
        self.__cause__ = cause


class DecodeError(OperationError):
    def __init__(self, type_name: str, cause: BaseException) -> None:
        super().__init__(type_name, f"Error decoding value of type '{type_name}': {cause}")
        self.__cause__ = cause
