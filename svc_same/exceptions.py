"""Service exceptions for svc-same."""


class SvcSameException(Exception):
    """Base exception for the service layer."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_type: str = "internal_error"
    ):
        self.message = message
        self.status_code = status_code
        self.error_type = error_type
        super().__init__(self.message)


class InvalidElementError(SvcSameException):
    """Raised when a graph element payload cannot be decoded."""

    def __init__(self, message: str):
        super().__init__(message, status_code=400, error_type="invalid_element")


class UnknownFunctionError(SvcSameException):
    """Raised when a builtin function name is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"unknown function: {name}",
            status_code=404,
            error_type="unknown_function"
        )


class ArgumentLimitError(SvcSameException):
    """Raised when a call carries more arguments than the service accepts."""

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(
            f"too many arguments: {count} (limit {limit})",
            status_code=422,
            error_type="argument_limit_exceeded"
        )
