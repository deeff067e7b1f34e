"""Custom exceptions for calculator request validation."""


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class DispatchError(CalculatorError):
    """Rejection on the generic endpoint, surfaced as plain text."""
    pass


class InvalidNum1Error(DispatchError):
    """Raised when num1 does not coerce to a finite number."""

    def __init__(self):
        super().__init__(
            message="Num1 is not a valid number",
            code="INVALID_NUM1"
        )


class InvalidNum2Error(DispatchError):
    """Raised when num2 does not coerce to a finite number."""

    def __init__(self):
        super().__init__(
            message="Num2 is not a valid number",
            code="INVALID_NUM2"
        )


class InvalidOperationError(DispatchError):
    """Raised when the operation name is missing or unknown.

    Attributes:
        operation: The raw operation value that was rejected.
    """

    def __init__(self, operation: object = None):
        super().__init__(
            message="Invalid operation.",
            code="INVALID_OPERATION"
        )
        self.operation = operation


class InvalidOperandsError(CalculatorError):
    """Raised by the dedicated endpoints when either operand is not a number.

    Attributes:
        operation: Operation the operands were meant for.
    """

    def __init__(self, message: str, operation: str):
        super().__init__(message=message, code="INVALID_OPERANDS")
        self.operation = operation


class ModuloByZeroError(CalculatorError):
    """Raised when the modulo endpoint receives a zero divisor."""

    def __init__(self):
        super().__init__(
            message="Cannot perform modulo by zero",
            code="MODULO_BY_ZERO"
        )


class MalformedBodyError(CalculatorError):
    """Raised when a request body cannot be decoded.

    Attributes:
        reason: Decoder error description.
    """

    def __init__(self, reason: str = ""):
        super().__init__(
            message="Request body could not be parsed",
            code="MALFORMED_BODY"
        )
        self.reason = reason


class MalformedDispatchBodyError(MalformedBodyError, DispatchError):
    """Undecodable body sent to the generic endpoint, surfaced as plain text."""
    pass
