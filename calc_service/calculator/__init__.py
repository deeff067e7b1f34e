"""Calculator module - operand validation and operation dispatch."""

from .schemas import (
    OperationRequest,
    OperationResult,
    DispatchResult,
    ErrorResponse,
)
from .exceptions import (
    CalculatorError,
    DispatchError,
    InvalidNum1Error,
    InvalidNum2Error,
    InvalidOperationError,
    InvalidOperandsError,
    ModuloByZeroError,
    MalformedBodyError,
    MalformedDispatchBodyError,
)
from .operations import Operation, apply, coerce_number
from .service import dispatch, exponentiate_operands, modulo_operands
from .router import router


__all__ = [
    # Schemas
    "OperationRequest",
    "OperationResult",
    "DispatchResult",
    "ErrorResponse",
    # Exceptions
    "CalculatorError",
    "DispatchError",
    "InvalidNum1Error",
    "InvalidNum2Error",
    "InvalidOperationError",
    "InvalidOperandsError",
    "ModuloByZeroError",
    "MalformedBodyError",
    "MalformedDispatchBodyError",
    # Operations
    "Operation",
    "apply",
    "coerce_number",
    # Service
    "dispatch",
    "exponentiate_operands",
    "modulo_operands",
    # Router
    "router",
]
