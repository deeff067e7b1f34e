"""Service layer for validating and executing calculator requests."""

import structlog

from calc_service.metrics.state import MetricsState

from .exceptions import (
    InvalidNum1Error,
    InvalidNum2Error,
    InvalidOperationError,
    InvalidOperandsError,
    ModuloByZeroError,
)
from .operations import Operation, apply, coerce_number, exponentiate, modulo, to_json_number
from .schemas import DispatchResult, OperationRequest, OperationResult


logger = structlog.get_logger("calculator")


def _record_calculation(
    metrics: MetricsState,
    operation: str,
    num1: float,
    num2: float,
    result: float,
) -> None:
    metrics.record_calculation()
    logger.info(
        "calculation_completed",
        operation=operation,
        num1=num1,
        num2=num2,
        result=result,
    )


def dispatch(request: OperationRequest, metrics: MetricsState) -> DispatchResult:
    """Run the operation named in the request.

    Checks run in a fixed order and stop at the first failure:
    num1, then num2, then the operation name.

    Args:
        request: Raw operands and operation selector.
        metrics: Counters for this application instance.

    Returns:
        DispatchResult with the computed value.

    Raises:
        InvalidNum1Error: If num1 is not a valid number.
        InvalidNum2Error: If num2 is not a valid number.
        InvalidOperationError: If the operation is missing or unknown.
    """
    num1 = coerce_number(request.num1)
    if num1 is None:
        raise InvalidNum1Error()

    num2 = coerce_number(request.num2)
    if num2 is None:
        raise InvalidNum2Error()

    operation = Operation.parse(request.operation)
    if operation is None:
        raise InvalidOperationError(request.operation)

    result = apply(operation, num1, num2)
    _record_calculation(metrics, operation.value, num1, num2, result)
    return DispatchResult(result=to_json_number(result))


def _coerce_operands(request: OperationRequest, message: str, operation: str) -> tuple[float, float]:
    num1 = coerce_number(request.num1)
    num2 = coerce_number(request.num2)
    if num1 is None or num2 is None:
        raise InvalidOperandsError(message, operation)
    return num1, num2


def exponentiate_operands(request: OperationRequest, metrics: MetricsState) -> OperationResult:
    """Raise num1 to the power of num2.

    Raises:
        InvalidOperandsError: If either operand is not a valid number.
    """
    num1, num2 = _coerce_operands(
        request, "Base and exponent must be valid numbers", "exponentiation"
    )
    result = exponentiate(num1, num2)
    _record_calculation(metrics, "exponentiation", num1, num2, result)
    return OperationResult(
        operation="exponentiation",
        num1=to_json_number(num1),
        num2=to_json_number(num2),
        result=to_json_number(result),
    )


def modulo_operands(request: OperationRequest, metrics: MetricsState) -> OperationResult:
    """Truncating remainder of num1 divided by num2.

    Raises:
        InvalidOperandsError: If either operand is not a valid number.
        ModuloByZeroError: If the divisor is zero.
    """
    num1, num2 = _coerce_operands(
        request, "Dividend and divisor must be valid numbers", "modulo"
    )
    if num2 == 0:
        raise ModuloByZeroError()

    result = modulo(num1, num2)
    _record_calculation(metrics, "modulo", num1, num2, result)
    return OperationResult(
        operation="modulo",
        num1=to_json_number(num1),
        num2=to_json_number(num2),
        result=to_json_number(result),
    )
