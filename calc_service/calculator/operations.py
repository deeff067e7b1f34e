"""Numeric coercion and the fixed set of binary operations."""

import math
import re
from enum import Enum


NUMERIC_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII)

# Largest magnitude at which every integral float is exactly representable
MAX_SAFE_INTEGER = 2**53


class Operation(str, Enum):
    """Operations selectable on the generic endpoint."""

    EXPONENTIATE = "exponentiate"
    MOD = "mod"

    @classmethod
    def parse(cls, name: object) -> "Operation | None":
        """Look up an operation by exact, case-sensitive name.

        Args:
            name: Raw operation value from the request.

        Returns:
            The matching Operation, or None when missing or unknown.
        """
        if not isinstance(name, str):
            return None
        try:
            return cls(name)
        except ValueError:
            return None


def coerce_number(raw: object) -> float | None:
    """Convert a loosely-typed input into a finite float.

    Args:
        raw: Value taken from the request body (string, number, or absent).

    Returns:
        The parsed finite value, or None when it is not a valid number.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            return None
    elif isinstance(raw, str):
        text = raw.strip()
        if not NUMERIC_RE.match(text):
            return None
        value = float(text)
    else:
        return None

    if not math.isfinite(value):
        return None
    return value


def _is_odd_integer(value: float) -> bool:
    return float(value).is_integer() and value % 2 == 1


def exponentiate(base: float, exponent: float) -> float:
    """Raise base to exponent with IEEE 754 pow semantics.

    math.pow raises where IEEE 754 returns a special value, so those
    cases are mapped back: overflow gives a signed infinity, a zero base
    with a negative exponent gives infinity, and a negative base with a
    non-integer exponent gives NaN.
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0 and exponent < 0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


def modulo(dividend: float, divisor: float) -> float:
    """Truncating remainder; the sign follows the dividend."""
    if divisor == 0:
        return math.nan
    return math.fmod(dividend, divisor)


def apply(operation: Operation, num1: float, num2: float) -> float:
    """Execute an operation on two validated numbers."""
    match operation:
        case Operation.EXPONENTIATE:
            return exponentiate(num1, num2)
        case Operation.MOD:
            return modulo(num1, num2)
    raise ValueError(f"Unsupported operation: {operation!r}")


def to_json_number(value: float) -> int | float | None:
    """Render a float the way it should appear in a JSON payload.

    Integral values come back as ints so 8.0 serializes as 8. NaN and
    infinities have no JSON form and become None.
    """
    if not math.isfinite(value):
        return None
    if value.is_integer() and abs(value) <= MAX_SAFE_INTEGER:
        return int(value)
    return value
