"""Pydantic schemas for calculator requests and responses."""

from typing import Any
from pydantic import BaseModel, ConfigDict, Field


class OperationRequest(BaseModel):
    """Raw operands and operation selector as received from the client.

    Values are kept untyped here; coercion happens in the service so
    that each endpoint can report failures in its own format.

    Attributes:
        num1: First operand (string, number, or absent).
        num2: Second operand (string, number, or absent).
        operation: Operation name, only read by the generic endpoint.
    """

    model_config = ConfigDict(extra="ignore")

    num1: Any = Field(default=None, description="First operand")
    num2: Any = Field(default=None, description="Second operand")
    operation: Any = Field(default=None, description="Operation name")


class OperationResult(BaseModel):
    """Success payload of the dedicated operation endpoints."""

    operation: str = Field(..., description="Operation performed")
    num1: int | float = Field(..., description="Coerced first operand")
    num2: int | float = Field(..., description="Coerced second operand")
    result: int | float | None = Field(..., description="Result, null when not finite")


class DispatchResult(BaseModel):
    """Success payload of the generic endpoint."""

    result: int | float | None = Field(..., description="Result, null when not finite")


class ErrorResponse(BaseModel):
    """JSON error body returned by the dedicated endpoints."""

    error: str = Field(..., description="Error message")
