"""FastAPI router for calculator endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from starlette.formparsers import MultiPartException

from calc_service.config import Settings
from calc_service.dependencies import get_app_settings, get_metrics
from calc_service.metrics.state import MetricsState

from .exceptions import MalformedBodyError, MalformedDispatchBodyError
from .schemas import DispatchResult, ErrorResponse, OperationRequest, OperationResult
from .service import dispatch, exponentiate_operands, modulo_operands


router = APIRouter(tags=["calculator"])

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_operation_request(request: Request) -> OperationRequest:
    """Decode a JSON or form body into an OperationRequest.

    Urlencoded and multipart bodies go through the form parser, anything
    else is read as JSON. An empty body or a JSON value that is not an
    object yields a request with every field absent.

    Raises:
        MalformedBodyError: If the body cannot be decoded.
    """
    content_type = request.headers.get("content-type", "")
    try:
        if content_type.startswith(FORM_CONTENT_TYPES):
            form = await request.form()
            data = {key: form[key] for key in form.keys()}
        elif not await request.body():
            return OperationRequest()
        else:
            data = await request.json()
    except (ValueError, MultiPartException) as exc:
        raise MalformedBodyError(str(exc)) from exc

    if not isinstance(data, dict):
        return OperationRequest()
    return OperationRequest.model_validate(data)


async def read_dispatch_request(request: Request) -> OperationRequest:
    """Like read_operation_request, but decode failures are dispatch errors."""
    try:
        return await read_operation_request(request)
    except MalformedBodyError as exc:
        raise MalformedDispatchBodyError(exc.reason) from exc


@router.get("/", response_class=PlainTextResponse)
@router.get("/api", response_class=PlainTextResponse)
async def banner(settings: Annotated[Settings, Depends(get_app_settings)]) -> str:
    """Plain-text service banner."""
    return settings.BANNER


@router.post(
    "/",
    response_model=DispatchResult,
    responses={400: {"content": {"text/plain": {}}, "description": "Invalid input"}},
)
async def dispatch_endpoint(
    payload: Annotated[OperationRequest, Depends(read_dispatch_request)],
    metrics: Annotated[MetricsState, Depends(get_metrics)],
) -> DispatchResult:
    """Run the operation named in the body on num1 and num2.

    Supported operations are "exponentiate" and "mod". Validation
    failures are returned as plain text.
    """
    return dispatch(payload, metrics)


@router.post(
    "/exponentiate",
    response_model=OperationResult,
    responses={400: {"model": ErrorResponse}},
)
async def exponentiate_endpoint(
    payload: Annotated[OperationRequest, Depends(read_operation_request)],
    metrics: Annotated[MetricsState, Depends(get_metrics)],
) -> OperationResult:
    """Raise num1 to the power of num2."""
    return exponentiate_operands(payload, metrics)


@router.post(
    "/modulo",
    response_model=OperationResult,
    responses={400: {"model": ErrorResponse}},
)
async def modulo_endpoint(
    payload: Annotated[OperationRequest, Depends(read_operation_request)],
    metrics: Annotated[MetricsState, Depends(get_metrics)],
) -> OperationResult:
    """Remainder of num1 divided by num2; a zero divisor is rejected."""
    return modulo_operands(payload, metrics)
