from contextlib import asynccontextmanager
from pathlib import Path

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from .config import Settings, get_settings
from .logging_config import configure_logging
from .calculator import router as calculator_router
from .calculator.exceptions import CalculatorError, DispatchError
from .metrics import MetricsState, RequestMetricsMiddleware
from .metrics.router import router as telemetry_router


logger = structlog.get_logger("calc_service")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info("service_started", app=settings.APP_NAME, port=settings.PORT)

    yield

    snapshot = app.state.metrics.snapshot()
    logger.info(
        "service_stopped",
        requests=snapshot.request_count,
        errors=snapshot.error_count,
        calculations=snapshot.calculation_count,
    )


def _record_rejection(request: Request, exc: CalculatorError) -> None:
    request.app.state.metrics.record_error()
    logger.info(
        "calculation_rejected",
        path=request.url.path,
        error=exc.code,
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application with its own settings and counters."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        lifespan=lifespan,
        debug=settings.DEBUG
    )
    app.state.settings = settings
    app.state.metrics = MetricsState()

    app.add_middleware(RequestMetricsMiddleware)

    # Generic endpoint errors are plain text
    @app.exception_handler(DispatchError)
    async def dispatch_exception_handler(request: Request, exc: DispatchError):
        _record_rejection(request, exc)
        return PlainTextResponse(exc.message, status_code=400)

    @app.exception_handler(CalculatorError)
    async def calculator_exception_handler(request: Request, exc: CalculatorError):
        _record_rejection(request, exc)
        return JSONResponse(
            status_code=400,
            content={"error": exc.message}
        )

    # Include routers
    app.include_router(calculator_router)
    app.include_router(telemetry_router)

    # Frontend assets answer only the paths no route claims
    static_dir = Path(settings.STATIC_DIR)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")

    return app


settings = get_settings()
configure_logging(settings.LOG_LEVEL, settings.LOG_JSON)

app = create_app(settings)
