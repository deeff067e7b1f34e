"""Global dependencies for the application."""

from fastapi import Request

from calc_service.config import Settings
from calc_service.metrics.state import MetricsState


async def get_metrics(request: Request) -> MetricsState:
    """Dependency to get the counters owned by this application.

    The state is created in create_app() and stored on app.state so each
    application instance counts independently.

    Args:
        request: The FastAPI request object.

    Returns:
        The application's MetricsState instance.
    """
    return request.app.state.metrics


async def get_app_settings(request: Request) -> Settings:
    """Dependency to get the settings the application was built with."""
    return request.app.state.settings
