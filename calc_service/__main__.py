"""Run the calculator service with uvicorn."""

import uvicorn

from calc_service.config import get_settings


def main() -> None:
    """Serve calc_service.main:app on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "calc_service.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
