"""restgate FastAPI application.

This module builds the FastAPI application with CORS, the error handling
middleware and the health router.
"""

# ruff: noqa: E402  load_dotenv() must run before any restgate imports that read env

import logging
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

from restgate import __version__
from restgate.config.app_settings import AppSettings, get_settings
from restgate.controller import health_controller
from restgate.middleware import ErrorHandlerMiddleware, ErrorTranslator

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the application.

    Args:
        level: The log level name (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stdout,
    )
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def configure_cors_middleware(application: FastAPI, allowed_origins: list[str]) -> None:
    """Configure CORS middleware with specified origins."""
    application.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Error", "X-Error-Code", "X-Request-ID"],
    )


def configure_error_handlers_middleware(
    application: FastAPI,
    app_settings: AppSettings,
    translator: Optional[ErrorTranslator] = None,
) -> None:
    """Register error handling middleware."""
    application.add_middleware(
        ErrorHandlerMiddleware,
        translator=translator or ErrorTranslator(),
        body_format=app_settings.error_body_format,
    )
    logger.info(
        "Error handling middleware configured",
        extra={"body_format": app_settings.error_body_format},
    )


def create_app(
    app_settings: Optional[AppSettings] = None,
    translator: Optional[ErrorTranslator] = None,
) -> FastAPI:
    """Build the restgate application.

    Args:
        app_settings: Settings to use (defaults to the cached singleton)
        translator: Translator to install (defaults to the standard rule table)

    Returns:
        Configured FastAPI application
    """
    app_settings = app_settings or get_settings()
    configure_logging(app_settings.log_level)

    if app_settings.is_production():
        for problem in app_settings.validate_production_config():
            logger.warning(f"Production configuration issue: {problem}")

    application = FastAPI(
        title="restgate",
        version=__version__,
        debug=app_settings.debug,
    )
    application.state.debug = app_settings.debug
    application.state.environment = app_settings.environment

    configure_error_handlers_middleware(application, app_settings, translator)
    configure_cors_middleware(application, app_settings.cors_origins)

    application.include_router(health_controller.router)
    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "restgate.main:app",
        host=settings.api_host,
        port=settings.api_port,
    )
