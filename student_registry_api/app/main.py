"""
Main entrypoint for the Student Registry API.

This module assembles the FastAPI application: logging, the in-memory
store and service, exception handlers and the versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``::

    uvicorn student_registry_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.responses import request_error_to_outcome, to_response
from .api.v1.router import router as v1_router
from .core.config import settings
from .core.errors import InternalError
from .core.logging_config import setup_logging
from .core.store import StudentStore
from .services.student_service import StudentService

logger = logging.getLogger(__name__)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies with the same shape as field violations."""
    outcome = request_error_to_outcome(exc)
    logger.info("Rejected %s %s: malformed request %s", request.method, request.url.path, ", ".join(outcome.errors))
    return to_response(outcome)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Last resort for anything not classified by the service layer."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return to_response(InternalError())


def create_app(service: Optional[StudentService] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    service : Optional[StudentService]
        Service instance to serve requests with.  When omitted, a new
        service backed by an empty ``StudentStore`` is created, so every
        application starts with its own state.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.student_service = service or StudentService(StudentStore())

    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    app.include_router(v1_router, prefix="/api/v1")
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
