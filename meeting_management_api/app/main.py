"""
Main entrypoint for the Meeting Management API.

This module assembles the FastAPI application, sets up logging,
includes versioned routers and wires the meeting store to the JSON
file it is loaded from and saved to.  The ``create_app`` function
builds and configures the app, which is then instantiated at module
import time as ``app``, e.g.::

    uvicorn meeting_management_api.app.main:app --reload
"""

import logging
from typing import Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.logging_config import setup_logging
from .core.storage import load_meetings, save_meetings
from .api.v1.router import router as v1_router
from .services.meeting_service import MeetingService


logger = logging.getLogger(__name__)


def _error_message(error: dict) -> str:
    # Prefer the message of a ValueError raised by our own validators
    # over pydantic's "Value error, ..." wrapper.
    ctx = error.get("ctx") or {}
    if isinstance(ctx.get("error"), Exception):
        return str(ctx["error"])
    return error.get("msg", "Invalid value").removeprefix("Value error, ")


def _error_field(loc) -> str:
    """Name the offending input: ``startDate``, ``participants.Jonas``, ``participants[1]``.

    The location prefix (``body``, ``query``, ``path``) is dropped.  The
    only list bodies are participant lists, so a leading index names an
    item of that list.
    """
    parts = list(loc or ("request",))
    if len(parts) > 1 and parts[0] in {"body", "query", "path", "header", "cookie"}:
        parts = parts[1:]
    if isinstance(parts[0], int):
        parts[0] = f"participants[{parts[0]}]"
    return ".".join(str(part) for part in parts)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer request validation failures with 400 and a field to message map."""
    errors: Dict[str, str] = {}
    for error in exc.errors():
        errors[_error_field(error.get("loc"))] = _error_message(error)
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=errors)


def create_app(service: Optional[MeetingService] = None, persist: bool = True) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    service : Optional[MeetingService]
        Meeting store to serve.  A fresh, empty store is created when
        omitted.
    persist : bool
        Load meetings from ``settings.meetings_file`` on startup and
        save them back on shutdown.  Tests disable this.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None, settings.debug)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.meeting_service = service if service is not None else MeetingService()

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(v1_router, prefix="/api/v1")

    if persist:
        @app.on_event("startup")
        async def startup_event() -> None:
            load_meetings(app.state.meeting_service)

        @app.on_event("shutdown")
        async def shutdown_event() -> None:
            if settings.persist_on_shutdown:
                save_meetings(app.state.meeting_service)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
