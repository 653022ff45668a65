"""Exception handlers that map failures onto the response envelope."""

import logging
from typing import Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskmanager.api.responses import error_response
from taskmanager.exceptions import TaskNotFoundError, TaskValidationError

logger = logging.getLogger(__name__)


def _request_errors_to_fields(exc: RequestValidationError) -> Dict[str, str]:
    """Flatten FastAPI's error list into field -> message.

    Malformed JSON bodies are reported under ``body``.
    """
    errors: Dict[str, str] = {}
    for err in exc.errors():
        loc = err.get("loc") or ("body",)
        field = loc[-1] if len(loc) > 1 and isinstance(loc[-1], str) else loc[0]
        errors.setdefault(str(field), err.get("msg", "Invalid value"))
    return errors


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on ``app``.

    Whether internal error detail is exposed is read from
    ``app.state.settings.debug`` at request time.
    """

    @app.exception_handler(TaskNotFoundError)
    async def handle_task_not_found(request: Request, exc: TaskNotFoundError) -> JSONResponse:
        return error_response(404, str(exc))

    @app.exception_handler(TaskValidationError)
    async def handle_task_validation(request: Request, exc: TaskValidationError) -> JSONResponse:
        return error_response(400, "Validation failed", errors=exc.errors)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        return error_response(400, "Validation failed", errors=_request_errors_to_fields(exc))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 404:
            return error_response(404, "Endpoint not found")
        response = error_response(exc.status_code, str(exc.detail))
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {type(exc).__name__}")
        settings = getattr(request.app.state, "settings", None)
        detail = str(exc) if settings is not None and settings.debug else None
        return error_response(500, "Internal server error", error=detail)
