"""Global exception handlers.

Every failure is rendered as ``{"error": ...}``: validation problems as a
list of messages with 400, storage faults as the client message with 500.
Unmatched routes, including a known path called with an unsupported method,
answer 404 with an empty body.  Anything unexpected is logged with its
traceback and answered 500 without leaking internals.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from candidate_api.core.errors import ApiError

logger = logging.getLogger(__name__)

_UNMATCHED_ROUTE_STATUSES = (
    status.HTTP_404_NOT_FOUND,
    status.HTTP_405_METHOD_NOT_ALLOWED,
)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_api_error_handler(app)
    _register_request_validation_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            "api_error",
            extra={
                "path": request.url.path,
                "error_type": type(exc).__name__,
                "error_message": exc.message,
            },
        )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _register_request_validation_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = [_format_validation_error(e) for e in exc.errors()]
        logger.warning(
            "request_validation_failed",
            extra={"path": request.url.path, "errors": errors},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": errors},
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> Response:
        if exc.status_code in _UNMATCHED_ROUTE_STATUSES:
            return Response(status_code=status.HTTP_404_NOT_FOUND)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "unhandled_exception",
            extra={"path": request.url.path, "error_type": type(exc).__name__},
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )


def _format_validation_error(error: dict) -> str:
    """Render a pydantic error as ``"<field>: <message>"``."""
    field = str(error["loc"][-1]) if error.get("loc") else "request"
    return f"{field}: {error['msg']}"
