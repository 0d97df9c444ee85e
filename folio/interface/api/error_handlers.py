"""Global exception handlers.

Every failure leaves the API as the error envelope::

    {"success": false, "error": {"code", "message", "details"?}, "timestamp"}

Unexpected exceptions never leak their details.
"""

from typing import Any

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from folio.domain.error import DomainError
from folio.domain.model.common import utcnow
from folio.interface.error import APIError, ErrorCode


def error_envelope(code: ErrorCode, message: str, details: Any = None) -> dict:
    error: dict[str, Any] = {"code": code.value, "message": message}
    if details is not None:
        error["details"] = details
    return {"success": False, "error": error, "timestamp": utcnow().isoformat()}


def api_error_response(error: APIError) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code,
        content=error_envelope(error.code, error.message, error.details),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_api_error_handler(app)
    _register_domain_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_api_error_handler(app: FastAPI) -> None:
    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
        logfire.warn(
            "API error",
            code=exc.code.value,
            message=exc.message,
            path=request.url.path,
        )
        return api_error_response(exc)


def _register_domain_error_handler(app: FastAPI) -> None:
    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        error = APIError.from_domain_error(exc)
        logfire.warn(
            "Domain error",
            code=error.code.value,
            message=str(exc),
            path=request.url.path,
        )
        return api_error_response(error)


def _register_http_error_handler(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        error = APIError.from_http_status(exc.status_code, str(exc.detail))
        logfire.warn(
            "HTTP error",
            code=error.code.value,
            status_code=exc.status_code,
            path=request.url.path,
        )
        response = api_error_response(error)
        if exc.headers:
            response.headers.update(exc.headers)
        return response


def _register_validation_error_handler(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        details = [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ]
        logfire.warn("Request validation failed", path=request.url.path, errors=details)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_envelope(
                ErrorCode.VALIDATION_ERROR, "Invalid request data", details
            ),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logfire.exception("Unhandled exception", path=request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_envelope(
                ErrorCode.INTERNAL_ERROR, "An unexpected error occurred"
            ),
        )
