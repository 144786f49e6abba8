"""RFC 7807 Problem Details error handling.

Every error leaves the service in one format:

    {
        "type": "about:blank",
        "title": "Payload Too Large",
        "status": 413,
        "detail": "Document too large (max 10485760 bytes)",
        "instance": "/api/v1/extract/file"
    }

These cover the acquisition side only (bad upload, oversized payload).
A document with no detectable transactions is a normal 200 response.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class AppError(Exception):
    """Base application error."""

    def __init__(self, detail: str, status_code: int = 500, error_type: str = "about:blank"):
        self.detail = detail
        self.status_code = status_code
        self.error_type = error_type
        super().__init__(detail)


class BadRequestError(AppError):
    """Upload rejected before extraction (wrong file type, empty form)."""

    def __init__(self, detail: str = "Bad request"):
        super().__init__(detail=detail, status_code=400)


class PayloadTooLargeError(AppError):
    """Document exceeds the configured size limit."""

    def __init__(self, detail: str = "Payload too large"):
        super().__init__(detail=detail, status_code=413)


def _build_problem_detail(
    status: int,
    title: str,
    detail: str,
    error_type: str = "about:blank",
    instance: str = "",
) -> dict:
    """Build RFC 7807 Problem Details response body."""
    body = {
        "type": error_type,
        "title": title,
        "status": status,
        "detail": detail,
    }
    if instance:
        body["instance"] = instance
    return body


# HTTP status code to title mapping
_STATUS_TITLES = {
    400: "Bad Request",
    404: "Not Found",
    405: "Method Not Allowed",
    413: "Payload Too Large",
    422: "Unprocessable Entity",
    500: "Internal Server Error",
}


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers on the FastAPI app."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        body = _build_problem_detail(
            status=exc.status_code,
            title=_STATUS_TITLES.get(exc.status_code, "Error"),
            detail=exc.detail,
            error_type=exc.error_type,
            instance=str(request.url.path),
        )
        return JSONResponse(status_code=exc.status_code, content=body)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        body = _build_problem_detail(
            status=exc.status_code,
            title=_STATUS_TITLES.get(exc.status_code, "Error"),
            detail=detail,
            instance=str(request.url.path),
        )
        return JSONResponse(status_code=exc.status_code, content=body)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        first = errors[0] if errors else {}
        location = ".".join(str(part) for part in first.get("loc", ()))
        detail = f"{location}: {first.get('msg', 'invalid request')}" if location else "Invalid request"
        body = _build_problem_detail(
            status=422,
            title=_STATUS_TITLES[422],
            detail=detail,
            instance=str(request.url.path),
        )
        return JSONResponse(status_code=422, content=body)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        body = _build_problem_detail(
            status=500,
            title="Internal Server Error",
            detail="An unexpected error occurred",
            instance=str(request.url.path),
        )
        return JSONResponse(status_code=500, content=body)
