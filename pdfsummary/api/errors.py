from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pdfsummary.logging.logger import Log


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the ``{"error": message}`` body used by every failure response."""
    return JSONResponse(status_code=status_code, content={"error": message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    Log.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
    return error_response(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    Log.error(f"Unhandled error on {request.method} {request.url.path}: {exc!r}")
    return error_response(500, "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    """Attach the JSON error responders to the application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)
