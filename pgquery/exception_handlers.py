from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from pgquery.config.logging_config import logger
from pgquery.errors import AppError
from pgquery.models.schemas import ErrorResponse


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Render every handler failure as the {error, success: false} envelope."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        return error_response(exc.message, exc.http_status)

    # Any other failure is answered here and not propagated to the server
    @app.middleware("http")
    async def unexpected_error_middleware(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(f"Unhandled error on {request.url.path}: {exc!r}")
            return error_response(str(exc) or "Unknown error", 400)
