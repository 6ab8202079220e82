"""Application exceptions and global error handlers.

Every error body has the shape ``{"error": "<message>"}``. Causes of
persistence and unexpected failures are logged, never returned.
"""
import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = structlog.get_logger()

INVALID_PAYLOAD = "Invalid request payload"


class AppException(Exception):
    status_code = 500
    default_detail = "An unexpected error occurred."

    def __init__(self, detail: str | None = None, status_code: int | None = None):
        self.detail = detail or self.default_detail
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.detail)


class PayloadError(AppException):
    """Request body could not be deserialized into the expected shape."""
    status_code = 400
    default_detail = INVALID_PAYLOAD


class NotFoundError(AppException):
    status_code = 404
    default_detail = "Record not found!"


class PersistenceError(AppException):
    status_code = 500
    default_detail = "Failed to access the database"


def _error(status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": detail})


def setup_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppException)
    async def app_exception_handler(_request: Request, exc: AppException) -> JSONResponse:
        return _error(exc.status_code, exc.detail)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        # A non-integer id can never match a record.
        if errors and all((err.get("loc") or ("",))[0] == "path" for err in errors):
            return _error(404, NotFoundError.default_detail)
        logger.info("invalid_payload", path=request.url.path, errors=len(errors))
        return _error(400, INVALID_PAYLOAD)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(_request: Request, exc: Exception) -> JSONResponse:
        logger.error("unhandled_exception", error=str(exc), exc_info=True)
        return _error(500, AppException.default_detail)
