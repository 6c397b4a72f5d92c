import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Internal server error"


def _error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def _describe_validation_error(exc: RequestValidationError) -> str:
    """Render pydantic errors as `field: message` pairs."""
    parts = []
    for err in exc.errors():
        # byte offsets of malformed JSON and list indexes are not field names
        location = ".".join(
            item for item in err.get("loc", ())
            if isinstance(item, str) and item not in ("body", "path")
        )
        parts.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


def register_exception_handlers(app: FastAPI, expose_error_details: bool) -> None:
    """
    Install handlers that render every failure as {"error": message}.

    Storage failures carry the driver message only when expose_error_details
    is set; otherwise clients receive a generic message.
    """

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return _error_response(status.HTTP_400_BAD_REQUEST, _describe_validation_error(exc))

    @app.exception_handler(SQLAlchemyError)
    async def storage_exception_handler(request: Request, exc: SQLAlchemyError):
        logger.exception("Storage failure on %s %s", request.method, request.url.path)
        message = str(exc.orig if getattr(exc, "orig", None) is not None else exc)
        if not expose_error_details:
            message = GENERIC_ERROR_MESSAGE
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message)
