import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from rafflecode.errors import UserError

logger = logging.getLogger(__name__)


def create_json_error_response(status_code: int, message: str, error_type: str | None = None) -> JSONResponse:
    """Create JSON error response with optional type for machine parsing."""
    content = {"error": message}
    if error_type:
        content["type"] = error_type
    return JSONResponse(status_code=status_code, content=content)


async def user_error_handler(_: Request, exc: Exception) -> Response:
    """Handle UserError subclasses with the status code and type they declare."""
    if not isinstance(exc, UserError):
        raise exc
    return create_json_error_response(status_code=exc.status_code, message=str(exc), error_type=exc.error_type)


async def request_validation_error_handler(_: Request, exc: Exception) -> Response:
    """Report malformed request bodies as 400 instead of FastAPI's default 422."""
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    details = []
    for error in errors:
        # Drop the leading "body" segment from the location
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(loc)
        details.append(f"{field}: {error['msg']}" if field else str(error["msg"]))
    message = "Invalid request: " + "; ".join(details) if details else "Invalid request"
    return create_json_error_response(status_code=400, message=message, error_type="validation_error")


async def storage_error_handler(_: Request, exc: Exception) -> Response:
    """Handle code store write and delete failures."""
    logger.error("Storage error: %s", exc)
    return create_json_error_response(status_code=500, message=str(exc), error_type="storage_error")


async def general_exception_handler(_: Request, exc: Exception) -> Response:
    """Handle unexpected errors (500)."""
    logger.exception("Unexpected error: %s", exc)
    return create_json_error_response(
        status_code=500, message="An unexpected error occurred.", error_type="internal_server_error"
    )
