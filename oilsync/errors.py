"""
Domain errors and the JSON error envelope.

Services raise the ``ServiceError`` subclasses below; the handlers registered by
``register_exception_handlers`` turn them (and FastAPI's own errors) into
``{"success": false, "message": ..., "errorType": ...}`` responses.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for errors raised by the service layer."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_type = "bad_request"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Custom validation error exception"""
    error_type = "validation_error"


class InvalidStateError(ServiceError):
    """Operation not allowed in the resource's current state."""
    error_type = "invalid_state"


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    error_type = "not_found"


class ConflictError(ServiceError):
    status_code = status.HTTP_409_CONFLICT
    error_type = "conflict"


class AuthenticationError(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    error_type = "unauthorized"


class PermissionDeniedError(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN
    error_type = "forbidden"


class DeliveryError(ServiceError):
    """An OTP or notification could not be delivered."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_type = "delivery_failed"


_HTTP_ERROR_TYPES = {
    400: "bad_request",
    401: "unauthorized",
    403: "forbidden",
    404: "not_found",
    405: "method_not_allowed",
    409: "conflict",
}


def error_response(status_code: int, message: str, error_type: str, **extra) -> JSONResponse:
    content = {"success": False, "message": message, "errorType": error_type}
    content.update(extra)
    return JSONResponse(status_code=status_code, content=content)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if first.get("type") == "missing":
        return f"{field} is required" if field else "Request body is required"
    message = first.get("msg", "Invalid value")
    return f"{field}: {message}" if field else message


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope-producing exception handlers on ``app``."""

    @app.exception_handler(ServiceError)
    async def handle_service_error(request: Request, exc: ServiceError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return error_response(exc.status_code, exc.message, exc.error_type)

    @app.exception_handler(HTTPException)
    async def handle_http_exception(request: Request, exc: HTTPException):
        response = error_response(
            exc.status_code,
            str(exc.detail),
            _HTTP_ERROR_TYPES.get(exc.status_code, "error"),
        )
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            _validation_message(exc),
            "validation_error",
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        request_id = getattr(request.state, "request_id", None)
        logger.exception(f"Unhandled error on {request.method} {request.url.path} [{request_id}]")
        production = request.app.state.settings.is_production
        message = "Internal server error. Please try again later." if production else str(exc)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            message,
            "server_error",
            requestId=request_id,
        )
