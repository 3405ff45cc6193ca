"""
Logging setup, request logging middleware and PII masking helpers.
"""
import logging
import re
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("oilsync.requests")


def setup_logging(level: str = "INFO") -> logging.Logger:
    root = logging.getLogger()
    if not root.handlers:
        formatter = logging.Formatter(
            fmt='%(asctime)s - %(levelname)s - [%(name)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root.addHandler(handler)

    root.setLevel(level.upper())
    return root


def mask_email(email: str) -> str:
    """
    Mask an email address for logs.

    Example:
        >>> mask_email("john@example.com")
        "jo***@example.com"
    """
    if not email or "@" not in email:
        return "***"
    local, domain = email.split("@", 1)
    return f"{local[:2]}***@{domain}"


def mask_phone(phone: str) -> str:
    """
    Mask a phone number for logs, keeping the area code and last 4 digits.

    Example:
        >>> mask_phone("(555) 123-4567")
        "555***4567"
    """
    digits = re.sub(r"\D", "", phone or "")
    if len(digits) < 7:
        return "***"
    return f"{digits[:3]}***{digits[-4:]}"


def mask_identifier(identifier: str) -> str:
    """Mask an OTP identifier, which is either an email or a phone number."""
    if identifier and "@" in identifier:
        return mask_email(identifier)
    return mask_phone(identifier)


def new_request_id() -> str:
    return f"req_{uuid.uuid4().hex[:12]}"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tag each request with an id and log its outcome."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or new_request_id()
        request.state.request_id = request_id
        started = time.perf_counter()

        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers["X-Request-ID"] = request_id
        log = logger.warning if response.status_code >= 500 else logger.info
        log(f"{request.method} {request.url.path} - {response.status_code} ({elapsed_ms:.1f}ms) [{request_id}]")
        return response
