"""
Error Monitoring and Logging
Centralized logging of unexpected failures with request context
"""
import logging
from typing import Optional
from fastapi import Request

logger = logging.getLogger(__name__)

SENSITIVE_HEADERS = ["authorization", "cookie", "x-api-key"]


def capture_exception(error: Exception, context: Optional[dict] = None):
    """Capture exception and log it"""
    error_msg = f"Unhandled exception: {error}"
    if context:
        context_str = ", ".join([f"{k}={v}" for k, v in context.items()])
        error_msg += f" | Context: {context_str}"
    logger.error(error_msg, exc_info=error)


def request_context(request: Request) -> dict:
    headers = dict(request.headers)
    for header in SENSITIVE_HEADERS:
        headers.pop(header, None)
    return {
        "method": request.method,
        "path": request.url.path,
        "client": request.client.host if request.client else None,
        "headers": headers,
    }


def log_error_with_context(error: Exception, request: Optional[Request] = None):
    """Log error with request context"""
    context = {}
    if request is not None:
        context["request"] = request_context(request)
    capture_exception(error, context)
