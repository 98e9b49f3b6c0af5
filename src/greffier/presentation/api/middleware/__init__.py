"""
API middleware and exception handlers.
"""

from greffier.presentation.api.middleware.error_handler import (
    greffier_exception_handler,
    request_validation_handler,
    unhandled_exception_handler,
)
from greffier.presentation.api.middleware.metrics_middleware import (
    MetricsMiddleware,
)

__all__ = [
    "MetricsMiddleware",
    "greffier_exception_handler",
    "request_validation_handler",
    "unhandled_exception_handler",
]
