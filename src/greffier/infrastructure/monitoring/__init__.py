"""
Monitoring infrastructure: logging and Prometheus metrics.
"""

from greffier.infrastructure.monitoring import metrics
from greffier.infrastructure.monitoring.logger import (
    JSONFormatter,
    get_logger,
    setup_logging,
)

__all__ = [
    "metrics",
    "JSONFormatter",
    "get_logger",
    "setup_logging",
]
