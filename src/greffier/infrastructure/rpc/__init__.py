"""
RPC failover: pool state, error classification and retry sweep.
"""

from greffier.infrastructure.rpc.error_classifier import (
    Classification,
    ErrorClassifier,
)
from greffier.infrastructure.rpc.pool_state import RpcPoolRegistry
from greffier.infrastructure.rpc.retry_orchestrator import RetryOrchestrator

__all__ = [
    "Classification",
    "ErrorClassifier",
    "RpcPoolRegistry",
    "RetryOrchestrator",
]
