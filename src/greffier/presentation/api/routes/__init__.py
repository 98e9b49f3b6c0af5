"""
API routes module.

Exports all route routers for registration in main app.
"""

from greffier.presentation.api.routes.health import router as health_router
from greffier.presentation.api.routes.proofs import router as proofs_router
from greffier.presentation.api.routes.zkevm import router as zkevm_router

__all__ = [
    "health_router",
    "proofs_router",
    "zkevm_router",
]
