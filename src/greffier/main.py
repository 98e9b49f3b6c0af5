"""
Main FastAPI application entry point.

Uses Application Factory Pattern. Collaborators (chain client factory, bridge
client) can be injected for tests; otherwise they are built from settings.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from greffier import __version__
from greffier.application.use_cases import (
    AllExitPayloadsBuilder,
    BlockInclusionQuery,
    BridgeProxy,
    ExitPayloadBuilder,
    FastMerkleProofQuery,
)
from greffier.config.settings import GreffierConfig, get_settings
from greffier.domain.exceptions import GreffierException
from greffier.infrastructure.blockchain import (
    ChainClientFactory,
    SidecarChainClientFactory,
    ZkEVMBridgeClient,
)
from greffier.infrastructure.monitoring import get_logger, setup_logging
from greffier.infrastructure.monitoring.health_check import GreffierHealthCheck
from greffier.infrastructure.rpc import (
    ErrorClassifier,
    RetryOrchestrator,
    RpcPoolRegistry,
)
from greffier.presentation.api.middleware import (
    MetricsMiddleware,
    greffier_exception_handler,
    request_validation_handler,
    unhandled_exception_handler,
)
from greffier.presentation.api.routes import (
    health_router,
    proofs_router,
    zkevm_router,
)


def create_app(
    settings: Optional[GreffierConfig] = None,
    chain_client_factory: Optional[ChainClientFactory] = None,
    bridge_client: Optional[ZkEVMBridgeClient] = None,
) -> FastAPI:
    """
    Application factory - creates and configures FastAPI app.

    Args:
        settings: Optional GreffierConfig instance (for testing)
        chain_client_factory: Optional chain client factory (for testing)
        bridge_client: Optional zkEVM bridge client (for testing)

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = get_settings()

    setup_logging(level=settings.log_level.upper(), json_logs=settings.json_logs)
    logger = get_logger(__name__)

    if chain_client_factory is None:
        chain_client_factory = SidecarChainClientFactory(
            sidecar_url=settings.chain_sidecar_url,
            timeout=settings.timeouts.chain_call,
        )
    if bridge_client is None:
        bridge_client = ZkEVMBridgeClient.from_settings(settings)

    pool_registry = RpcPoolRegistry.from_settings(settings)
    classifier = ErrorClassifier()
    orchestrator = RetryOrchestrator(chain_client_factory, classifier)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info(
            f"Starting {settings.app_name} "
            f"(networks: {', '.join(pool_registry.networks) or 'none'})"
        )
        yield
        logger.info(f"{settings.app_name} stopped")

    app = FastAPI(
        title=settings.app_name,
        description="Checkpoint inclusion, block proofs and exit payloads",
        version=__version__,
        lifespan=lifespan,
    )

    # Store in app state
    app.state.settings = settings
    app.state.pool_registry = pool_registry
    app.state.bridge_client = bridge_client
    app.state.block_inclusion_query = BlockInclusionQuery(orchestrator, pool_registry)
    app.state.fast_merkle_proof_query = FastMerkleProofQuery(
        orchestrator, pool_registry
    )
    app.state.exit_payload_builder = ExitPayloadBuilder(orchestrator, pool_registry)
    app.state.all_exit_payloads_builder = AllExitPayloadsBuilder(
        orchestrator, pool_registry
    )
    app.state.bridge_proxy = BridgeProxy(bridge_client, classifier)
    app.state.health_check = GreffierHealthCheck(pool_registry, bridge_client)

    # Middleware chain
    if settings.metrics.enabled:
        app.add_middleware(MetricsMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Exception handlers
    app.add_exception_handler(GreffierException, greffier_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Register routes
    app.include_router(health_router)
    app.include_router(proofs_router, prefix="/api")
    app.include_router(zkevm_router, prefix="/api")

    @app.get("/", tags=["health"])
    async def root():
        """Root endpoint."""
        return {
            "service": "greffier",
            "status": "running",
            "version": __version__,
            "description": settings.app_name,
        }

    @app.get("/metrics", tags=["monitoring"])
    async def metrics():
        """
        Prometheus metrics endpoint.

        Returns metrics in Prometheus text format for scraping.
        """
        return Response(
            content=generate_latest(),
            media_type=CONTENT_TYPE_LATEST,
        )

    logger.info("Greffier application created")
    return app


def get_app() -> FastAPI:
    """
    Create application instance.

    For uvicorn: uvicorn greffier.main:get_app --factory
    """
    return create_app()


def main():
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "greffier.main:get_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
