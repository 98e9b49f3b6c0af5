"""
FastAPI dependency injection.

Use cases are built once by the application factory and kept on
``app.state``; routes pull them from there.
"""

from fastapi import Request

from greffier.application.use_cases import (
    AllExitPayloadsBuilder,
    BlockInclusionQuery,
    BridgeProxy,
    ExitPayloadBuilder,
    FastMerkleProofQuery,
)
from greffier.infrastructure.monitoring.health_check import GreffierHealthCheck


def get_block_inclusion_query(request: Request) -> BlockInclusionQuery:
    return request.app.state.block_inclusion_query


def get_fast_merkle_proof_query(request: Request) -> FastMerkleProofQuery:
    return request.app.state.fast_merkle_proof_query


def get_exit_payload_builder(request: Request) -> ExitPayloadBuilder:
    return request.app.state.exit_payload_builder


def get_all_exit_payloads_builder(request: Request) -> AllExitPayloadsBuilder:
    return request.app.state.all_exit_payloads_builder


def get_bridge_proxy(request: Request) -> BridgeProxy:
    return request.app.state.bridge_proxy


def get_health_check(request: Request) -> GreffierHealthCheck:
    return request.app.state.health_check
