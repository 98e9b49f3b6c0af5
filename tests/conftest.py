"""
Test fixtures and configuration.
"""

import pytest
from fakes import ChainState, FakeChainClientFactory, StubBridgeClient
from fastapi.testclient import TestClient

from greffier.config.settings import GreffierConfig, load_config
from greffier.domain.value_objects.network import Network
from greffier.main import create_app


@pytest.fixture
def test_settings() -> GreffierConfig:
    """Settings from config/test.yaml."""
    return load_config("test.yaml")


@pytest.fixture
def chain_state() -> ChainState:
    return ChainState()


@pytest.fixture
def chain_factory(chain_state: ChainState) -> FakeChainClientFactory:
    return FakeChainClientFactory(chain_state)


@pytest.fixture
def bridge_client(test_settings: GreffierConfig) -> StubBridgeClient:
    return StubBridgeClient(
        {
            network: test_settings.get_network_config(network).zkevm_bridge_url
            for network in Network
        }
    )


@pytest.fixture
def app(test_settings, chain_factory, bridge_client):
    return create_app(
        settings=test_settings,
        chain_client_factory=chain_factory,
        bridge_client=bridge_client,
    )


@pytest.fixture
def client(app):
    """HTTP client with lifespan events."""
    with TestClient(app) as test_client:
        yield test_client
