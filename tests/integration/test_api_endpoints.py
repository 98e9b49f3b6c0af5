"""
Integration tests for the HTTP API.

Full application from create_app with config/test.yaml, fake chain clients
and a stubbed bridge API.
"""

import pytest
from fakes import EVENT_SIGNATURE, TX_HASH, child_url
from fastapi.testclient import TestClient

from greffier.config.settings import GreffierConfig
from greffier.domain.exceptions import BridgeTimeoutException, RPCTimeoutException
from greffier.main import create_app

GENERIC_ERROR = "Something went wrong while computing"


# ================================================================
# Service endpoints
# ================================================================


class TestServiceEndpoints:
    """Root, health and metrics."""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["service"] == "greffier"

    def test_liveness(self, client):
        response = client.get("/health/live")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_readiness(self, client):
        """Test per-network checks from config/test.yaml."""
        response = client.get("/health/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["checks"]["mainnet"]["rpc_endpoints"] == 3
        assert body["checks"]["testnet"]["zkevm_bridge"] == "configured"

    def test_health_alias(self, client):
        assert client.get("/health").json()["status"] == "healthy"

    def test_readiness_without_networks(self, chain_factory, bridge_client):
        """Test 503 when no RPC pool is configured."""
        app = create_app(
            settings=GreffierConfig(metrics={"enabled": False}),
            chain_client_factory=chain_factory,
            bridge_client=bridge_client,
        )
        with TestClient(app) as client:
            response = client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"

    def test_metrics(self, test_settings, chain_factory, bridge_client):
        """Test request metrics use the route template as endpoint label."""
        settings = test_settings.model_copy(
            update={"metrics": test_settings.metrics.model_copy(update={"enabled": True})}
        )
        app = create_app(
            settings=settings,
            chain_client_factory=chain_factory,
            bridge_client=bridge_client,
        )
        with TestClient(app) as client:
            client.get("/api/v1/matic/block-included/1000")
            response = client.get("/metrics")

        assert response.status_code == 200
        assert "greffier_http_requests_total" in response.text
        assert "/api/v1/{network}/block-included/{blockNumber}" in response.text
        assert "greffier_rpc_attempts_total" in response.text

    def test_metrics_label_hash_path_by_template(
        self, test_settings, chain_factory, bridge_client
    ):
        """Test a burn tx hash never becomes a metrics label."""
        settings = test_settings.model_copy(
            update={"metrics": test_settings.metrics.model_copy(update={"enabled": True})}
        )
        app = create_app(
            settings=settings,
            chain_client_factory=chain_factory,
            bridge_client=bridge_client,
        )
        with TestClient(app) as client:
            client.get(
                f"/api/v1/matic/exit-payload/{TX_HASH}",
                params={"eventSignature": EVENT_SIGNATURE},
            )
            response = client.get("/metrics")

        assert "/api/v1/{network}/exit-payload/{burnTxHash}" in response.text
        assert TX_HASH not in response.text


# ================================================================
# Block Inclusion
# ================================================================


class TestBlockIncluded:
    """GET /api/v1/{network}/block-included/{blockNumber}"""

    def test_included(self, client):
        response = client.get("/api/v1/matic/block-included/1000")

        assert response.status_code == 200
        body = response.json()
        assert body["headerBlockNumber"] == "0x2710"
        assert body["blockNumber"] == 1000
        assert body["start"] <= 1000 <= body["end"]
        assert body["message"] == "success"

    def test_leading_zeros(self, client):
        response = client.get("/api/v1/amoy/block-included/0001000")

        assert response.status_code == 200
        assert response.json()["blockNumber"] == 1000

    def test_not_included(self, client):
        response = client.get("/api/v1/matic/block-included/5000")

        assert response.status_code == 404
        assert response.json() == {
            "error": True,
            "kind": "no_block_found",
            "message": "No block found",
        }

    @pytest.mark.parametrize("block", ["12a", "-1", "1.5", "0x10"])
    def test_invalid_block_number(self, client, block):
        response = client.get(f"/api/v1/matic/block-included/{block}")

        assert response.status_code == 400
        assert response.json() == {"error": True, "message": "Invalid block number!"}

    def test_unknown_network(self, client):
        response = client.get("/api/v1/goerli/block-included/1000")

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid network!"

    def test_all_endpoints_down(self, client, chain_state):
        """Test a generic 500 that leaks no endpoint URL."""
        for i in range(3):
            chain_state.endpoint_failures[child_url(i)] = RPCTimeoutException(
                f"timeout at {child_url(i)}"
            )

        response = client.get("/api/v1/matic/block-included/1000")

        assert response.status_code == 500
        assert response.json() == {"error": True, "message": GENERIC_ERROR}
        assert "invalid" not in response.text

    def test_failover_is_sticky(self, client, chain_state, chain_factory):
        """Test the next request starts at the endpoint that last succeeded."""
        chain_state.endpoint_failures[child_url(0)] = RPCTimeoutException("t")
        client.get("/api/v1/matic/block-included/1000")
        chain_factory.constructed.clear()

        response = client.get("/api/v1/matic/block-included/1000")

        assert response.status_code == 200
        assert chain_factory.attempted_children == [child_url(1)]


# ================================================================
# Fast Merkle Proof
# ================================================================


class TestFastMerkleProof:
    """GET /api/v1/{network}/fast-merkle-proof"""

    def test_proof(self, client, chain_state):
        response = client.get(
            "/api/v1/matic/fast-merkle-proof",
            params={"start": "900", "end": "1100", "number": "1000"},
        )

        assert response.status_code == 200
        assert response.json() == {"proof": chain_state.proof}

    @pytest.mark.parametrize(
        "params",
        [
            {"start": "900", "end": "1100"},
            {"start": "900", "end": "1100", "number": "1101"},
            {"start": "1100", "end": "900", "number": "1000"},
            {"start": "a", "end": "1100", "number": "1000"},
        ],
    )
    def test_invalid_range(self, client, params):
        response = client.get("/api/v1/matic/fast-merkle-proof", params=params)

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid start or end or block numbers!"

    def test_invalid_proof(self, client, chain_state):
        chain_state.proof = "0x" + "11" * 33

        response = client.get(
            "/api/v1/matic/fast-merkle-proof",
            params={"start": "900", "end": "1100", "number": "1000"},
        )

        assert response.status_code == 500
        assert response.json()["message"] == "Invalid merkle proof created"


# ================================================================
# Exit Payloads
# ================================================================


class TestExitPayload:
    """GET /api/v1/{network}/exit-payload/{burnTxHash}"""

    def test_payload(self, client):
        response = client.get(
            f"/api/v1/matic/exit-payload/{TX_HASH}",
            params={"eventSignature": EVENT_SIGNATURE},
        )

        assert response.status_code == 200
        assert response.json() == {
            "message": "Payload generation success",
            "result": "0xf90a1b",
        }

    def test_token_index(self, client):
        response = client.get(
            f"/api/v1/matic/exit-payload/{TX_HASH}",
            params={"eventSignature": EVENT_SIGNATURE, "tokenIndex": "1"},
        )

        assert response.status_code == 200

    def test_invalid_token_index(self, client):
        response = client.get(
            f"/api/v1/matic/exit-payload/{TX_HASH}",
            params={"eventSignature": EVENT_SIGNATURE, "tokenIndex": "x"},
        )

        assert response.status_code == 400

    def test_missing_event_signature(self, client):
        response = client.get(f"/api/v1/matic/exit-payload/{TX_HASH}")

        assert response.status_code == 400
        assert response.json()["message"] == "Burn tx or Event Signature missing!"

    def test_incorrect_hash(self, client):
        response = client.get(
            "/api/v1/matic/exit-payload/0x1234",
            params={"eventSignature": EVENT_SIGNATURE},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Incorrect Burn tx or Event Signature!"

    def test_event_signature_with_trailing_newline(self, client, chain_factory):
        """Test a 67-character signature is rejected before any chain call."""
        response = client.get(
            f"/api/v1/matic/exit-payload/{TX_HASH}",
            params={"eventSignature": EVENT_SIGNATURE + "\n"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Incorrect Burn tx or Event Signature!"
        assert chain_factory.constructed == []

    def test_not_checkpointed(self, client, chain_state):
        chain_state.checkpointed = False

        response = client.get(
            f"/api/v1/mumbai/exit-payload/{TX_HASH}",
            params={"eventSignature": EVENT_SIGNATURE},
        )

        assert response.status_code == 404
        assert response.json()["kind"] == "transaction_not_checkpointed"

    def test_unknown_transaction(self, client, chain_state):
        chain_state.receipt = None

        response = client.get(
            f"/api/v1/matic/exit-payload/{TX_HASH}",
            params={"eventSignature": EVENT_SIGNATURE},
        )

        assert response.status_code == 404
        assert response.json() == {
            "error": True,
            "kind": "incorrect_transaction",
            "message": "Incorrect burn transaction",
        }


class TestAllExitPayloads:
    """GET /api/v1/{network}/all-exit-payloads/{burnTxHash}"""

    def test_payloads(self, client):
        response = client.get(
            f"/api/v1/matic/all-exit-payloads/{TX_HASH}",
            params={"eventSignature": EVENT_SIGNATURE},
        )

        assert response.status_code == 200
        assert response.json()["result"] == ["0xf90a1b", "0xf90a1c"]

    def test_missing_event_signature(self, client):
        response = client.get(f"/api/v1/matic/all-exit-payloads/{TX_HASH}")

        assert response.status_code == 400


# ================================================================
# zkEVM Bridge
# ================================================================


class TestZkEVMBridge:
    """GET /api/zkevm/{network}/bridge and /merkle-proof"""

    def test_bridge_passthrough(self, client, bridge_client):
        bridge_client.responses["bridge"] = (200, {"deposit": {"amount": "1"}})

        response = client.get(
            "/api/zkevm/mainnet/bridge", params={"net_id": "0", "deposit_cnt": "5"}
        )

        assert response.status_code == 200
        assert response.json() == {"deposit": {"amount": "1"}}
        assert bridge_client.requests == [
            ("http://bridge-mainnet.invalid/bridge", {"net_id": 0, "deposit_cnt": 5})
        ]

    def test_cardona_is_testnet(self, client, bridge_client):
        client.get(
            "/api/zkevm/cardona/merkle-proof",
            params={"net_id": "1", "deposit_cnt": "2"},
        )

        assert bridge_client.requests[0][0] == (
            "http://bridge-testnet.invalid/merkle-proof"
        )

    def test_upstream_error_passed_through(self, client, bridge_client):
        bridge_client.responses["merkle-proof"] = (400, {"message": "invalid deposit"})

        response = client.get(
            "/api/zkevm/mainnet/merkle-proof",
            params={"net_id": "0", "deposit_cnt": "5"},
        )

        assert response.status_code == 404
        assert response.json() == {
            "error": True,
            "kind": "bridge_error",
            "message": "invalid deposit",
        }

    def test_upstream_unavailable(self, client, bridge_client):
        bridge_client.responses["bridge"] = BridgeTimeoutException("timeout")

        response = client.get(
            "/api/zkevm/mainnet/bridge", params={"net_id": "0", "deposit_cnt": "5"}
        )

        assert response.status_code == 500
        assert response.json()["message"] == GENERIC_ERROR

    def test_invalid_params(self, client, bridge_client):
        response = client.get(
            "/api/zkevm/mainnet/bridge", params={"net_id": "-1", "deposit_cnt": "5"}
        )

        assert response.status_code == 400
        assert bridge_client.requests == []

    def test_unknown_network(self, client):
        response = client.get(
            "/api/zkevm/matic/bridge", params={"net_id": "0", "deposit_cnt": "5"}
        )

        assert response.status_code == 400
