"""
Chain client backed by the internal chain sidecar.

The sidecar runs the PoS client library (header traversal, proof building,
ABI/RLP encoding). Every call carries the endpoint pair the client is bound
to, so one sidecar serves every attempt of every sweep.
"""

import asyncio
from typing import Any, Dict, List, Optional

import aiohttp

from greffier.domain.exceptions import (
    ChainClientConstructionException,
    ChainClientException,
    EventLogNotFoundException,
    MalformedReceiptException,
    MalformedResponseException,
    RPCException,
    RPCTimeoutException,
    TokenIndexOutOfRangeException,
)
from greffier.domain.value_objects.network import EndpointPair, Network
from greffier.infrastructure.blockchain.chain_client import (
    ChainClient,
    ChainClientFactory,
)

# Sidecar error codes that describe the transaction, not the endpoint
BUSINESS_ERROR_CODES = {
    "EVENT_LOG_NOT_FOUND": EventLogNotFoundException,
    "TOKEN_INDEX_OUT_OF_RANGE": TokenIndexOutOfRangeException,
    "MALFORMED_RECEIPT": MalformedReceiptException,
}


class SidecarChainClient(ChainClient):
    """
    Chain client for one endpoint pair, talking to the chain sidecar.

    Owns an aiohttp session for the lifetime of one attempt.
    """

    def __init__(
        self,
        sidecar_url: str,
        network: Network,
        endpoint: EndpointPair,
        timeout: float = 30.0,
    ):
        """
        Initialize sidecar chain client.

        Args:
            sidecar_url: Base URL of the chain sidecar
            network: Network tier the endpoint pair belongs to
            endpoint: Child/parent RPC pair this client is bound to
            timeout: Per-call timeout in seconds
        """
        self.sidecar_url = sidecar_url.rstrip("/")
        self.network = network
        self.endpoint = endpoint
        self.timeout = timeout
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def _binding(self) -> Dict[str, str]:
        return {
            "network": self.network.value,
            "childRpc": self.endpoint.child_rpc_url,
            "parentRpc": self.endpoint.parent_rpc_url,
        }

    async def initialize(self) -> None:
        """
        Open the session and let the sidecar bind the endpoint pair.

        Raises:
            ChainClientConstructionException: If the binding fails
        """
        self._session = aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self.timeout)
        )
        bound = False
        try:
            await self._post("/client/init")
            bound = True
        except ChainClientException as e:
            raise ChainClientConstructionException(
                f"Chain client init failed: {e.message}",
                details={"network": self.network.value},
            ) from e
        finally:
            if not bound:
                await self.close()

    async def close(self) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None

    async def _post(
        self,
        path: str,
        data: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Call a sidecar endpoint.

        Args:
            path: Endpoint path (e.g., "/root-chain/last-child-block")
            data: Operation parameters

        Returns:
            Response body

        Raises:
            RPCException: On connection or upstream RPC error
            RPCTimeoutException: On timeout
            MalformedResponseException: On a non-JSON body
        """
        if self._session is None:
            raise RPCException("Chain client used outside of its attempt")

        body = {**self._binding, **(data or {})}
        url = f"{self.sidecar_url}{path}"

        try:
            async with self._session.post(url, json=body) as response:
                try:
                    payload = await response.json(content_type=None)
                except ValueError as e:
                    raise MalformedResponseException(
                        f"Sidecar returned non-JSON body for {path}",
                        details={"path": path, "status": response.status},
                    ) from e

                if response.status >= 400:
                    self._raise_for_error(path, response.status, payload)

                if not isinstance(payload, dict):
                    raise MalformedResponseException(
                        f"Unexpected sidecar response for {path}",
                        details={"path": path},
                    )
                return payload

        except aiohttp.ClientError as e:
            raise RPCException(
                f"Sidecar connection error: {str(e)}",
                details={"path": path},
            ) from e
        except asyncio.TimeoutError as e:
            raise RPCTimeoutException(
                f"Sidecar timeout: {path}",
                details={"path": path, "timeout": self.timeout},
            ) from e

    def _raise_for_error(self, path: str, status: int, payload: Any) -> None:
        """Translate a sidecar error body into a chain client exception."""
        code = None
        message = f"Sidecar error {status} on {path}"
        if isinstance(payload, dict):
            code = payload.get("code")
            message = payload.get("message") or message

        exception_cls = BUSINESS_ERROR_CODES.get(code, RPCException)
        raise exception_cls(message, details={"path": path, "code": code})

    @staticmethod
    def _field(payload: Dict[str, Any], key: str, path: str) -> Any:
        if key not in payload:
            raise MalformedResponseException(
                f"Missing '{key}' in sidecar response for {path}",
                details={"path": path},
            )
        return payload[key]

    @classmethod
    def _typed_field(
        cls, payload: Dict[str, Any], key: str, path: str, expected: type
    ) -> Any:
        value = cls._field(payload, key, path)
        if not isinstance(value, expected):
            raise MalformedResponseException(
                f"Expected {expected.__name__} for '{key}' in sidecar "
                f"response for {path}",
                details={"path": path, "type": type(value).__name__},
            )
        return value

    async def last_checkpointed_child_block(self) -> int:
        path = "/root-chain/last-child-block"
        payload = await self._post(path)
        try:
            return int(self._field(payload, "lastChildBlock", path))
        except (TypeError, ValueError) as e:
            raise MalformedResponseException(
                "Unparseable last child block", details={"path": path}
            ) from e

    async def find_containing_header_block(self, block_number: int) -> str:
        path = "/root-chain/find-header-block"
        payload = await self._post(path, {"blockNumber": block_number})
        return self._typed_field(payload, "headerBlockNumber", path, str)

    async def read_header_block_record(self, index: str) -> Dict[str, Any]:
        path = "/root-chain/header-block"
        payload = await self._post(path, {"headerBlockNumber": index})
        return self._typed_field(payload, "headerBlock", path, dict)

    async def get_transaction_receipt_or_null(
        self, tx_hash: str
    ) -> Optional[Dict[str, Any]]:
        path = "/child/transaction-receipt"
        payload = await self._post(path, {"txHash": tx_hash})
        return self._field(payload, "receipt", path)

    async def get_block_merkle_proof(self, number: int, start: int, end: int) -> str:
        path = "/exit-util/block-proof"
        payload = await self._post(
            path, {"number": number, "start": start, "end": end}
        )
        return self._typed_field(payload, "proof", path, str)

    async def is_checkpointed(self, tx_hash: str) -> bool:
        path = "/exit-util/is-checkpointed"
        payload = await self._post(path, {"txHash": tx_hash})
        return bool(self._field(payload, "checkpointed", path))

    async def build_exit_payload(
        self, tx_hash: str, event_signature: str, token_index: int = 0
    ) -> str:
        path = "/exit-util/exit-payload"
        payload = await self._post(
            path,
            {
                "txHash": tx_hash,
                "eventSignature": event_signature,
                "tokenIndex": token_index,
            },
        )
        return self._typed_field(payload, "payload", path, str)

    async def build_all_exit_payloads(
        self, tx_hash: str, event_signature: str
    ) -> List[str]:
        path = "/exit-util/all-exit-payloads"
        payload = await self._post(
            path, {"txHash": tx_hash, "eventSignature": event_signature}
        )
        payloads = self._field(payload, "payloads", path)
        if not isinstance(payloads, list) or not all(
            isinstance(item, str) for item in payloads
        ):
            raise MalformedResponseException(
                "Expected a list of payloads", details={"path": path}
            )
        return payloads


class SidecarChainClientFactory(ChainClientFactory):
    """Creates one SidecarChainClient per attempt."""

    def __init__(self, sidecar_url: str, timeout: float = 30.0):
        self.sidecar_url = sidecar_url
        self.timeout = timeout

    async def construct(self, network: Network, endpoint: EndpointPair) -> ChainClient:
        client = SidecarChainClient(
            sidecar_url=self.sidecar_url,
            network=network,
            endpoint=endpoint,
            timeout=self.timeout,
        )
        await client.initialize()
        return client
