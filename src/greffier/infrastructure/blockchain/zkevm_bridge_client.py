"""
zkEVM bridge API client.

Single upstream per network tier, no retry. Non-2xx answers are business
answers from the bridge and are passed through as BridgeApiError.
"""

import asyncio
from typing import Any, Dict, Mapping, Optional, Tuple

import aiohttp

from greffier.domain.exceptions import (
    BridgeApiError,
    BridgeConnectionException,
    BridgeException,
    BridgeTimeoutException,
    NetworkNotConfiguredError,
)
from greffier.domain.value_objects.network import Network


class ZkEVMBridgeClient:
    """Client for the zkEVM bridge service API."""

    def __init__(
        self,
        base_urls: Mapping[Network, Optional[str]],
        timeout: float = 15.0,
    ):
        """
        Initialize bridge API client.

        Args:
            base_urls: Bridge API base URL per network tier
            timeout: Request timeout in seconds
        """
        self.base_urls = {
            network: url.rstrip("/") for network, url in base_urls.items() if url
        }
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings) -> "ZkEVMBridgeClient":
        return cls(
            base_urls={
                network: settings.get_network_config(network).zkevm_bridge_url
                for network in Network
            },
            timeout=settings.timeouts.bridge_call,
        )

    def is_configured(self, network: Network) -> bool:
        return network in self.base_urls

    async def get_bridge(
        self, network: Network, net_id: int, deposit_cnt: int
    ) -> Any:
        """Deposit details for ``(net_id, deposit_cnt)``."""
        return await self._get(network, "/bridge", net_id, deposit_cnt)

    async def get_merkle_proof(
        self, network: Network, net_id: int, deposit_cnt: int
    ) -> Any:
        """Claim merkle proof for ``(net_id, deposit_cnt)``."""
        return await self._get(network, "/merkle-proof", net_id, deposit_cnt)

    async def _get(
        self,
        network: Network,
        endpoint: str,
        net_id: int,
        deposit_cnt: int,
    ) -> Any:
        """
        Call a bridge API endpoint.

        Raises:
            BridgeApiError: On a non-2xx answer
            BridgeConnectionException: On connection error
            BridgeTimeoutException: On timeout
            NetworkNotConfiguredError: If no bridge URL is configured
        """
        base_url = self.base_urls.get(network)
        if base_url is None:
            raise NetworkNotConfiguredError(
                details={"network": network.value, "upstream": "zkevm_bridge"},
            )

        status, data = await self._fetch_json(
            f"{base_url}{endpoint}",
            {"net_id": net_id, "deposit_cnt": deposit_cnt},
        )

        if not 200 <= status < 300:
            raise BridgeApiError(
                self._error_message(data),
                status_code=status,
                details={"endpoint": endpoint},
            )
        if isinstance(data, str):
            raise BridgeException(
                "Bridge API returned a non-JSON body",
                details={"endpoint": endpoint},
            )
        return data

    @staticmethod
    def _error_message(data: Any) -> str:
        if isinstance(data, dict) and data.get("message"):
            return str(data["message"])
        if isinstance(data, str):
            return data
        return str(data)

    async def _fetch_json(
        self, url: str, params: Dict[str, Any]
    ) -> Tuple[int, Any]:
        """Inner GET; returns status and decoded body (text if not JSON)."""
        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(
                    url,
                    params=params,
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as response:
                    text = await response.text()
                    try:
                        data = await response.json(content_type=None)
                    except ValueError:
                        data = text
                    return response.status, data

        except aiohttp.ClientError as e:
            raise BridgeConnectionException(
                f"Bridge API connection error: {str(e)}",
                details={"url": url},
            ) from e
        except asyncio.TimeoutError as e:
            raise BridgeTimeoutException(
                f"Bridge API timeout: {url}",
                details={"timeout": self.timeout},
            ) from e
