"""
RPC pool state.

The sticky index of a NetworkProfile is a hint: it only decides where the
next sweep starts. Reads and writes are unsynchronised; concurrent requests
may start from a stale value and the last successful writer wins.
"""

from typing import Dict, Iterable, Optional

from greffier.config.settings import GreffierConfig
from greffier.domain.exceptions import NetworkNotConfiguredError
from greffier.domain.value_objects.network import Network, NetworkProfile
from greffier.infrastructure.monitoring import get_logger, metrics

logger = get_logger(__name__)


def start_index(profile: NetworkProfile) -> int:
    """Endpoint index a new sweep starts from."""
    return profile.sticky_index


def commit(profile: NetworkProfile, winning_index: int) -> None:
    """
    Record the endpoint that just served a request successfully.

    Args:
        profile: Network pool
        winning_index: Index of the endpoint pair that succeeded
    """
    if not 0 <= winning_index < profile.size:
        raise ValueError(
            f"Endpoint index {winning_index} out of range for {profile.size} endpoints"
        )
    if profile.sticky_index != winning_index:
        logger.info(
            f"RPC pool {profile.network.value}: sticky index "
            f"{profile.sticky_index} -> {winning_index}"
        )
        profile.sticky_index = winning_index
        metrics.rpc_sticky_index.labels(network=profile.network.value).set(
            winning_index
        )


class RpcPoolRegistry:
    """Holds one NetworkProfile per configured network tier."""

    def __init__(self, profiles: Iterable[NetworkProfile]):
        self._profiles: Dict[Network, NetworkProfile] = {
            profile.network: profile for profile in profiles
        }

    @classmethod
    def from_settings(cls, settings: GreffierConfig) -> "RpcPoolRegistry":
        """
        Build profiles for every network with RPCs configured.

        Networks without RPCs are left out; requests for them fail with
        NetworkNotConfiguredError.
        """
        profiles = []
        for network in Network:
            network_config = settings.get_network_config(network)
            if not network_config.has_rpcs:
                logger.warning(f"No RPC endpoints configured for {network.value}")
                continue
            profiles.append(
                NetworkProfile.from_urls(
                    network,
                    network_config.child_rpcs,
                    network_config.parent_rpcs,
                )
            )
        return cls(profiles)

    def get(self, network: Network) -> NetworkProfile:
        profile = self._profiles.get(network)
        if profile is None:
            raise NetworkNotConfiguredError(
                details={"network": network.value},
            )
        return profile

    def find(self, network: Network) -> Optional[NetworkProfile]:
        return self._profiles.get(network)

    @property
    def networks(self) -> list:
        return sorted(network.value for network in self._profiles)
