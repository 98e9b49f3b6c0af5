"""
Greffier configuration with hybrid YAML + ENV support.

Architecture:
- Python FastAPI (api_port): public proof API with RPC failover
- Chain sidecar (chain_sidecar_url): internal chain operations bound to one
  RPC endpoint pair per call

Priority: Environment variables > YAML config > Pydantic defaults
"""

import os
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from greffier.domain.value_objects.network import Network


class NetworkConfig(BaseSettings):
    """RPC pool and bridge upstream of one network tier."""

    child_rpcs: List[str] = Field(default_factory=list)
    parent_rpcs: List[str] = Field(default_factory=list)
    zkevm_bridge_url: Optional[str] = Field(default=None)

    @model_validator(mode="after")
    def check_rpc_pairs(self) -> "NetworkConfig":
        """Child and parent RPCs are used in pairs."""
        if len(self.child_rpcs) != len(self.parent_rpcs):
            raise ValueError(
                "child_rpcs and parent_rpcs must have the same length "
                f"({len(self.child_rpcs)} != {len(self.parent_rpcs)})"
            )
        return self

    @property
    def has_rpcs(self) -> bool:
        return bool(self.child_rpcs)


class TimeoutConfig(BaseSettings):
    """Per-call timeouts (seconds)."""

    chain_call: float = Field(default=30.0, ge=1.0, le=300.0)
    bridge_call: float = Field(default=15.0, ge=1.0, le=120.0)


class MetricsConfig(BaseSettings):
    """Prometheus metrics configuration."""

    enabled: bool = Field(default=True)


class GreffierConfig(BaseSettings):
    """
    Greffier configuration schema.

    Network pools are configured per tier. Each entry of ``child_rpcs`` is
    paired with the entry at the same position of ``parent_rpcs``.
    """

    model_config = SettingsConfigDict(
        env_prefix="GREFFIER_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="allow",
    )

    app_name: str = Field(default="Proof Generation API")
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(
        default=5000,
        ge=1024,
        le=65535,
        description="Public port for the proof API",
    )

    # Internal chain operations sidecar
    chain_sidecar_url: str = Field(
        default="http://127.0.0.1:5010",
        description="Chain sidecar URL (localhost only)",
    )

    # Logging
    log_level: str = Field(default="info")
    json_logs: bool = Field(default=False)

    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    mainnet: NetworkConfig = Field(default_factory=NetworkConfig)
    testnet: NetworkConfig = Field(default_factory=NetworkConfig)

    timeouts: TimeoutConfig = Field(default_factory=TimeoutConfig)
    metrics: MetricsConfig = Field(default_factory=MetricsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # Environment wins over values passed in from YAML
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = ["debug", "info", "warning", "error", "critical"]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"Invalid log_level. Must be one of: {allowed}")
        return v_lower

    @field_validator("chain_sidecar_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    def get_network_config(self, network: Network) -> NetworkConfig:
        """Get pool configuration for a network tier."""
        return self.mainnet if network.is_mainnet else self.testnet


def load_config(config_file: Optional[str] = None) -> GreffierConfig:
    """
    Load configuration from YAML files.

    Priority: Environment variables > environment-specific YAML > default YAML

    Args:
        config_file: Optional YAML filename override

    Returns:
        GreffierConfig instance
    """
    env = os.getenv("ENV", "production")

    config_map = {
        "production": "production.yaml",
        "development": "development.yaml",
        "test": "test.yaml",
    }

    current_file = Path(__file__).resolve()
    project_root = current_file.parent.parent.parent.parent
    config_dir = project_root / "config"

    default_config_path = config_dir / "default.yaml"
    merged_config = {}

    if default_config_path.exists():
        with open(default_config_path, "r") as f:
            loaded = yaml.safe_load(f)
            if loaded:
                merged_config = loaded

    if config_file is None:
        config_file = os.getenv("GREFFIER_CONFIG")
        if not config_file:
            config_file = config_map.get(env, "production.yaml")

    env_config_path = config_dir / config_file

    if env_config_path.exists():
        with open(env_config_path, "r") as f:
            loaded = yaml.safe_load(f)
            if loaded:
                merged_config.update(loaded)

    return GreffierConfig(**merged_config)


# Global settings instance
_settings: Optional[GreffierConfig] = None


def get_settings() -> GreffierConfig:
    """
    Get singleton settings instance.

    Returns:
        GreffierConfig instance
    """
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings
