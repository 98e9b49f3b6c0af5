"""
Configuration module.
"""

from greffier.config.settings import (
    GreffierConfig,
    NetworkConfig,
    get_settings,
    load_config,
)

__all__ = ["GreffierConfig", "NetworkConfig", "get_settings", "load_config"]
