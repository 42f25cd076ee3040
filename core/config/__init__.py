# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# STATUS: Core - Configuration and defaults
# PURPOSE: Centralized configuration management
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Module

Provides centralized configuration and defaults for the job proxy.
"""

from core.config.defaults import (
    DEFAULT_DKRON_URL,
    DEFAULT_HOST,
    DEFAULT_PORT,
    ProxyConfig,
    get_config,
    reset_config,
)

__all__ = [
    "DEFAULT_DKRON_URL",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "ProxyConfig",
    "get_config",
    "reset_config",
]
