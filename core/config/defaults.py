# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# STATUS: Core - Proxy configuration
# PURPOSE: Upstream URL, listener and logging settings
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Defaults

Loads configuration from environment variables. The defaults reproduce the
fixed deployment the proxy was written for: listen on :8000, forward to a
Dkron agent on localhost:8080, no upstream timeout.

Design:
- Immutable dataclass
- Environment variable overrides
- Loaded once, shared read-only by all requests
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_DKRON_URL = "http://localhost:8080"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000


@dataclass(frozen=True)
class ProxyConfig:
    """Configuration for the job proxy."""

    # Upstream scheduler
    dkron_url: str = DEFAULT_DKRON_URL
    dkron_timeout_seconds: Optional[float] = None

    # Listener
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    @classmethod
    def from_env(cls) -> "ProxyConfig":
        """Load configuration from environment variables."""
        timeout = os.environ.get("DKRON_TIMEOUT_SECONDS", "").strip()
        return cls(
            dkron_url=os.environ.get("DKRON_URL", DEFAULT_DKRON_URL).rstrip("/"),
            dkron_timeout_seconds=float(timeout) if timeout else None,
            host=os.environ.get("HOST", DEFAULT_HOST),
            port=int(os.environ.get("PORT", str(DEFAULT_PORT))),
            log_level=os.environ.get("LOG_LEVEL", "INFO"),
            log_json=os.environ.get("LOG_FORMAT", "").lower() == "json",
        )

    @property
    def jobs_url(self) -> str:
        """Upstream job collection endpoint."""
        return f"{self.dkron_url}/v1/jobs"


# Global config singleton
_config: Optional[ProxyConfig] = None


def get_config() -> ProxyConfig:
    """Get the global configuration singleton."""
    global _config
    if _config is None:
        _config = ProxyConfig.from_env()
        logger.debug(f"Loaded config: upstream={_config.dkron_url}")
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next call re-reads the environment."""
    global _config
    _config = None


__all__ = [
    "DEFAULT_DKRON_URL",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "ProxyConfig",
    "get_config",
    "reset_config",
]
