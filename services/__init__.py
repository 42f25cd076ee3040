# ============================================================================
# SERVICES MODULE
# ============================================================================
# STATUS: Core - Upstream access
# PURPOSE: HTTP client for the Dkron scheduler
# CREATED: 19 OCT 2026
# ============================================================================

from services.dkron_client import (
    DkronClient,
    SchedulerError,
    SchedulerUnavailableError,
    SchedulerResponseError,
)

__all__ = [
    "DkronClient",
    "SchedulerError",
    "SchedulerUnavailableError",
    "SchedulerResponseError",
]
