# ============================================================================
# CORE MODULE
# ============================================================================
# STATUS: Core module initialization
# PURPOSE: Export job schema and configuration
# CREATED: 19 OCT 2026
# ============================================================================

from core.config import ProxyConfig, get_config
from core.models import Job, JobTags, JobMetadata, ExecutorConfig

__all__ = [
    # Config
    "ProxyConfig",
    "get_config",
    # Models
    "Job",
    "JobTags",
    "JobMetadata",
    "ExecutorConfig",
]
