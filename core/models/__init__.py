# ============================================================================
# MODELS MODULE
# ============================================================================
# STATUS: Model exports
# PURPOSE: Central export point for the job schema
# CREATED: 19 OCT 2026
# ============================================================================

from core.models.job import (
    Job,
    JobTags,
    JobMetadata,
    ExecutorConfig,
    JobList,
    decode_job_list,
)

__all__ = [
    "Job",
    "JobTags",
    "JobMetadata",
    "ExecutorConfig",
    "JobList",
    "decode_job_list",
]
