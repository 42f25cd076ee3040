# ============================================================================
# JOB MODEL
# ============================================================================
# STATUS: Core model - Dkron job definition
# PURPOSE: Fixed schema for jobs relayed to and from the scheduler
# CREATED: 19 OCT 2026
# EXPORTS: Job, JobTags, JobMetadata, ExecutorConfig
# DEPENDENCIES: pydantic
# ============================================================================
"""
Job Model

A Job is a named scheduled-task definition understood by the upstream
Dkron scheduler. The proxy never stores or mutates jobs: a Job only lives
for one forward/relay cycle, decoded from the inbound body (or the upstream
list response) and re-encoded on the way out.

Every field is optional with a zero-value default. Only fields that were
actually supplied are re-encoded (see ``to_upstream``), so the payload sent
upstream is equivalent to the one received. Fields outside this schema are
dropped.

A JSON null decodes to the zero value, as the scheduler sends null for jobs
without tags, metadata or executor config. Scalars are strict: a string
where a bool belongs (or the reverse) is a validation error, never coerced.
"""

from typing import Any, Dict, List

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    TypeAdapter,
    model_validator,
)


class WireModel(BaseModel):
    """
    Base for records decoded from scheduler JSON.

    A null value decodes to the field default and the key is treated as
    absent, so it is not re-encoded.
    """

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class JobTags(WireModel):
    """Tag sub-record (target server)."""
    server: StrictStr = ""


class JobMetadata(WireModel):
    """Metadata sub-record (requesting user)."""
    user: StrictStr = ""


class ExecutorConfig(WireModel):
    """Executor configuration sub-record."""
    command: StrictStr = ""


class Job(WireModel):
    """
    A Dkron job definition.

    Maps to: upstream /v1/jobs resource

    ``disabled`` travels as ``disable`` on the wire. ``executor_config`` is
    also accepted under its legacy key ``Excecutor_config`` but is always
    emitted as ``executor_config``.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "backup",
                "schedule": "@every 1h",
                "timezone": "Europe/Berlin",
                "owner": "ops",
                "disable": False,
                "tags": {"server": "dkron-server:1"},
                "metadata": {"user": "12345"},
                "concurrency": "allow",
                "executor": "shell",
                "executor_config": {"command": "/usr/local/bin/backup.sh"},
            }
        },
    )

    name: StrictStr = Field(default="", description="Job identifier, unique per scheduler")
    schedule: StrictStr = Field(default="", description="Cron-like schedule expression")
    timezone: StrictStr = ""
    owner: StrictStr = ""
    disabled: StrictBool = Field(default=False, alias="disable")
    tags: JobTags = Field(default_factory=JobTags)
    metadata: JobMetadata = Field(default_factory=JobMetadata)
    concurrency: StrictStr = ""
    executor: StrictStr = ""
    executor_config: ExecutorConfig = Field(
        default_factory=ExecutorConfig,
        validation_alias=AliasChoices("executor_config", "Excecutor_config"),
        serialization_alias="executor_config",
    )

    def to_upstream(self) -> Dict[str, Any]:
        """Encode for the scheduler, keeping only supplied fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


# Decoder for the upstream list response
JobList = TypeAdapter(List[Job])


def decode_job_list(payload: Any) -> List[Job]:
    """
    Decode an upstream list payload.

    Raises:
        pydantic.ValidationError: if payload is not a list of job objects
    """
    return JobList.validate_python(payload)


__all__ = [
    "Job",
    "JobTags",
    "JobMetadata",
    "ExecutorConfig",
    "JobList",
    "decode_job_list",
]
