# ============================================================================
# DKRON HTTP CLIENT
# ============================================================================
# STATUS: Service - Sync HTTP client for the Dkron job API
# PURPOSE: Forward job CRUD requests to the upstream scheduler
# CREATED: 19 OCT 2026
# ============================================================================
"""
Dkron HTTP Client

Sync httpx client for forwarding job requests to the scheduler's REST API
(/v1/jobs). Routes are plain ``def`` handlers run in the threadpool, so one
blocking call per request is fine.

Mutating methods return the upstream status code only; the caller builds
its own confirmation message. Every failure (transport, timeout, bad URL,
undecodable body) is raised as a SchedulerError. Nothing is retried.
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from core.config import get_config
from core.models import Job, decode_job_list

logger = logging.getLogger(__name__)

JOBS_PATH = "/v1/jobs"
STATUS_PATH = "/v1/"


class SchedulerError(Exception):
    """Base error for failed scheduler calls."""


class SchedulerUnavailableError(SchedulerError):
    """The scheduler could not be reached or did not answer in time."""


class SchedulerResponseError(SchedulerError):
    """The scheduler answered with a body that does not match the job schema."""


class DkronClient:
    """Sync HTTP client for the Dkron job API."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[httpx.Timeout] = None):
        config = get_config()
        self._base_url = (base_url or config.dkron_url).rstrip("/")
        self._timeout = timeout or httpx.Timeout(config.dkron_timeout_seconds)

    @property
    def base_url(self) -> str:
        return self._base_url

    def _request(
        self,
        method: str,
        path: str,
        json_body: Optional[Any] = None,
    ) -> httpx.Response:
        """
        Make a single request to the scheduler.

        Raises:
            SchedulerUnavailableError: on connection failure or timeout
            SchedulerError: if the request cannot be built
        """
        url = f"{self._base_url}{path}"

        try:
            with httpx.Client(timeout=self._timeout) as client:
                resp = client.request(method, url, json=json_body)
        except httpx.TimeoutException as e:
            logger.error(f"Scheduler timeout: {method} {url}: {e}")
            raise SchedulerUnavailableError(f"Scheduler timeout: {e}") from e
        except httpx.HTTPError as e:
            logger.error(f"Cannot reach scheduler at {url}: {e}")
            raise SchedulerUnavailableError(str(e)) from e
        except httpx.InvalidURL as e:
            logger.error(f"Invalid scheduler URL {url}: {e}")
            raise SchedulerError(f"Invalid request URL: {e}") from e

        logger.info(f"Scheduler {method} {path} -> {resp.status_code}")
        return resp

    @staticmethod
    def _job_path(name: str) -> str:
        return f"{JOBS_PATH}/{quote(name, safe='')}"

    @staticmethod
    def _encode(job: Job) -> Dict[str, Any]:
        try:
            return job.to_upstream()
        except Exception as e:
            raise SchedulerError(f"Failed to encode job: {e}") from e

    # ------------------------------------------------------------------
    # READ
    # ------------------------------------------------------------------

    def list_jobs(self) -> List[Job]:
        """
        GET /v1/jobs

        The upstream status is not inspected; any body that is not a list
        of jobs is a SchedulerResponseError.
        """
        resp = self._request("GET", JOBS_PATH)
        logger.debug(f"Raw scheduler response: {resp.text}")

        try:
            return decode_job_list(resp.json())
        except ValueError as e:
            raise SchedulerResponseError(str(e)) from e

    def ping(self) -> int:
        """GET /v1/ (agent status), returns the upstream status code."""
        return self._request("GET", STATUS_PATH).status_code

    # ------------------------------------------------------------------
    # WRITE
    # ------------------------------------------------------------------

    def create_job(self, job: Job) -> int:
        """POST /v1/jobs"""
        return self._request("POST", JOBS_PATH, json_body=self._encode(job)).status_code

    def update_job(self, name: str, job: Job) -> int:
        """PUT /v1/jobs/{name}"""
        return self._request("PUT", self._job_path(name), json_body=self._encode(job)).status_code

    def delete_job(self, name: str) -> int:
        """DELETE /v1/jobs/{name}"""
        return self._request("DELETE", self._job_path(name)).status_code


__all__ = [
    "DkronClient",
    "SchedulerError",
    "SchedulerUnavailableError",
    "SchedulerResponseError",
]
