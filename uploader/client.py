"""
Upload client

Talks to POST {base}jobs:
- body    : raw file bytes (Content-Type says json, kept for wire compatibility)
- headers : X-JOB-FILENAME always, X-JOB-ID only when attaching to a job
- answer  : JSON with either "error" or jobId/uploadedFileName/uri
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Optional, Tuple

import requests

DEFAULT_BASE_URI = "http://localhost/"


class ProtocolError(Exception):
    """The server could not be reached or did not answer with a usable upload result."""


def normalize_base_uri(base_uri: str) -> str:
    if not base_uri.endswith("/"):
        base_uri += "/"
    if not base_uri.startswith("http"):
        base_uri = "http://" + base_uri
    return base_uri


@dataclass(frozen=True)
class ClientConfig:
    base_uri: str = DEFAULT_BASE_URI
    job_id: Optional[str] = None
    timeout: float = 60.0

    def __post_init__(self):
        object.__setattr__(self, "base_uri", normalize_base_uri(self.base_uri))

    @property
    def jobs_url(self) -> str:
        return self.base_uri + "jobs"


class UploadClient:
    def __init__(self, config: ClientConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()

    def post_job_file(self, content: bytes, file_name: str) -> Tuple[str, str]:
        """Upload one file and return (uri, job_id)."""
        headers = {
            "Content-Type": "application/json",
            "X-JOB-FILENAME": file_name,
        }
        if self.config.job_id:
            headers["X-JOB-ID"] = self.config.job_id

        try:
            resp = self.session.post(
                self.config.jobs_url,
                data=content,
                headers=headers,
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            raise ProtocolError(f"request to {self.config.jobs_url} failed: {e}") from e

        body = resp.text
        try:
            response = json.loads(body)
        except ValueError as e:
            raise ProtocolError(f"parsing body as json failed: {e}") from e
        if not isinstance(response, dict):
            raise ProtocolError(f"Upload Error - Server Response {body}")

        # error key first: the server answers 200 even on failure
        if "error" in response:
            raise ProtocolError(f"server responded with {response['error']}")

        uri = response.get("uri")
        job_id = response.get("jobId")
        if not uri or not job_id:
            raise ProtocolError(f"Upload Error - Server Response {body}")
        return uri, job_id
