"""
API router

- POST /jobs : store the raw request body as a job file
    - no X-JOB-ID  -> new job, file goes to <job>/input/
    - X-JOB-ID set -> existing job, file goes to <job>/output/
- every failure still answers 200 with {"error": "..."}; uploaders read the body, not the status
"""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import quote

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.requests import ClientDisconnect

from backend.app.core.config import Settings
from backend.app.core.errors import JobStoreError, MethodNotAllowed
from backend.app.core.logger import get_logger
from backend.app.schemas import ErrorResponse, UploadResponse
from backend.app.services.storage import Direction, allocate_job_id, write_job_file

logger = get_logger(__name__)
router = APIRouter(tags=["jobs"])

JOB_ID_HEADER = "X-JOB-ID"
JOB_FILENAME_HEADER = "X-JOB-FILENAME"


class IndentedJSONResponse(JSONResponse):
    """Two-space indented JSON, the format existing uploaders were written against."""

    def render(self, content: Any) -> bytes:
        return json.dumps(content, indent=2, ensure_ascii=False).encode("utf-8")


def _error(msg: str) -> IndentedJSONResponse:
    logger.warning("writing error: %s", msg)
    return IndentedJSONResponse(ErrorResponse(error=msg).model_dump())


def build_uri(base_uri: str, job_id: str, direction: Direction, file_name: str) -> str:
    # quoted so the link maps back to the exact stored name via the static server
    return f"{base_uri}{quote(job_id, safe='')}/{direction.value}/{quote(file_name, safe='')}"


async def upload_job_file(request: Request):
    cfg: Settings = request.app.state.settings
    root = cfg.STORAGE_DIR

    try:
        # 1) candidate ID is drawn before anything else, even if the caller brings one
        candidate = allocate_job_id(root)

        if request.method != "POST":
            raise MethodNotAllowed("not a valid endpoint")

        file_name = request.headers.get(JOB_FILENAME_HEADER, "")

        # 2) new job -> input, existing job -> output
        job_id = request.headers.get(JOB_ID_HEADER, "")
        direction = Direction.OUTPUT
        if not job_id:
            job_id = candidate
            direction = Direction.INPUT

        # 3) whole body in memory, no streaming
        try:
            content = await request.body()
        except ClientDisconnect as e:
            return _error(f"reading from body failed: {e!r}")

        # 4) + 5) both direction folders, then the file itself
        write_job_file(root, job_id, direction, file_name, content)
    except JobStoreError as e:
        return _error(str(e))

    # 6) link back to the file
    body = UploadResponse(
        job_id=job_id,
        uploaded_file_name=file_name,
        uri=build_uri(cfg.BASE_URI, job_id, direction, file_name),
    )
    logger.info("jobFile %r uploaded successfully", job_id)
    return IndentedJSONResponse(body.model_dump(by_alias=True))


# Plain route with no method list: every verb reaches the handler and gets the
# JSON error body instead of falling through to the static mount.
router.add_route("/jobs", upload_job_file)
