"""
Storage utils

Layout on disk (the rule the static server relies on):

    STORAGE_DIR/<job_id>/input/<file_name>    files sent without a job ID
    STORAGE_DIR/<job_id>/output/<file_name>   files sent against an existing job

A job exists only as its directory; there is no registry. Both direction
folders are created on the first upload, whichever one it targets.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Union

from backend.app.core.errors import InvalidPathSegment, StorageIOError
from backend.app.core.logger import get_logger
from backend.app.services.ids import generate_id

logger = get_logger(__name__)

PathLike = Union[str, Path]

# Regenerate at most this many times when a fresh ID already has a directory
MAX_ID_ATTEMPTS = 5


class Direction(str, Enum):
    INPUT = "input"
    OUTPUT = "output"


def check_segment(value: str, what: str) -> str:
    """Reject anything that is not a single, non-empty path component."""
    if not value or value in (".", ".."):
        raise InvalidPathSegment(f"invalid {what}: {value!r}")
    if "/" in value or "\\" in value or "\x00" in value:
        raise InvalidPathSegment(f"invalid {what}: {value!r}")
    return value


def job_dir(root: PathLike, job_id: str) -> Path:
    return Path(root) / check_segment(job_id, "job id")


def resolve_path(root: PathLike, job_id: str, direction: Direction, file_name: str) -> Path:
    path = job_dir(root, job_id) / Direction(direction).value / check_segment(file_name, "file name")
    # symlinked job folders must not lead outside the root either
    if not path.resolve().is_relative_to(Path(root).resolve()):
        raise InvalidPathSegment(f"path {str(path)!r} escapes the storage root")
    return path


def ensure_job_directories(root: PathLike, job_id: str) -> Path:
    d = job_dir(root, job_id)
    for direction in Direction:
        target = d / direction.value
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageIOError(f"creating directory {str(target)!r} failed: {e}", target) from e
    return d


def allocate_job_id(root: PathLike) -> str:
    """Fresh job ID, skipping IDs that already have a directory under root."""
    job_id = generate_id()
    for _ in range(MAX_ID_ATTEMPTS - 1):
        if not (Path(root) / job_id).exists():
            break
        logger.warning("job id %r already taken, regenerating", job_id)
        job_id = generate_id()
    return job_id


def write_job_file(
    root: PathLike,
    job_id: str,
    direction: Direction,
    file_name: str,
    content: bytes,
) -> Path:
    """Persist one upload, overwriting any earlier file with the same name."""
    path = resolve_path(root, job_id, direction, file_name)
    ensure_job_directories(root, job_id)
    try:
        path.write_bytes(content)
    except OSError as e:
        raise StorageIOError(f"writing file to {str(path)!r} failed: {e}", path) from e
    return path
