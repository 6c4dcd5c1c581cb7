"""
Error taxonomy for the job store.

Every subclass of JobStoreError is a request-level failure: the upload route
turns it into an `{"error": ...}` body instead of letting it crash the worker.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class JobStoreError(Exception):
    """Base class for failures reported back to the uploader."""


class RandomSourceError(JobStoreError):
    """The secure random source could not be read."""


class StorageIOError(JobStoreError):
    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class MethodNotAllowed(JobStoreError):
    pass


class InvalidPathSegment(JobStoreError):
    """A job ID or file name that cannot be used as a single path component."""
