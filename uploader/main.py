#!/usr/bin/env python3
"""
Command-line uploader.

  echo hello | python -m uploader.main -b files.example.com
  python -m uploader.main -j AbCd1234 result.txt

Without a file argument stdin is uploaded as "tempfile". Any failure is
fatal: one log line, exit status 1, no URL printed.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional
from urllib.parse import quote_plus

from uploader.client import DEFAULT_BASE_URI, ClientConfig, ProtocolError, UploadClient
from uploader.logger import get_logger

logger = get_logger("uploader")

STDIN_FILE_NAME = "tempfile"


class ReadError(Exception):
    pass


def read_from_stdin() -> bytes:
    try:
        return sys.stdin.buffer.read()
    except OSError as e:
        raise ReadError(f"reading from stdin failed: {e}") from e


def read_from_file(path: str) -> bytes:
    p = Path(path)
    if not p.exists():
        raise ReadError(f"No such file or directory: {path!r}")
    try:
        return p.read_bytes()
    except OSError as e:
        raise ReadError(f"reading from file {path!r} failed: {e}") from e


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Upload a file (or stdin) to the job file server")
    parser.add_argument("-b", "--base-uri", default=DEFAULT_BASE_URI, help="server base url")
    parser.add_argument(
        "-j", "--job-id", default="",
        help="jobid to use for upload, if not set, server will assign one for future use.",
    )
    parser.add_argument("--timeout", type=float, default=60.0, help="request timeout in seconds")
    parser.add_argument("file", nargs="?", help="file to upload (default: stdin)")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    config = ClientConfig(base_uri=args.base_uri, job_id=args.job_id or None, timeout=args.timeout)

    try:
        if args.file is None:
            file_name = STDIN_FILE_NAME
            content = read_from_stdin()
        else:
            file_name = quote_plus(args.file)
            content = read_from_file(args.file)

        file_url, job_id = UploadClient(config).post_job_file(content, file_name)
    except (ReadError, ProtocolError) as e:
        logger.error("%s", e)
        return 1

    print(f"Your File has been uploaded successfully \n[JobId]: {job_id}\n[URL]: {file_url}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
