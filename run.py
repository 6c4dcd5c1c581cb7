#!/usr/bin/env python3
"""
Server launcher.

Flags override the values read from the environment / .env, so one
deployment file can hold the defaults and ad-hoc runs can still tweak them.

Run:
  python run.py -b https://files.example.com/ -p 8080 -s ./storage/
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional

import uvicorn

from backend.app.core.config import Settings
from backend.app.core.logger import get_logger
from backend.app.main import create_app

logger = get_logger("run")


def build_settings(argv: Optional[list[str]] = None) -> Settings:
    parser = argparse.ArgumentParser(description="Job-scoped file upload server")
    parser.add_argument("-b", "--base-uri", dest="BASE_URI", help="url base for this domain")
    parser.add_argument("-p", "--port", dest="PORT", type=int, help="port for server to run on")
    parser.add_argument("-s", "--storage", dest="STORAGE_DIR", help="directory to store job files")
    parser.add_argument("--host", dest="HOST", help="interface to bind")
    parser.add_argument("--cert", dest="CERT_FILE", help="TLS certificate file")
    parser.add_argument("--key", dest="KEY_FILE", help="TLS private key file")
    args = parser.parse_args(argv)

    # only flags that were actually given override env values
    overrides = {k: v for k, v in vars(args).items() if v is not None}
    return Settings(**overrides)


def main(argv: Optional[list[str]] = None) -> None:
    cfg = build_settings(argv)
    try:
        app = create_app(cfg)
    except OSError as e:
        logger.critical("creating storage directory %r failed: %s", cfg.STORAGE_DIR, e)
        sys.exit(1)

    logger.info("Starting server on port %r with baseuri %r", cfg.PORT, cfg.BASE_URI)
    kwargs = {}
    if cfg.tls_enabled:
        kwargs.update(ssl_certfile=cfg.CERT_FILE, ssl_keyfile=cfg.KEY_FILE)
    uvicorn.run(app, host=cfg.HOST, port=cfg.PORT, log_level=cfg.LOG_LEVEL.lower(), **kwargs)


if __name__ == "__main__":
    main()
