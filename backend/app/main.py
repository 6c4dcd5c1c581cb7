"""
FastAPI entry point

- /jobs                          : upload endpoint
- /{job_id}/{direction}/{name}   : stored files served back as static content
- /health                        : liveness probe

Static serving keeps the service stateless: the job tree on disk is the
only record, so a stored file is reachable the moment its write returns.
"""

from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from backend.app.api.routes import router as jobs_router
from backend.app.core.config import Settings, settings
from backend.app.core.logger import get_logger

logger = get_logger(__name__)


def create_app(cfg: Optional[Settings] = None) -> FastAPI:
    cfg = cfg or settings

    app = FastAPI(title="Job File Store", version="0.1.0")
    app.state.settings = cfg

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cfg.CORS_ORIGINS),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health():
        return {"ok": True}

    app.include_router(jobs_router)

    # StaticFiles refuses to start on a missing directory, so create it up front.
    Path(cfg.STORAGE_DIR).mkdir(parents=True, exist_ok=True)
    logger.info("storage root: %s", Path(cfg.STORAGE_DIR).resolve())
    # Mounted last: routes above take precedence over the catch-all "/"
    app.mount("/", StaticFiles(directory=cfg.STORAGE_DIR), name="storage")
    return app

