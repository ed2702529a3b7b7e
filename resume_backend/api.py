"""
FastAPI app entry point aggregating per-domain routers under resume_backend/routes.
Run with `uvicorn resume_backend.api:app`.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import load_config
from .db import ensure_schema
from .logs import ensure_log_schema

logger = logging.getLogger(__name__)

app = FastAPI(title="resume-api", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=load_config()["cors_origins"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def on_startup():
    path = ensure_schema()
    ensure_log_schema()
    logger.info("schema ready at %s", path)


# Include routers (split by business domain)
from .routes import base as base_routes
from .routes import work as work_routes
from .routes import education as education_routes
from .routes import logs as logs_routes

app.include_router(base_routes.router)
app.include_router(work_routes.router)
app.include_router(education_routes.router)
app.include_router(logs_routes.router)
