from __future__ import annotations

import logging
from typing import Dict

import numpy as np
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import (
    API_DESCRIPTION,
    API_TITLE,
    API_VERSION,
    CORS_CREDENTIALS,
    CORS_HEADERS,
    CORS_METHODS,
    CORS_ORIGINS,
    RISK_PROFILES,
    configure_logging,
)
from .errors import ProjectionValidationError
from .models import ProjectionRequest, ProjectionResult
from .projection import project

configure_logging()
logger = logging.getLogger(__name__)

# ============================
# FastAPI app
# ============================
app = FastAPI(title=API_TITLE, version=API_VERSION, description=API_DESCRIPTION)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=CORS_CREDENTIALS,
    allow_methods=CORS_METHODS,
    allow_headers=CORS_HEADERS,
)


@app.exception_handler(ProjectionValidationError)
def validation_error_handler(request: Request, exc: ProjectionValidationError):
    logger.info("rejected projection request: %s", exc)
    return JSONResponse(status_code=422, content={"detail": exc.to_list()})


@app.get("/")
def root():
    return {"message": API_TITLE, "docs": "Visit /docs for API documentation"}


@app.get("/api/health")
def health():
    return {"status": "ok", "version": API_VERSION}


@app.get("/api/default_settings")
def default_settings() -> ProjectionRequest:
    return ProjectionRequest()


@app.get("/api/risk_profiles")
def risk_profiles() -> Dict[str, Dict[str, float]]:
    return RISK_PROFILES


# Plain def: FastAPI runs it in a worker thread, so the Monte Carlo loop
# does not block the event loop.
@app.post("/api/project")
def run_projection(req: ProjectionRequest) -> ProjectionResult:
    rng = np.random.default_rng(req.seed) if req.seed is not None else None
    return project(req.settings, req.advanced, rng=rng)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8020)
