"""
FastAPI surface for the projection engine.
"""

import logging
from functools import lru_cache
from typing import Dict, List, Union

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from config import (
    API_DESCRIPTION,
    API_TITLE,
    API_VERSION,
    CORS_CREDENTIALS,
    CORS_HEADERS,
    CORS_METHODS,
    CORS_ORIGINS,
    DEFAULT_INPUTS,
    LOG_FORMAT,
    LOG_LEVEL,
    PROJECTION_CACHE_SIZE,
)
from models import ProjectionInput, ProjectionResult
from projection import InvalidInput, project
from projection.report import chart_rows, summarize

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


# ============================
# Memoized projection
# ============================
@lru_cache(maxsize=PROJECTION_CACHE_SIZE)
def cached_projection(inputs: ProjectionInput) -> ProjectionResult:
    # ProjectionInput is frozen, so equal inputs hash to the same entry
    return project(inputs)


def run_projection(inputs: ProjectionInput) -> ProjectionResult:
    try:
        return cached_projection(inputs)
    except InvalidInput as e:
        logger.info("Rejected projection input: %s", e)
        raise HTTPException(status_code=400, detail=str(e))


def default_inputs() -> ProjectionInput:
    return ProjectionInput(**DEFAULT_INPUTS)


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


@app.get("/")
def root():
    return {"message": API_TITLE, "docs": "Visit /docs for API documentation"}


@app.get("/api/default_inputs")
def get_default_inputs() -> ProjectionInput:
    return default_inputs()


@app.post("/api/project")
def post_project(inputs: ProjectionInput) -> ProjectionResult:
    return run_projection(inputs)


@app.post("/api/project/chart")
def post_project_chart(inputs: ProjectionInput) -> List[Dict[str, Union[int, float]]]:
    return chart_rows(run_projection(inputs))


@app.post("/api/project/summary")
def post_project_summary(inputs: ProjectionInput) -> Dict[str, str]:
    return summarize(run_projection(inputs))
