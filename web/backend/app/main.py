"""FastAPI application for the fluxmod classification service.

Provides REST API endpoints wrapping the fluxmod package for:
- Content moderation and sentiment analysis of post text
- Caption suggestions while a post is being composed
- Admin audit views, statistics and lexicon reloads
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fluxmod import __version__
from fluxmod.lexicon.store import get_store
from web.backend.app.routers import admin, ai

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # A bad lexicon raises LexiconConfigError here and the server never starts.
    logger.info("Serving with %s", get_store().snapshot().summary())
    yield


app = FastAPI(
    lifespan=lifespan,
    title="fluxmod API",
    description=(
        "REST API for rule-based content moderation. "
        "Provides endpoints for moderation, sentiment analysis, "
        "caption suggestions and the admin moderation audit trail."
    ),
    version=__version__,
)

# ---------------------------------------------------------------------------
# CORS middleware (allow all origins for development)
# ---------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Include routers
# ---------------------------------------------------------------------------
app.include_router(ai.router)
app.include_router(admin.router)


# ---------------------------------------------------------------------------
# Root and health-check endpoints
# ---------------------------------------------------------------------------


@app.get("/", tags=["meta"])
async def root():
    """Return basic API information."""
    return {
        "name": "fluxmod API",
        "version": __version__,
        "description": "Rule-based moderation, sentiment and caption REST API",
        "docs": "/docs",
        "openapi": "/openapi.json",
    }


@app.get("/health", tags=["meta"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
