"""
FastAPI application for quizgen.

Provides REST API for:
- Quiz generation for learning modules
- Quiz scoring and answer checking
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from quizgen import __version__
from quizgen.api.routers import quiz_router
from quizgen.config import get_settings
from quizgen.logger import configure_logging

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    configure_logging()
    logger.info(f"quizgen API started on {settings.api_host}:{settings.api_port}")

    yield

    logger.info("Shutting down quizgen API...")


app = FastAPI(
    title="quizgen",
    description="Self-assessment quiz generation for learning modules.",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(quiz_router, prefix="/quiz", tags=["Quiz"])


@app.get("/health", tags=["Health"])
def health_check() -> dict[str, str]:
    """Liveness check."""
    return {
        "status": "healthy",
        "version": __version__,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

