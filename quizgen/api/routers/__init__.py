"""API routers."""

from .quiz_router import router as quiz_router

__all__ = ["quiz_router"]
