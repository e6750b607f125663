"""
Entry point for the quizgen API service.

Run with:
    uvicorn quizgen.api.main:app --reload --port 8110
    python main.py
"""
import uvicorn

from quizgen.config import get_settings

settings = get_settings()

if __name__ == "__main__":
    uvicorn.run(
        "quizgen.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
        log_level=settings.log_level.lower(),
    )
