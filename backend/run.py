"""
Development server entry point.

Usage:
    python run.py              # listen on settings.HOST:settings.PORT (0.0.0.0:8080)
    python run.py --reload     # with auto-reload
"""
import argparse

import uvicorn

from faq_api.config import settings

if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--reload", action="store_true", default=False)
    parser.add_argument("--host", default=settings.HOST)
    parser.add_argument("--port", type=int, default=settings.PORT)
    args = parser.parse_args()

    uvicorn.run(
        "faq_api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.LOG_LEVEL.lower(),
    )
