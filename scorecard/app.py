from __future__ import annotations

import platform
import time
from typing import Any, Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scorecard import __version__
from scorecard.api.routers.golf import router as golf_router
from scorecard.config import get_settings


async def health() -> Dict[str, Any]:
    return {
        "status": "ok",
        "version": __version__,
        "ts": time.time(),
        "runtime": {
            "python": platform.python_version(),
        },
    }


def create_app() -> FastAPI:
    app = FastAPI(title="scorecard")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_settings().allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(golf_router)
    app.add_api_route(
        "/health",
        health,
        methods=["GET"],
        response_model=None,
        tags=["health"],
    )
    return app


app = create_app()

__all__ = ["app", "create_app"]
