"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pagewire.api.routes import router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Pagewire",
        description="Action wiring and overlay resolution for declarative pages",
        version="0.1.0",
    )

    # Authoring tools call the planner from their own dev origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api")

    return app


app = create_app()
