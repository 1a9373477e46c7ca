"""FastAPI application entrypoint."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from hltvnews.api.routes import router, shutdown_repository


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await shutdown_repository()


def create_app() -> FastAPI:
    app = FastAPI(
        title="HLTV Match News",
        description="Relevant, summarised news for both teams of a match",
        lifespan=lifespan,
    )
    app.include_router(router, prefix="/api")
    return app


app = create_app()
