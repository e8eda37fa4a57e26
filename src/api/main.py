from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from src.api.models import HealthResponse
from src.api.routes.search import router as search_router
from src.config import settings
from src.search.index import PhraseIndex
from src.search.storage import Database

logger = logging.getLogger(__name__)


def create_app(index: PhraseIndex | None = None, clips_dir: str | None = None) -> FastAPI:
    """Build the API application.

    When *index* is given it is used as-is and its database is left for the
    caller to close; otherwise the configured database is opened at startup
    and closed at shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if index is not None:
            yield
            return
        database = Database(settings.database_url).open()
        app.state.phrase_index = PhraseIndex(database)
        try:
            yield
        finally:
            database.close()

    app = FastAPI(
        title="Phrase Clip Finder API",
        description="Substring search over transcribed phrases with playable clips",
        version="0.1.0",
        lifespan=lifespan,
    )
    if index is not None:
        app.state.phrase_index = index

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_origin_regex=r"http://localhost:\d+",
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(search_router)

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", message="Server is running")

    clips_path = Path(clips_dir or settings.clips_dir)
    if clips_path.is_dir():
        app.mount("/clips", StaticFiles(directory=clips_path), name="clips")
    else:
        logger.warning("Clips directory %s not found; /clips is not served", clips_path)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
