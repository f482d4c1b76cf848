"""
Rat Food Guide: REST + GraphQL API with FastAPI and Strawberry.

Supports:
- Dev mode: SQLite, debug enabled
- Prod mode: PostgreSQL via DATABASE_URL

Both modes create tables and insert any missing default categories and
items on startup.

Usage:
    # Development (default)
    uvicorn ratguide.main:app --reload

    # Production (via module)
    python -m ratguide.main --mode prod --host 0.0.0.0 --port 3500
"""
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TypedDict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from ratguide.core.config import Settings
from ratguide.core.database import create_engine, create_session_factory
from ratguide.core.errors import register_error_handlers
from ratguide.core.init_settings import settings as default_settings, args
from ratguide.core.logger import configure_logging
from ratguide.db.seed import seed_defaults
from ratguide.graphql.schema import graphql_router
from ratguide.rest.router import router as rest_router
from ratguide.models import Base

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


class State(TypedDict):
    """Lifespan state."""
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[State]:
        """Startup and shutdown logic."""
        engine = create_engine(settings)
        session_factory = create_session_factory(engine)
        app.state.engine = engine
        app.state.session_factory = session_factory

        try:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)

            if settings.SEED_ON_STARTUP:
                await seed_defaults(session_factory)
        except Exception:
            await engine.dispose()
            raise

        logger.info("[%s] Server starting...", settings.ENV_MODE)
        logger.info("[%s] Database: %s", settings.ENV_MODE, settings.db_location)

        yield {"engine": engine, "session_factory": session_factory}

        await engine.dispose()
        logger.info("[%s] Server stopped", settings.ENV_MODE)

    app = FastAPI(
        title=settings.APP_NAME,
        description="Which foods are safe or dangerous for pet rats",
        version=settings.APP_VERSION,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_dev else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(graphql_router, prefix="/graphql")
    app.include_router(rest_router)
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    @app.get("/", include_in_schema=False)
    async def index():
        return FileResponse(STATIC_DIR / "index.html")

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {
            "status": "ok",
            "mode": settings.ENV_MODE,
            "version": settings.APP_VERSION,
        }

    return app


app = create_app()


# Allow running as module: python -m ratguide.main --mode prod
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "ratguide.main:app",
        host=args.host,
        port=args.port,
        reload=default_settings.is_dev,
    )
