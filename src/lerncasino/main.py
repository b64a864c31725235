"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from lerncasino.auth.router import router as auth_router
from lerncasino.config import Settings, get_settings
from lerncasino.database import Database
from lerncasino.gamification.router import router as gamification_router
from lerncasino.health.router import router as health_router
from lerncasino.middleware import setup_middleware
from lerncasino.questions.router import router as questions_router
from lerncasino.questions.seed import seed_questions
from lerncasino.users.router import router as users_router

logger = structlog.get_logger()


async def prepare_database(db: Database) -> None:
    """Create tables and seed questions (both idempotent)."""
    await db.create_all()
    async for session in db.session():
        await seed_questions(session)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup and shutdown lifecycle."""
    db: Database = app.state.db
    await prepare_database(db)
    logger.info("lerncasino_started", database_url=db.url)

    yield

    await db.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Without explicit settings they are read from the environment; a missing
    LERNCASINO_JWT_SECRET aborts here.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="LernCasino API",
        description="Backend API for LernCasino — quiz and flashcard learning game",
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = Database(settings.database_url, echo=settings.debug)

    setup_middleware(app, settings)
    app.include_router(health_router, tags=["Health"])
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(gamification_router)
    app.include_router(questions_router)

    return app
