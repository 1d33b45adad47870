"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from qna.config import Settings
from qna.interface.api.errors import register_exception_handlers
from qna.interface.api.routes import (
    acceptance,
    health,
    notifications,
    questions,
    realtime,
    users,
    votes,
)
from qna.util.di.container import create_container, setup_di
from qna.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container is built
            when omitted (tests pass one wired with in-memory repositories)
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Q&A Core API",
        description="Voting, reputation, answer acceptance and notifications for a Q&A forum",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "Cache-Control",
            "X-Requested-With",
        ],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())
    register_exception_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(users.router)
    app_instance.include_router(questions.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(acceptance.router)
    app_instance.include_router(notifications.router)
    app_instance.include_router(realtime.router)

    return app_instance
