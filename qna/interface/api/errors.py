"""Exception handlers mapping domain errors to HTTP responses."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
import logfire
from sqlalchemy.exc import SQLAlchemyError

from qna.domain.error import (
    ForbiddenError,
    InfrastructureError,
    NotFoundError,
    ValidationError,
)
from qna.interface.error import AuthenticationError


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
    )


async def forbidden_handler(request: Request, exc: ForbiddenError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN, content={"detail": str(exc)}
    )


async def validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": str(exc)},
    )


async def infrastructure_handler(
    request: Request, exc: InfrastructureError
) -> JSONResponse:
    logfire.error("Infrastructure failure", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Service temporarily unavailable"},
    )


async def database_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    # Lock timeouts and dropped connections; the request transaction is rolled back
    logfire.error(
        "Database failure",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Service temporarily unavailable"},
    )


async def authentication_handler(
    request: Request, exc: AuthenticationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED, content={"detail": str(exc)}
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach domain error handlers to the application."""
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ForbiddenError, forbidden_handler)
    app.add_exception_handler(ValidationError, validation_handler)
    app.add_exception_handler(InfrastructureError, infrastructure_handler)
    app.add_exception_handler(SQLAlchemyError, database_handler)
    app.add_exception_handler(AuthenticationError, authentication_handler)
