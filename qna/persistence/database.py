"""PostgreSQL engine and session factory.

Every request gets one session, and the session is one transaction (see
`ProdPersistenceProvider.get_session`). Repositories take the session and
never commit themselves.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from qna.config import DatabaseSettings


def create_engine(database: DatabaseSettings, echo: bool = False) -> AsyncEngine:
    """Create the asyncpg-backed engine.

    Args:
        database: Connection URL, pool sizing and asyncpg timeouts
        echo: Log emitted SQL (debug mode)
    """
    return create_async_engine(
        database.url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        pool_recycle=database.pool_recycle_seconds,
        connect_args={
            # asyncpg per-statement timeout; a stuck row lock surfaces as an
            # infrastructure error instead of hanging the request
            "command_timeout": database.command_timeout_seconds,
            "server_settings": {"application_name": database.application_name},
        },
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Objects stay readable after commit; responses are built from them
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
