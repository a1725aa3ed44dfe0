"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from voteledger.config import Settings

# The cast loop re-reads the row on every statement; under REPEATABLE READ a
# concurrent flip would surface as a serialization error instead of a retry.
ISOLATION_LEVEL = "READ COMMITTED"


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        isolation_level=ISOLATION_LEVEL,
        # Shows up in pg_stat_activity next to lock waits on the votes table
        connect_args={"server_settings": {"application_name": "voteledger"}},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    One session per request. The ledger commits its writes before it reports
    them; anything uncommitted is rolled back when the session closes.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
