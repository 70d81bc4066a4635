from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine


def create_postgres_engine(database_url: str) -> AsyncEngine:
    """Create a pooled engine for a ``postgresql+asyncpg://`` URL."""
    return create_async_engine(database_url, pool_size=20, max_overflow=20)
