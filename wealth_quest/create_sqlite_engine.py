import pathlib

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine


def create_sqlite_engine(file_path: str | pathlib.Path) -> AsyncEngine:
    """Create an aiosqlite engine for the given database file."""
    sqlite_url = f"sqlite+aiosqlite:///{pathlib.Path(file_path)}"
    return create_async_engine(url=sqlite_url, echo=False)
