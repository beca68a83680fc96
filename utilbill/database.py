"""Database Engine and Session Management"""

from typing import Any, Dict

from sqlalchemy import MetaData, event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from utilbill.config import Settings

# Constraint names are read back when classifying integrity errors
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# Base class for declarative models
Base = declarative_base(metadata=MetaData(naming_convention=NAMING_CONVENTION))


def _configure_sqlite(engine: AsyncEngine) -> None:
    """
    Enforce foreign keys and take the write lock when a transaction begins.

    The sqlite3 driver would otherwise emit a deferred BEGIN lazily before the
    first write, so two concurrent writers end up failing with
    "database is locked" instead of queueing behind each other.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


class Database:
    """
    Owns the async engine and the session factory.

    One instance is created by the hosting process at startup and disposed at
    shutdown; request handlers receive it through dependency injection.
    """

    def __init__(self, url: str, *, echo: bool = False, **engine_kwargs: Any) -> None:
        self.url = url
        self.is_sqlite = url.startswith("sqlite")

        kwargs: Dict[str, Any] = {"echo": echo, "future": True}
        kwargs.update(engine_kwargs)
        self.engine: AsyncEngine = create_async_engine(url, **kwargs)

        if self.is_sqlite:
            _configure_sqlite(self.engine)

        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        url = settings.async_database_url
        if url.startswith("sqlite"):
            return cls(
                url,
                echo=settings.DEBUG,
                connect_args={
                    "check_same_thread": False,
                    "timeout": settings.SQLITE_BUSY_TIMEOUT,
                },
            )
        return cls(
            url,
            echo=settings.DEBUG,
            pool_pre_ping=True,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_recycle=settings.DB_POOL_RECYCLE,
        )

    async def create_all(self) -> None:
        """Create database tables (for development and tests only)"""
        # Register every model on the metadata before create_all
        import utilbill.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Close database connections"""
        await self.engine.dispose()
