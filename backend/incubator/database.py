"""
Incubator Backend — Database Handle
=====================================

What:  Async SQLAlchemy engine and session factory wrapped in one explicit handle.
Why:   The handle is constructed once, passed into every resource service and
       disposed at shutdown, so no module reaches for a global connection.
How:   `Database` owns the engine; `session()` yields a session that commits on
       success and rolls back on error; `get_database` exposes the handle
       stored on `app.state` to FastAPI dependencies.
Who:   Created by `create_app()`; used by services, the access gate and health.

Connection Pooling Strategy:
    pool_size / max_overflow / pool_pre_ping come from settings and are applied
    only to server databases. SQLite (tests, local runs) uses SQLAlchemy's
    default pool for its driver, which rejects those arguments.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator, Optional

from sqlalchemy import DateTime, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.types import TypeDecorator
from starlette.requests import Request

from incubator.exceptions import DatabaseError

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware timestamp stored as UTC on every backend.

    PostgreSQL keeps the offset (TIMESTAMP WITH TIME ZONE); SQLite has no
    offset support, so values are stored as naive UTC and re-tagged on load.
    Naive input is taken to be UTC already.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        value = value.astimezone(timezone.utc)
        if dialect.name == "sqlite":
            return value.replace(tzinfo=None)
        return value

    def process_result_value(self, value: Optional[datetime], dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object, which Alembic and `Database.create_all`
    read to build the schema.
    """
    pass


class Database:
    """
    Explicit store handle: engine, session factory and lifecycle.

    Lifecycle:
        open   → constructing the handle creates the engine (no connection yet)
        use    → `async with database.session() as session: ...`
        close  → `await database.dispose()` at application shutdown
    """

    def __init__(
        self,
        url: str,
        *,
        pool_size: int = 20,
        max_overflow: int = 10,
        pool_pre_ping: bool = True,
        echo: bool = False,
    ):
        self.url = url
        engine_kwargs = {"echo": echo}
        if not url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_pre_ping=pool_pre_ping,
                pool_recycle=3600,
            )
        self.engine: AsyncEngine = create_async_engine(url, **engine_kwargs)
        # expire_on_commit=False: objects stay readable after the session
        # closes, which is when routes serialize them.
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings) -> "Database":
        return cls(
            settings.database_url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            echo=settings.log_level == "DEBUG",
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Provide a transactional session.

        How it works:
            1. Creates a new session from the factory
            2. Yields it to the caller
            3. On success: commits the transaction
            4. On SQLAlchemy failure: rolls back and raises DatabaseError
            5. On any other failure: rolls back and re-raises unchanged
            6. Always: closes the session (returns connection to pool)
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except SQLAlchemyError as exc:
                await session.rollback()
                logger.error("Database operation failed: %s", str(exc), exc_info=True)
                raise DatabaseError(context={"error_type": type(exc).__name__}) from exc
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def create_all(self) -> None:
        """Create every table registered on Base.metadata (tests, local runs)."""
        import incubator.models  # noqa: F401  registers all tables

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_all(self) -> None:
        import incubator.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def ping(self) -> bool:
        """Run SELECT 1; False when the database is unreachable."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except (SQLAlchemyError, OSError) as exc:
            logger.warning("Database ping failed: %s", str(exc))
            return False

    async def dispose(self) -> None:
        """Close all pooled connections. Called from the lifespan handler."""
        await self.engine.dispose()


def get_database(request: Request) -> Database:
    """FastAPI dependency returning the handle created by create_app()."""
    return request.app.state.database
