"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - One manager per process, created in the lifespan and kept on app.state
    - Every session auto-rolls-back on exception and is closed on every exit path,
      which hands its pooled connection back
    - Acquiring beyond pool_size + max_overflow waits up to pool_timeout
    - Escaping SQLAlchemy exceptions mapped to StorageError (core/errors.py)

Design Decisions:
    - Manager injected through get_db (reads request.app.state) rather than a module
      global: tests override get_db or swap app.state.db_manager
    - TLS for MySQL without server certificate checks: hosted MySQL presents
      certificates the container does not trust
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import logging
import ssl
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from app.core.errors import StorageError

logger = logging.getLogger(__name__)

# Hosted providers append these to their URLs; TLS is set via connect_args
_SSL_QUERY_KEYS = ("ssl-mode", "ssl_mode", "sslmode", "ssl")


def build_insecure_ssl_context() -> ssl.SSLContext:
    """TLS context that encrypts but does not verify the server certificate."""
    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


def build_engine_options(database_url: str, use_ssl: bool) -> tuple[str, dict]:
    """Return the cleaned URL and driver connect_args for the engine."""
    url = make_url(database_url)
    if url.get_backend_name() != "mysql":
        return database_url, {}
    url = url.difference_update_query(_SSL_QUERY_KEYS)
    connect_args = {"ssl": build_insecure_ssl_context()} if use_ssl else {}
    return url.render_as_string(hide_password=False), connect_args


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 10,
        max_overflow: int = 0,
        pool_timeout: float = 30.0,
        use_ssl: bool = True,
    ):
        url, connect_args = build_engine_options(database_url, use_ssl)
        self.engine = create_async_engine(
            url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_timeout=pool_timeout,
            pool_pre_ping=True,
            pool_recycle=3600,
            connect_args=connect_args,
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise StorageError("session") from e
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    manager: DatabaseSessionManager | None = getattr(
        request.app.state, "db_manager", None,
    )
    if not manager:
        raise StorageError("connect") from RuntimeError("Database not initialized")
    async with manager.session() as session:
        yield session
