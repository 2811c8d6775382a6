"""
Database configuration and session management.
"""

import logging
from typing import Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger("dailydiet.database")

# Create SQLAlchemy Base
Base = declarative_base()


class Database:
    """
    Owns the SQLAlchemy engine and session factory for one application instance.

    The application keeps its Database on ``app.state.database`` and routes
    obtain sessions through the ``get_db`` dependency, so tests can hand
    ``create_app`` an in-memory database instead of the configured one.
    """

    def __init__(self, url: str, echo: bool = False, engine: Optional[Engine] = None):
        self.url = url
        self.engine = engine or self._create_engine(url, echo)
        self.session_factory = sessionmaker(
            bind=self.engine, autoflush=False, expire_on_commit=False, future=True
        )

    @staticmethod
    def _create_engine(url: str, echo: bool) -> Engine:
        if url.startswith("sqlite"):
            kwargs = {"connect_args": {"check_same_thread": False}}
            # In-memory databases live and die with a single connection
            if url in ("sqlite://", "sqlite:///:memory:"):
                kwargs["poolclass"] = StaticPool
            return create_engine(url, echo=echo, future=True, **kwargs)
        return create_engine(url, echo=echo, future=True, pool_pre_ping=True)

    def init_database(self) -> None:
        """Initialize database schema"""
        with self.engine.begin() as conn:
            Base.metadata.create_all(bind=conn)
        logger.info("Database tables created successfully")

    def drop_all(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    def get_session(self) -> Generator[Session, None, None]:
        """Yield a session and ensure it's closed after use."""
        db = self.session_factory()
        try:
            yield db
        finally:
            db.close()

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database engine disposed")
