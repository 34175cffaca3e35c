"""Engine/session helpers for the SQL backend."""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class Database:
    """Owns the engine and session factory shared by every request."""

    def __init__(self, url: str | None) -> None:
        url = (url or "").strip()
        if not url:
            raise RuntimeError("DATABASE_URL must be configured to use the SQL backend.")
        connect_args = {}
        if url.startswith("sqlite"):
            # requests are served from a worker thread pool
            connect_args["check_same_thread"] = False
        self.url = url
        self.engine = create_engine(url, future=True, pool_pre_ping=True, connect_args=connect_args)
        self._sessionmaker = sessionmaker(
            bind=self.engine, autoflush=False, autocommit=False, expire_on_commit=False, future=True
        )

    def connect(self) -> None:
        """Open a connection once so an unreachable database fails fast."""
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def create_all(self) -> None:
        from . import models  # noqa: F401  # ensure models are imported for metadata

        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()

    @contextmanager
    def session(self) -> Iterator[Session]:
        session: Session = self._sessionmaker()
        try:
            yield session
        finally:
            session.close()
