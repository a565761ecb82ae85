"""SQLite engine, locked unit-of-work sessions and the store error type."""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.models import Base

logger = logging.getLogger(__name__)

_IN_MEMORY_URLS = frozenset({"sqlite://", "sqlite:///:memory:", "sqlite+pysqlite://"})


class StoreError(Exception):
    """Raised when the underlying database fails; message is the driver's own text."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


def _disable_foreign_keys(dbapi_conn, connection_record) -> None:
    """Keep products.category_id declared but unenforced.

    Set per-connection because SQLite PRAGMAs are not inherited by new
    connections from the pool.
    """
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=OFF")
    cursor.close()


def create_db_engine(url: str, echo: bool = False) -> Engine:
    """Create a SQLite engine; in-memory URLs share one connection across threads."""
    if url in _IN_MEMORY_URLS:
        engine = create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            pool_pre_ping=True,
        )
    event.listen(engine, "connect", _disable_foreign_keys)
    return engine


class Database:
    """
    Owns the engine, session factory and the write lock shared by every store.

    Each unit of work holds the lock from first statement to commit, so
    concurrent requests never observe a partially written row.
    """

    def __init__(self, url: str = "sqlite://", echo: bool = False) -> None:
        self.url = url
        self.engine = create_db_engine(url, echo=echo)
        self._session_factory = sessionmaker(
            bind=self.engine,
            autoflush=False,
            expire_on_commit=False,
        )
        self._lock = threading.RLock()

    def create_all(self) -> None:
        """Create every table that does not exist yet."""
        Base.metadata.create_all(self.engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield a session under the store lock; commit on success, roll back on error."""
        with self._lock:
            db = self._session_factory()
            try:
                yield db
                db.commit()
            except (SQLAlchemyError, OverflowError) as e:
                # OverflowError: sqlite3 rejects ints outside signed 64-bit.
                db.rollback()
                message = str(getattr(e, "orig", None) or e)
                logger.error("Database operation failed: %s", message)
                raise StoreError(message) from e
            except Exception:
                db.rollback()
                raise
            finally:
                db.close()

    def ping(self) -> bool:
        """Run a trivial query to verify the database is reachable."""
        try:
            with self.session() as db:
                db.execute(text("SELECT 1"))
            return True
        except StoreError:
            return False

    def dispose(self) -> None:
        self.engine.dispose()
