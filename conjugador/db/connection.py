"""
Database connection management for the paradigm store.

Engines are cached per database path. ":memory:" databases share a single
connection so every session sees the same tables.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, Optional, Union

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from conjugador import settings
from conjugador.db.models import Base

logger = logging.getLogger(__name__)

MEMORY = ":memory:"

_engines: Dict[str, Engine] = {}

PathLike = Union[str, Path]


def get_db_path() -> Path:
    """Database path from settings (CONJUGADOR_DB_PATH)."""
    return settings.DB_PATH


def get_engine(db_path: Optional[PathLike] = None) -> Engine:
    """
    Get (or create) the engine for a database and make sure its tables exist.

    Args:
        db_path: SQLite file path or ":memory:". Defaults to get_db_path().
    """
    key = str(db_path) if db_path is not None else str(get_db_path())

    engine = _engines.get(key)
    if engine is not None:
        return engine

    if key == MEMORY:
        engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        Path(key).parent.mkdir(parents=True, exist_ok=True)
        engine = create_engine(f"sqlite:///{key}")

    Base.metadata.create_all(engine)
    logger.debug(f"Opened paradigm store at {key}")
    _engines[key] = engine
    return engine


def get_session(db_path: Optional[PathLike] = None) -> Session:
    """Create a new session bound to the database at db_path."""
    return sessionmaker(bind=get_engine(db_path))()


@contextmanager
def session_scope(db_path: Optional[PathLike] = None) -> Iterator[Session]:
    """
    Transactional session: commits on success, rolls back on error.

    Usage:
        with session_scope() as session:
            session.add(form)
    """
    session = get_session(db_path)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def dispose_engines():
    """Close every cached engine."""
    for engine in _engines.values():
        engine.dispose()
    _engines.clear()
