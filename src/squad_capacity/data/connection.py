# src/squad_capacity/data/connection.py
from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from squad_capacity.utils.config import config


# ---------------------------------------------------------
# Build SQLAlchemy engine
# ---------------------------------------------------------
@lru_cache(maxsize=None)
def get_engine(url: Optional[str] = None) -> Engine:
    """Engine for the planning database; URL defaults to configuration."""
    return create_engine(url or config.SQLALCHEMY_DATABASE_URI, pool_pre_ping=True)


@contextmanager
def get_connection(engine: Optional[Engine] = None):
    engine = engine or get_engine()
    conn = engine.connect()
    try:
        yield conn
    finally:
        conn.close()
