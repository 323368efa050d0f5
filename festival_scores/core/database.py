"""Database configuration and session helpers."""

from __future__ import annotations

from typing import Iterator

from sqlmodel import Session, create_engine

from .config import DATA_DIR, DATABASE_URL

_connect_args = {}
if DATABASE_URL.startswith("sqlite"):
    DATA_DIR.mkdir(parents=True, exist_ok=True)
    _connect_args = {"check_same_thread": False}

engine = create_engine(DATABASE_URL, connect_args=_connect_args)


def get_session() -> Iterator[Session]:
    """FastAPI dependency that yields a database session."""

    with Session(engine) as session:
        yield session


__all__ = ["engine", "get_session"]
