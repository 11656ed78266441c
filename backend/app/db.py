from __future__ import annotations

from collections.abc import Generator
from typing import Annotated

from fastapi import Depends
from sqlalchemy import inspect
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.core.config import settings


def _build_engine():
    url = settings.DATABASE_URL
    if not url.startswith("sqlite"):
        return create_engine(url, pool_pre_ping=True)

    kwargs = {"connect_args": {"check_same_thread": False}}
    # In-memory SQLite lives inside one connection, share it across threads
    if url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


engine = _build_engine()


def init_db() -> None:
    """Create database tables in environments without migrations."""
    # Таблицы регистрируются в metadata только после импорта моделей
    import app.models  # noqa: F401

    SQLModel.metadata.create_all(bind=engine)


def missing_tables() -> list[str]:
    """Tables declared by the models that the database does not have yet."""
    import app.models  # noqa: F401

    existing = set(inspect(engine).get_table_names())
    return sorted(name for name in SQLModel.metadata.tables if name not in existing)


def get_session() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


SessionDep = Annotated[Session, Depends(get_session)]
