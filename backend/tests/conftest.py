from __future__ import annotations

import itertools
import os
from datetime import datetime, timedelta

import pytest

# Settings are read at import time; keep tests away from the on-disk database
os.environ.setdefault("DATABASE_URL", "sqlite://")

from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.db import get_session
from app.main import app as fastapi_app
from app.models import Category, Event, EventState, User


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    try:
        yield engine
    finally:
        SQLModel.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture()
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture()
def client(engine):
    def _get_session():
        with Session(engine) as session:
            yield session

    fastapi_app.dependency_overrides[get_session] = _get_session
    try:
        yield TestClient(fastapi_app)
    finally:
        fastapi_app.dependency_overrides.clear()


@pytest.fixture()
def make_user(session):
    counter = itertools.count(1)

    def _make(name: str | None = None) -> User:
        n = next(counter)
        user = User(name=name or f"User {n}", email=f"user{n}@example.com")
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _make


@pytest.fixture()
def category(session) -> Category:
    category = Category(name="Concerts")
    session.add(category)
    session.commit()
    session.refresh(category)
    return category


@pytest.fixture()
def make_event(session, category):
    def _make(
        initiator: User,
        *,
        participant_limit: int = 0,
        request_moderation: bool = True,
        state: str = EventState.PUBLISHED,
        **overrides,
    ) -> Event:
        fields = dict(
            title="Jazz evening",
            annotation="An evening of live jazz in the park",
            description="Bring a blanket, the band starts at eight sharp.",
            category_id=category.id,
            initiator_id=initiator.id,
            event_date=datetime.now() + timedelta(days=10),
            lat=55.75,
            lon=37.62,
            participant_limit=participant_limit,
            request_moderation=request_moderation,
            state=state,
        )
        fields.update(overrides)
        event = Event(**fields)
        session.add(event)
        session.commit()
        session.refresh(event)
        return event

    return _make
