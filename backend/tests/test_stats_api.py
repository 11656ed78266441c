"""Hit recording and statistics queries."""
from __future__ import annotations

from datetime import datetime

import pytest
from sqlmodel import select

from app.models import Hit
from app.repositories import HitRepository
from app.services.stats import StatsService

START = "2024-01-01 00:00:00"
END = "2024-12-31 23:59:59"


def _hit(client, uri: str, ip: str, timestamp: str = "2024-06-01 12:00:00"):
    return client.post(
        "/hit",
        json={"app": "ewm-main-service", "uri": uri, "ip": ip, "timestamp": timestamp},
    )


@pytest.fixture()
def hits(client):
    _hit(client, "/events/1", "10.0.0.1")
    _hit(client, "/events/1", "10.0.0.1")
    _hit(client, "/events/1", "10.0.0.2")
    _hit(client, "/events/2", "10.0.0.1")
    _hit(client, "/events", "10.0.0.3")
    _hit(client, "/events/2", "10.0.0.9", timestamp="2023-06-01 12:00:00")


def test_record_hit_returns_created_without_body(client):
    response = _hit(client, "/events", "192.168.0.1")

    assert response.status_code == 201
    assert response.content == b""


@pytest.mark.parametrize("timestamp", ["2024-06-01T12:00:00", "2024-6-1 12:00:00"])
def test_record_hit_rejects_bad_timestamp(client, timestamp):
    response = _hit(client, "/events", "192.168.0.1", timestamp=timestamp)

    assert response.status_code == 400


def test_stats_counts_all_hits_in_range(client, hits):
    response = client.get("/stats", params={"start": START, "end": END})

    assert response.status_code == 200
    assert response.json() == [
        {"uri": "/events/1", "hits": 3},
        {"uri": "/events", "hits": 1},
        {"uri": "/events/2", "hits": 1},
    ]


def test_stats_unique_ips_and_uri_filter(client, hits):
    response = client.get(
        "/stats",
        params={"start": START, "end": END, "uris": ["/events/1", "/events/2"], "unique": "true"},
    )

    assert response.json() == [
        {"uri": "/events/1", "hits": 2},
        {"uri": "/events/2", "hits": 1},
    ]


def test_stats_accepts_comma_separated_uris(client, hits):
    response = client.get(
        "/stats", params={"start": START, "end": END, "uris": "/events/2,/events"}
    )

    assert {item["uri"] for item in response.json()} == {"/events/2", "/events"}


@pytest.mark.parametrize(
    "start, end",
    [
        ("2024-13-01 00:00:00", END),
        (START, "2024-12-31"),
        ("yesterday", END),
        ("2024-1-1 0:0:0", END),
        (START, "2024-12-31 23:59:5"),
        (END, START),
    ],
)
def test_stats_bad_range_is_client_error(client, hits, start, end):
    response = client.get("/stats", params={"start": start, "end": end})

    assert response.status_code == 400

    after = client.get("/stats", params={"start": START, "end": END}).json()
    assert sum(item["hits"] for item in after) == 5


def test_stats_requires_start_and_end(client):
    assert client.get("/stats", params={"start": START}).status_code == 400


def test_hit_timestamps_are_stored_without_timezone(session):
    stats = StatsService(HitRepository(session))
    moment = datetime(2024, 6, 1, 12, 30, 15)

    stats.record("ewm-main-service", "/events/7", "10.0.0.7", moment)

    session.expire_all()
    stored = session.exec(select(Hit)).one()
    assert stored.timestamp == moment
    assert stored.timestamp.tzinfo is None
    assert stats.query(datetime(2024, 6, 1), datetime(2024, 6, 2)) == [("/events/7", 1)]
