"""Event creation, moderation and public lookup."""
from __future__ import annotations

from datetime import datetime, timedelta

from app.models import EventState
from app.schemas import DATETIME_FORMAT


def _in(**delta) -> str:
    return (datetime.now() + timedelta(**delta)).strftime(DATETIME_FORMAT)


def _event_payload(category_id: int, **overrides) -> dict:
    payload = {
        "annotation": "Open-air cinema with classic films",
        "category": category_id,
        "description": "Screening of classic films under the stars, bring a chair.",
        "eventDate": _in(days=5),
        "location": {"lat": 59.93, "lon": 30.31},
        "paid": False,
        "participantLimit": 2,
        "requestModeration": True,
        "title": "Cinema night",
    }
    payload.update(overrides)
    return payload


def _create(client, user_id: int, category_id: int, **overrides):
    return client.post(f"/users/{user_id}/events", json=_event_payload(category_id, **overrides))


def test_create_event(client, make_user, category):
    user = make_user("Initiator")

    response = _create(client, user.id, category.id)

    assert response.status_code == 201
    body = response.json()
    assert body["state"] == EventState.PENDING
    assert body["initiator"] == {"id": user.id, "name": "Initiator"}
    assert body["category"] == {"id": category.id, "name": category.name}
    assert body["participantLimit"] == 2
    assert body["requestModeration"] is True
    assert body["confirmedRequests"] == 0
    assert body["views"] == 0
    assert body["publishedOn"] is None
    assert body["location"] == {"lat": 59.93, "lon": 30.31}


def test_create_event_validation(client, make_user, category):
    user = make_user()

    assert _create(client, user.id, category.id, eventDate=_in(hours=1)).status_code == 400
    assert _create(client, user.id, category.id, eventDate="2030-01-01T10:00").status_code == 400
    assert _create(client, user.id, category.id, annotation="short").status_code == 400
    assert _create(client, user.id, category.id, participantLimit=-1).status_code == 400
    assert _create(client, user.id, 9999).status_code == 404
    assert _create(client, 9999, category.id).status_code == 404


def test_user_event_listing_and_ownership(client, make_user, category):
    owner, stranger = make_user(), make_user()
    event_id = _create(client, owner.id, category.id).json()["id"]

    listed = client.get(f"/users/{owner.id}/events")
    assert [e["id"] for e in listed.json()] == [event_id]
    assert client.get(f"/users/{owner.id}/events/{event_id}").status_code == 200
    assert client.get(f"/users/{stranger.id}/events/{event_id}").status_code == 404


def test_user_update_state_actions(client, make_user, category):
    user = make_user()
    event_id = _create(client, user.id, category.id).json()["id"]
    url = f"/users/{user.id}/events/{event_id}"

    canceled = client.patch(url, json={"stateAction": "CANCEL_REVIEW", "title": "Renamed"})
    assert canceled.status_code == 200
    assert canceled.json()["state"] == EventState.CANCELED
    assert canceled.json()["title"] == "Renamed"

    resent = client.patch(url, json={"stateAction": "SEND_TO_REVIEW"})
    assert resent.json()["state"] == EventState.PENDING

    assert client.patch(url, json={"eventDate": _in(minutes=30)}).status_code == 400


def test_admin_publish_and_reject(client, make_user, category):
    user = make_user()
    event_id = _create(client, user.id, category.id).json()["id"]
    url = f"/admin/events/{event_id}"

    published = client.patch(url, json={"stateAction": "PUBLISH_EVENT"})
    assert published.status_code == 200
    assert published.json()["state"] == EventState.PUBLISHED
    assert published.json()["publishedOn"] is not None

    assert client.patch(url, json={"stateAction": "PUBLISH_EVENT"}).status_code == 409
    assert client.patch(url, json={"stateAction": "REJECT_EVENT"}).status_code == 409
    assert client.patch(f"/users/{user.id}/events/{event_id}", json={"title": "Late edit"}).status_code == 409


def test_admin_publish_too_close_to_event_date(client, make_user, make_event):
    event = make_event(
        make_user(), state=EventState.PENDING, event_date=datetime.now() + timedelta(minutes=30)
    )

    response = client.patch(f"/admin/events/{event.id}", json={"stateAction": "PUBLISH_EVENT"})

    assert response.status_code == 409


def test_admin_cannot_lower_limit_below_confirmed(client, make_user, make_event):
    event = make_event(make_user(), participant_limit=3, request_moderation=False)
    for _ in range(2):
        requester = make_user()
        client.post(f"/users/{requester.id}/requests", params={"eventId": event.id})
    url = f"/admin/events/{event.id}"

    assert client.patch(url, json={"participantLimit": 1}).status_code == 409
    assert client.get(f"/events/{event.id}").json()["participantLimit"] == 3

    widened = client.patch(url, json={"participantLimit": 2})
    assert widened.status_code == 200
    assert widened.json()["confirmedRequests"] == 2
    assert client.patch(url, json={"participantLimit": 0}).json()["participantLimit"] == 0


def test_admin_reject_pending(client, make_user, make_event):
    event = make_event(make_user(), state=EventState.PENDING)

    response = client.patch(f"/admin/events/{event.id}", json={"stateAction": "REJECT_EVENT"})

    assert response.json()["state"] == EventState.CANCELED


def test_admin_search_by_state(client, make_user, make_event):
    user = make_user()
    pending = make_event(user, state=EventState.PENDING)
    make_event(user, state=EventState.PUBLISHED)

    response = client.get("/admin/events", params={"states": ["PENDING"], "users": [user.id]})

    assert [e["id"] for e in response.json()] == [pending.id]


def test_public_event_counts_unique_views(client, make_user, make_event):
    event = make_event(make_user())

    first = client.get(f"/events/{event.id}")
    second = client.get(f"/events/{event.id}")

    assert first.status_code == 200
    assert first.json()["views"] == 1
    assert second.json()["views"] == 1

    stats = client.get(
        "/stats",
        params={"start": _in(hours=-1), "end": _in(hours=1), "uris": [f"/events/{event.id}"]},
    )
    assert stats.json() == [{"uri": f"/events/{event.id}", "hits": 2}]


def test_public_event_hides_unpublished(client, make_user, make_event):
    event = make_event(make_user(), state=EventState.PENDING)

    assert client.get(f"/events/{event.id}").status_code == 404


def test_public_search(client, make_user, make_event):
    organizer, requester = make_user(), make_user()
    full = make_event(
        organizer, participant_limit=1, request_moderation=False, annotation="Jazz in the Park tonight"
    )
    open_event = make_event(organizer, annotation="Chess tournament for beginners")
    make_event(organizer, state=EventState.PENDING, annotation="Jazz rehearsal closed session")
    client.post(f"/users/{requester.id}/requests", params={"eventId": full.id})

    by_text = client.get("/events", params={"text": "JAZZ"})
    assert [e["id"] for e in by_text.json()] == [full.id]
    assert by_text.json()[0]["confirmedRequests"] == 1

    available = client.get("/events", params={"onlyAvailable": "true"})
    assert [e["id"] for e in available.json()] == [open_event.id]

    bad_range = client.get(
        "/events", params={"rangeStart": _in(days=2), "rangeEnd": _in(days=1)}
    )
    assert bad_range.status_code == 400
