"""HTTP surface of the participation request endpoints."""
from __future__ import annotations


def _submit(client, user_id: int, event_id: int):
    return client.post(f"/users/{user_id}/requests", params={"eventId": event_id})


def test_submit_and_list_own_requests(client, make_user, make_event):
    organizer, requester = make_user(), make_user()
    event = make_event(organizer, participant_limit=10)

    response = _submit(client, requester.id, event.id)

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "PENDING"
    assert body["event"] == event.id
    assert body["requester"] == requester.id
    assert len(body["created"]) == len("2024-01-01 12:00:00")

    listed = client.get(f"/users/{requester.id}/requests")
    assert listed.status_code == 200
    assert [r["id"] for r in listed.json()] == [body["id"]]


def test_submit_error_mapping(client, make_user, make_event):
    organizer, requester = make_user(), make_user()
    event = make_event(organizer, participant_limit=10)
    assert _submit(client, requester.id, event.id).status_code == 201

    duplicate = _submit(client, requester.id, event.id)
    assert duplicate.status_code == 409
    assert "already exists" in duplicate.json()["detail"]

    own = _submit(client, organizer.id, event.id)
    assert own.status_code == 409
    assert "organizers are not allowed" in own.json()["detail"]

    missing = _submit(client, requester.id, 9999)
    assert missing.status_code == 404

    no_event_id = client.post(f"/users/{requester.id}/requests")
    assert no_event_id.status_code == 400


def test_cancel_request(client, make_user, make_event):
    organizer, requester = make_user(), make_user()
    moderated = make_event(organizer, participant_limit=10)
    open_event = make_event(organizer, participant_limit=0)
    pending = _submit(client, requester.id, moderated.id).json()
    confirmed = _submit(client, requester.id, open_event.id).json()

    response = client.patch(f"/users/{requester.id}/requests/{pending['id']}/cancel")
    assert response.status_code == 200
    assert response.json()["status"] == "CANCELED"

    response = client.patch(f"/users/{requester.id}/requests/{confirmed['id']}/cancel")
    assert response.status_code == 409

    response = client.patch(f"/users/{organizer.id}/requests/{pending['id']}/cancel")
    assert response.status_code == 404


def test_organizer_bulk_update(client, make_user, make_event):
    organizer = make_user()
    event = make_event(organizer, participant_limit=2, request_moderation=True)
    ids = [_submit(client, make_user().id, event.id).json()["id"] for _ in range(3)]

    listed = client.get(f"/users/{organizer.id}/events/{event.id}/requests")
    assert [r["id"] for r in listed.json()] == ids

    response = client.patch(
        f"/users/{organizer.id}/events/{event.id}/requests",
        json={"requestIds": ids, "status": "CONFIRMED"},
    )

    assert response.status_code == 200
    body = response.json()
    assert [r["id"] for r in body["confirmedRequests"]] == ids[:2]
    assert [r["id"] for r in body["rejectedRequests"]] == ids[2:]
    assert {r["status"] for r in body["confirmedRequests"]} == {"CONFIRMED"}
    assert {r["status"] for r in body["rejectedRequests"]} == {"REJECTED"}

    # Повторная модерация тех же заявок невозможна
    again = client.patch(
        f"/users/{organizer.id}/events/{event.id}/requests",
        json={"requestIds": ids[2:], "status": "REJECTED"},
    )
    assert again.status_code == 409


def test_bulk_update_validation(client, make_user, make_event):
    organizer = make_user()
    event = make_event(organizer, participant_limit=2)
    request_id = _submit(client, make_user().id, event.id).json()["id"]
    url = f"/users/{organizer.id}/events/{event.id}/requests"

    assert client.patch(url, json={"requestIds": [request_id], "status": "PENDING"}).status_code == 400
    assert client.patch(url, json={"requestIds": [], "status": "CONFIRMED"}).status_code == 400
    assert client.patch(url, json={"requestIds": [9999], "status": "CONFIRMED"}).status_code == 404

    stranger = make_user()
    response = client.patch(
        f"/users/{stranger.id}/events/{event.id}/requests",
        json={"requestIds": [request_id], "status": "CONFIRMED"},
    )
    assert response.status_code == 404
    assert client.get(f"/users/{stranger.id}/events/{event.id}/requests").status_code == 404
