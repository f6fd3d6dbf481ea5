from __future__ import annotations

from advent_roulette.repositories.kv_repository import KeyValueRepository
from advent_roulette.services.presentation import MSG_COMPLETE, MSG_DRAWN_TODAY


def _data(response) -> dict:
    body = response.get_json()
    assert body["success"] is True, body
    return body["data"]


def _draw(client) -> dict:
    return _data(client.post("/api/draw"))


def test_health(client) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert _data(response) == {"status": "ok"}


def test_fresh_state_view(client) -> None:
    view = _data(client.get("/api/state"))

    assert view["display"] == "?"
    assert view["remaining_count"] == 24
    assert [c["number"] for c in view["cells"]] == list(range(1, 25))
    assert not any(c["drawn"] for c in view["cells"])
    assert view["history"] == []
    assert view["button"] == {
        "enabled": True,
        "status": "ready",
        "message": "24 numbers remaining. Good luck!",
    }


def test_index_page_renders_grid(client) -> None:
    response = client.get("/")
    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert html.count('class="number-cell') == 24
    assert "24 numbers remaining. Good luck!" in html


def test_spin_returns_schedule_without_drawing(client) -> None:
    data = _data(client.post("/api/spin"))

    assert data["message"] == "🎰 Spinning..."
    assert data["duration_ms"] == 200
    assert data["frames"][-1]["next_delay_ms"] is None
    assert data["frames"][-1]["elapsed_ms"] >= 200
    assert _data(client.get("/api/state"))["remaining_count"] == 24


def test_first_draw_scenario(client) -> None:
    response = client.post("/api/draw")
    assert response.status_code == 201
    data = response.get_json()["data"]

    number = data["number"]
    view = data["view"]
    assert data["message"] == f"🎉 Today's number is: {number}!"
    assert view["display"] == str(number)
    assert view["history"] == [{"number": number, "date": "2024-12-01", "label": "Sun, Dec 1"}]
    assert view["remaining_count"] == 23
    assert [c["number"] for c in view["cells"] if c["drawn"]] == [number]
    assert view["button"]["enabled"] is False
    assert view["button"]["message"] == MSG_DRAWN_TODAY


def test_second_draw_same_day_is_refused(client, clock) -> None:
    first = _draw(client)["number"]

    for path in ("/api/spin", "/api/draw"):
        response = client.post(path)
        assert response.status_code == 409
        assert response.get_json()["error"]["code"] == "draw_not_allowed"

    history = _data(client.get("/api/state"))["history"]
    assert [row["number"] for row in history] == [first]

    clock.advance()
    assert _data(client.get("/api/state"))["button"]["enabled"] is True


def test_twenty_four_days_complete_the_calendar(client, clock) -> None:
    drawn = []
    for _ in range(24):
        drawn.append(_draw(client)["number"])
        clock.advance()

    assert sorted(drawn) == list(range(1, 25))

    view = _data(client.get("/api/state"))
    assert view["remaining_count"] == 0
    assert all(c["drawn"] for c in view["cells"])
    assert [row["number"] for row in view["history"]] == list(reversed(drawn))
    assert view["button"] == {"enabled": False, "status": "complete", "message": MSG_COMPLETE}
    assert client.post("/api/spin").status_code == 409


def test_reset_with_secret_and_confirmation(client) -> None:
    _draw(client)

    verified = _data(client.post("/api/reset/verify", json={"secret": "advent2024"}))
    assert verified["outcome"] == "pending"
    assert verified["prompt"]

    data = _data(client.post("/api/reset", json={"secret": "advent2024", "confirmed": True}))
    assert data["outcome"] == "applied"
    assert data["notice"] == "Calendar has been reset!"
    assert data["view"]["display"] == "?"
    assert data["view"]["remaining_count"] == 24
    assert data["view"]["history"] == []
    assert data["view"]["button"]["enabled"] is True


def test_reset_with_wrong_secret_changes_nothing(client) -> None:
    number = _draw(client)["number"]

    requests = [
        ("/api/reset/verify", {"secret": "nope"}),
        ("/api/reset", {"secret": "nope", "confirmed": True}),
    ]
    for path, payload in requests:
        response = client.post(path, json=payload)
        assert response.status_code == 403
        assert response.get_json()["error"] == {
            "code": "reset_rejected",
            "message": "Incorrect password!",
            "details": None,
        }

    history = _data(client.get("/api/state"))["history"]
    assert [row["number"] for row in history] == [number]


def test_cancelled_reset_changes_nothing(client) -> None:
    number = _draw(client)["number"]

    assert _data(client.post("/api/reset", json={"secret": None}))["outcome"] == "cancelled"
    declined = _data(client.post("/api/reset", json={"secret": "advent2024", "confirmed": False}))
    assert declined["outcome"] == "cancelled"
    assert declined["view"] is None

    history = _data(client.get("/api/state"))["history"]
    assert [row["number"] for row in history] == [number]


def test_reset_payload_is_validated(client) -> None:
    response = client.post("/api/reset", json={})
    assert response.status_code == 400
    assert response.get_json()["error"]["code"] == "validation_error"


def test_unknown_route_uses_json_envelope(client) -> None:
    response = client.get("/api/nope")
    assert response.status_code == 404
    assert response.get_json()["error"]["code"] == "not_found"


def test_corrupt_saved_state_is_recovered_through_the_api(app, client) -> None:
    _draw(client)
    with app.extensions["session_factory"]() as session, session.begin():
        KeyValueRepository().put(session, "adventRouletteState", "[" * 100_000 + "]" * 100_000)

    view = _data(client.get("/api/state"))

    assert view["remaining_count"] == 24
    assert view["history"] == []
    assert view["button"]["enabled"] is True
    assert client.get("/").status_code == 200
