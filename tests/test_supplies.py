import pytest

from cleansync.models import Supply


def test_added_items_start_as_needed(api, logged_in):
    response = api.post("/api/supplies", json={"item": "  Paper towels  "})

    assert response.status_code == 200
    supply = response.json()
    assert supply["item"] == "Paper towels"
    assert supply["status"] == "needed"
    assert supply["client_id"] == logged_in.id


def test_items_are_stored_as_typed(api, logged_in):
    response = api.post("/api/supplies", json={"item": "Bleach & sponges <large>"})

    assert response.json()["item"] == "Bleach & sponges <large>"
    assert api.get("/api/supplies").json()[0]["item"] == "Bleach & sponges <large>"


def test_item_length_limit_applies_to_stored_text(api, logged_in):
    item = "&" * 255

    response = api.post("/api/supplies", json={"item": item})

    assert response.status_code == 200
    assert response.json()["item"] == item
    assert api.post("/api/supplies", json={"item": "&" * 256}).status_code == 400


def test_control_characters_are_dropped(api, logged_in):
    response = api.post("/api/supplies", json={"item": "Paper\x00 towels\x07"})

    assert response.json()["item"] == "Paper towels"


def test_list_returns_only_own_items(api, logged_in, make_client, db):
    other = make_client(name="Other", pin="5555", email="other@example.com")
    db.add(Supply(client_id=other.id, item="Bleach"))
    db.commit()

    api.post("/api/supplies", json={"item": "Sponges"})
    api.post("/api/supplies", json={"item": "Trash bags"})

    items = [s["item"] for s in api.get("/api/supplies").json()]
    assert items == ["Sponges", "Trash bags"]


def test_toggle_round_trip(api, logged_in):
    supply = api.post("/api/supplies", json={"item": "Glass cleaner"}).json()

    done = api.patch(f"/api/supplies/{supply['id']}", json={"status": "completed"})
    assert done.status_code == 200
    assert done.json()["status"] == "completed"

    again = api.patch(f"/api/supplies/{supply['id']}", json={"status": "needed"})
    assert again.json()["status"] == "needed"
    assert api.get("/api/supplies").json()[0]["status"] == "needed"


@pytest.mark.parametrize("payload", [{"status": "bought"}, {}])
def test_invalid_status_is_rejected(api, logged_in, payload):
    supply = api.post("/api/supplies", json={"item": "Mop"}).json()

    response = api.patch(f"/api/supplies/{supply['id']}", json=payload)

    assert response.status_code == 400
    assert api.get("/api/supplies").json()[0]["status"] == "needed"


@pytest.mark.parametrize("payload", [{}, {"item": ""}, {"item": "   "}, {"item": "x" * 300}])
def test_invalid_items_are_rejected(api, logged_in, payload):
    assert api.post("/api/supplies", json=payload).status_code == 400


def test_other_clients_items_are_not_found(api, logged_in, make_client, db):
    other = make_client(name="Other", pin="5555", email="other@example.com")
    supply = Supply(client_id=other.id, item="Bleach")
    db.add(supply)
    db.commit()

    assert api.patch(f"/api/supplies/{supply.id}", json={"status": "completed"}).status_code == 404
    assert api.patch("/api/supplies/9999", json={"status": "completed"}).status_code == 404
