import pytest

from cleansync.config import SESSION_COOKIE_NAME
from cleansync.domain.clients.repository import ClientRepository

PROTECTED = [
    ("get", "/api/client", None),
    ("get", "/api/bookings", None),
    ("get", "/api/bookings/availability?date=2026-10-20", None),
    ("post", "/api/bookings", {"date": "2026-10-20"}),
    ("patch", "/api/bookings/1", {"status": "cancelled"}),
    ("get", "/api/supplies", None),
    ("post", "/api/supplies", {"item": "Paper towels"}),
    ("patch", "/api/supplies/1", {"status": "completed"}),
    ("post", "/api/chat", {"message": "hello"}),
]


def test_login_sets_session_and_exposes_client(api, make_client):
    client = make_client(name="Jane Doe", pin="4321", email="jane@example.com")

    response = api.post("/api/auth/login", json={"pin": "4321"})

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert SESSION_COOKIE_NAME in response.cookies

    me = api.get("/api/client")
    assert me.status_code == 200
    body = me.json()
    assert body["id"] == client.id
    assert body["name"] == "Jane Doe"
    assert body["email"] == "jane@example.com"
    assert "pin" not in body


def test_unknown_pin_is_rejected_without_session(api, make_client):
    make_client(pin="1234")

    response = api.post("/api/auth/login", json={"pin": "9999"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid PIN"
    assert api.get("/api/client").status_code == 401


@pytest.mark.parametrize("pin", ["", "12", "12345", "abcd", "12a4"])
def test_malformed_pin_is_rejected_like_an_unknown_one(api, make_client, pin):
    make_client(pin="1234")

    response = api.post("/api/auth/login", json={"pin": pin})

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid PIN"


def test_missing_pin_is_a_bad_request(api):
    response = api.post("/api/auth/login", json={})
    assert response.status_code == 400


def test_logout_ends_the_session(api, logged_in):
    assert api.get("/api/client").status_code == 200

    response = api.post("/api/auth/logout")

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert api.get("/api/client").status_code == 401


def test_logout_without_session_is_harmless(api):
    assert api.post("/api/auth/logout").status_code == 200


def test_logging_in_again_switches_client(api, make_client):
    make_client(name="First", pin="1111", email="first@example.com")
    second = make_client(name="Second", pin="2222", email="second@example.com")

    api.post("/api/auth/login", json={"pin": "1111"})
    api.post("/api/auth/login", json={"pin": "2222"})

    assert api.get("/api/client").json()["id"] == second.id


def test_session_for_deleted_client_is_unauthorized(api, logged_in, db):
    db.delete(db.merge(logged_in))
    db.commit()

    assert api.get("/api/client").status_code == 401


@pytest.mark.parametrize("method,path,payload", PROTECTED)
def test_protected_endpoints_require_login(api, method, path, payload):
    kwargs = {"json": payload} if payload is not None else {}

    response = getattr(api, method)(path, **kwargs)

    assert response.status_code == 401
    assert response.json()["detail"] == "Unauthorized"


def test_health_is_public(api):
    response = api.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_client_lookup_by_id(db, make_client):
    client = make_client()

    assert ClientRepository.get_client_by_id(db, client.id).pin == "1234"
    assert ClientRepository.get_client_by_id(db, client.id + 1) is None
