import pytest
from uuid import uuid4


GATED_ENDPOINTS = [
    ("get", "/diet/users"),
    ("get", f"/diet/users/{uuid4()}"),
    ("get", "/diet/snack"),
    ("get", f"/diet/snack/{uuid4()}"),
    ("put", f"/diet/snack/{uuid4()}"),
    ("delete", f"/diet/snack/{uuid4()}"),
]


@pytest.mark.parametrize("method,path", GATED_ENDPOINTS)
def test_session_gated_endpoints_reject_missing_cookie(client, method, path):
    r = getattr(client, method)(path, json={})
    assert r.status_code == 401
    assert r.get_json() == {"error": {"code": "UNAUTHORIZED", "message": "Missing session cookie"}}


def test_home_and_health(client):
    r = client.get("/")
    assert r.status_code == 200
    banner = r.get_json()
    assert "message" in banner
    assert banner["prefix"] == "/diet"
    assert "/diet/snack" in banner["endpoints"]

    r2 = client.get("/diet/health")
    assert r2.status_code == 200
    assert r2.get_json() == {"status": "online", "database": "healthy"}


def test_unknown_route_and_method(client):
    r = client.get("/diet/nothing-here")
    assert r.status_code == 404
    assert r.get_json()["error"]["code"] == "NOT_FOUND"

    r2 = client.patch("/diet/snack")
    assert r2.status_code == 405
    assert r2.get_json()["error"]["code"] == "METHOD_NOT_ALLOWED"


def test_custom_prefix():
    from dailydiet import create_app
    from dailydiet.extensions import db

    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "URL_PREFIX": "/api/v2",
    })
    with app.app_context():
        db.create_all()
    client = app.test_client()
    r = client.post("/api/v2/users", json={"name": "Ana", "age": 30, "height": 165, "weight": 60})
    assert r.status_code == 201
    assert client.post("/diet/users", json={}).status_code == 404
    assert client.get("/").get_json()["prefix"] == "/api/v2"
