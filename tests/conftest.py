import pytest
from dailydiet import create_app
from dailydiet.extensions import db


@pytest.fixture()
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "SECRET_KEY": "test-secret",
    })
    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def register_user():
    """Create a user through the API and return its row as listed by /users."""
    def _register(client, **overrides):
        body = {"name": "Ana", "age": 30, "height": 165, "weight": 60}
        body.update(overrides)
        r = client.post("/diet/users", json=body)
        assert r.status_code == 201, r.data
        users = client.get("/diet/users").get_json()["users"]
        return next(u for u in users if u["name"] == body["name"])
    return _register


@pytest.fixture()
def log_snack():
    def _log(client, user_id, **overrides):
        body = {
            "title": "Apple",
            "description": "AM snack",
            "at_diet": True,
            "date": "2024-01-01",
            "time": "08:00",
            "userId": user_id,
        }
        body.update(overrides)
        r = client.post("/diet/snack", json=body)
        assert r.status_code == 201, r.data
        return r
    return _log
