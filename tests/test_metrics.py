from uuid import uuid4
from dailydiet.extensions import db
from dailydiet.services.metrics_service import user_metrics


def test_metrics_counts_and_daily_groups(client, register_user, log_snack):
    user = register_user(client)
    log_snack(client, user["id"], title="Apple", date="2024-01-01", at_diet=True)
    log_snack(client, user["id"], title="Salad", date="2024-01-01", at_diet=True)
    log_snack(client, user["id"], title="Cake", date="2024-01-01", at_diet=False)
    log_snack(client, user["id"], title="Yogurt", date="2024-01-02", at_diet=True)

    r = client.get(f"/diet/users/metrics/{user['id']}")
    assert r.status_code == 200
    metrics = r.get_json()["metrics"]
    assert metrics["total"] == 4
    assert metrics["withinDiet"] == 3
    assert metrics["offDiet"] == 1
    assert metrics["total"] == metrics["withinDiet"] + metrics["offDiet"]
    assert metrics["bestSequence"] == [
        {"date": "2024-01-01", "count": 2},
        {"date": "2024-01-02", "count": 1},
    ]


def test_metrics_only_count_that_users_snacks(app, register_user, log_snack):
    client = app.test_client()
    ana = register_user(client, name="Ana")
    bia = register_user(client, name="Bia")
    log_snack(client, ana["id"], at_diet=True)
    log_snack(client, bia["id"], at_diet=False)
    log_snack(client, bia["id"], at_diet=False)

    metrics = app.test_client().get(f"/diet/users/metrics/{bia['id']}").get_json()["metrics"]
    assert metrics == {"total": 2, "withinDiet": 0, "offDiet": 2, "bestSequence": []}


def test_metrics_ignore_date_param(client, register_user, log_snack):
    user = register_user(client)
    log_snack(client, user["id"], date="2024-01-01")
    log_snack(client, user["id"], date="2024-03-01")

    plain = client.get(f"/diet/users/metrics/{user['id']}").get_json()
    dated = client.get(f"/diet/users/metrics/{user['id']}?date=2024-01-01").get_json()
    assert plain == dated
    assert dated["metrics"]["total"] == 2


def test_metrics_unknown_user(client):
    r = client.get(f"/diet/users/metrics/{uuid4()}")
    assert r.status_code == 200
    assert r.get_json() == {
        "metrics": {"total": 0, "withinDiet": 0, "offDiet": 0, "bestSequence": []}
    }


def test_metrics_skip_deleted_snacks(client, app, register_user, log_snack):
    user = register_user(client)
    log_snack(client, user["id"], title="Apple")
    log_snack(client, user["id"], title="Cake", at_diet=False)
    cake = next(s for s in client.get("/diet/snack").get_json()["snacks"] if s["title"] == "Cake")
    client.delete(f"/diet/snack/{cake['id']}")

    with app.app_context():
        metrics = user_metrics(db.session, user["id"])
    assert metrics["total"] == 1
    assert metrics["offDiet"] == 0
