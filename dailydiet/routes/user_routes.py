from flask import Blueprint
from dailydiet.utils.session import require_session
from dailydiet.controllers.user_controller import (
    create_user_handler,
    list_users_handler,
    get_user_handler,
    list_user_snacks_handler,
    user_metrics_handler,
)

user_bp = Blueprint("users", __name__)

@user_bp.post("")
def create_user():
    return create_user_handler()

@user_bp.get("")
@require_session
def list_users():
    return list_users_handler()

@user_bp.get("/<user_id>")
@require_session
def get_user(user_id):
    return get_user_handler(user_id)

# Not session gated
@user_bp.get("/snacks/<user_id>")
def list_user_snacks(user_id):
    return list_user_snacks_handler(user_id)

@user_bp.get("/metrics/<user_id>")
def user_metrics(user_id):
    return user_metrics_handler(user_id)
