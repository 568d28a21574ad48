from flask import Blueprint
from dailydiet.utils.session import require_session
from dailydiet.controllers.snack_controller import (
    create_snack_handler,
    list_snacks_handler,
    get_snack_handler,
    update_snack_handler,
    delete_snack_handler,
)

snack_bp = Blueprint("snack", __name__)

@snack_bp.post("")
def create_snack():
    return create_snack_handler()

@snack_bp.get("")
@require_session
def list_snacks():
    return list_snacks_handler()

@snack_bp.get("/<id>")
@require_session
def get_snack(id):
    return get_snack_handler(id)

@snack_bp.put("/<id>")
@require_session
def update_snack(id):
    return update_snack_handler(id)

@snack_bp.delete("/<id>")
@require_session
def delete_snack(id):
    return delete_snack_handler(id)
