from flask import request, make_response
from dailydiet.extensions import db
from dailydiet.schemas.snack_schema import CreateSnackSchema, UpdateSnackSchema
from dailydiet.services.snack_service import (
    create_snack,
    list_snacks,
    get_snacks,
    update_snack,
    delete_snack,
)
from dailydiet.utils.http import ok, empty, error, json_body, validate_schema
from dailydiet.utils.session import ensure_session_id, set_session_cookie


def create_snack_handler():
    data, errors = validate_schema(CreateSnackSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid snack data", 400, details=errors)

    session_id, is_new = ensure_session_id()
    user_id = str(data.pop("user_id"))

    try:
        create_snack(db.session, session_id, user_id, **data)
    except ValueError as e:
        code, _, message = str(e).partition(": ")
        return error(code, message or code, 404)

    response = make_response("", 201)
    if is_new:
        set_session_cookie(response, session_id)
    return response


def list_snacks_handler():
    snacks = list_snacks(db.session, request.session_id)
    return ok({"snacks": [s.to_dict() for s in snacks]})


def get_snack_handler(id):
    snacks = get_snacks(db.session, id, request.session_id)
    return ok({"snack": [s.to_dict() for s in snacks]})


def update_snack_handler(id):
    data, errors = validate_schema(UpdateSnackSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid snack data", 400, details=errors)

    # Zero rows touched (unknown id or other session) is not an error
    update_snack(db.session, id, request.session_id, **data)
    return empty(200)


def delete_snack_handler(id):
    delete_snack(db.session, id, request.session_id)
    return empty(200)
