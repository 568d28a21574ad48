from flask import request, make_response
from dailydiet.extensions import db
from dailydiet.schemas.user_schema import CreateUserSchema, UserIdParamSchema
from dailydiet.services.user_service import create_user, list_users, get_user, list_user_snacks
from dailydiet.services.metrics_service import user_metrics
from dailydiet.utils.http import ok, error, json_body, validate_schema
from dailydiet.utils.session import ensure_session_id, set_session_cookie


def create_user_handler():
    data, errors = validate_schema(CreateUserSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid user data", 400, details=errors)

    session_id, is_new = ensure_session_id()
    create_user(db.session, session_id, **data)

    response = make_response("", 201)
    if is_new:
        set_session_cookie(response, session_id)
    return response


def list_users_handler():
    users = list_users(db.session)
    return ok({"users": [u.to_dict() for u in users]})


def get_user_handler(user_id):
    data, errors = validate_schema(UserIdParamSchema, {"userId": user_id})
    if errors:
        return error("VALIDATION_ERROR", "Invalid user id", 400, details=errors)

    user = get_user(db.session, str(data["user_id"]), request.session_id)
    return ok({"user": user.to_dict() if user else None})


def list_user_snacks_handler(user_id):
    snacks = list_user_snacks(db.session, user_id)
    return ok({"stacksUser": [s.to_dict() for s in snacks]})


def user_metrics_handler(user_id):
    # ?date= is accepted but does not filter anything
    metrics = user_metrics(db.session, user_id)
    return ok({"metrics": metrics})
