from typing import Any, Dict, Optional, Tuple, Type
from flask import request, jsonify, current_app
from marshmallow import Schema, ValidationError
from werkzeug.exceptions import HTTPException
from dailydiet.extensions import db

def ok(payload: Dict[str, Any], status: int = 200):
    return jsonify(payload), status


def empty(status: int = 200):
    return "", status


def error(code: str, message: str, status: int = 400, **extra):
    body: Dict[str, Any] = {"error": {"code": code, "message": message}}
    if extra:
        body["error"].update(extra)
    return jsonify(body), status

def json_body() -> Any:
    # force=True allows missing Content-Type header; anything that is not
    # JSON (form posts included) becomes an empty payload and fails validation
    data = request.get_json(force=True, silent=True)
    return data if data is not None else {}


def validate_schema(schema_cls: Type[Schema], payload: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
    """
    Load ``payload`` through ``schema_cls``.

    Returns ``(data, None)`` on success and ``(None, messages)`` when
    marshmallow rejects the payload. Unknown keys are rejected.
    """
    try:
        return schema_cls().load(payload), None
    except ValidationError as err:
        return None, err.messages


def register_error_handlers(app):
    @app.errorhandler(404)
    def not_found(e):
        return error("NOT_FOUND", "Resource not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(e):
        return error("METHOD_NOT_ALLOWED", "Method not allowed", 405)

    @app.errorhandler(Exception)
    def unhandled(e):
        if isinstance(e, HTTPException):
            return error(e.name.upper().replace(" ", "_"), e.description or e.name, e.code or 500)

        db.session.rollback()
        current_app.logger.error(f"Unhandled error on {request.method} {request.path}: {e}", exc_info=e)
        return error("INTERNAL_ERROR", "Internal server error", 500)
