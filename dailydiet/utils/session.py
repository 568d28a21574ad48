from functools import wraps
from uuid import uuid4
from flask import request, current_app
from dailydiet.utils.http import error


def _cookie_name() -> str:
    return current_app.config.get("SESSION_ID_COOKIE", "sessionId")


def get_session_id():
    return request.cookies.get(_cookie_name())


def ensure_session_id():
    """
    Return ``(session_id, is_new)``.

    The inbound cookie is reused unchanged; when absent a fresh token is
    generated and the caller must hand it back with ``set_session_cookie``.
    """
    session_id = get_session_id()
    if session_id:
        return session_id, False
    return str(uuid4()), True


def set_session_cookie(response, session_id: str):
    response.set_cookie(
        _cookie_name(),
        session_id,
        max_age=current_app.config.get("SESSION_MAX_AGE", 60 * 60 * 24 * 7),
        path="/",
    )
    return response


def require_session(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        session_id = get_session_id()
        if not session_id:
            return error("UNAUTHORIZED", "Missing session cookie", 401)
        request.session_id = session_id  # type: ignore
        return f(*args, **kwargs)
    return wrapper

__all__ = ["ensure_session_id", "set_session_cookie", "require_session", "get_session_id"]
