from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request, session

from ..core.exceptions import NotFoundError, StoreError, ValidationError

logger = logging.getLogger(__name__)


def current_owner() -> str:
    """Owner id placed in the session by the external auth service."""
    return str(session["user_id"])


def owner_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not session.get("user_id"):
            return json_error("Not authenticated", 401)
        return view(*args, **kwargs)

    return wrapper


def json_body() -> dict:
    """Parsed JSON object of the request; a missing body counts as empty."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def json_error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def handle_validation(e: ValidationError):
        return json_error(str(e), 400)

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return json_error(str(e), 404)

    @app.errorhandler(StoreError)
    def handle_store(e: StoreError):
        logger.error("store failure: %s", e)
        return json_error("Database unavailable", 503)
