from __future__ import annotations

import logging
from functools import wraps

from flask import g, jsonify

from ..core.exceptions import (
    AccessDenied,
    AuthenticationError,
    AuthorizationError,
    DomainError,
    UnknownStudent,
    ValidationError,
)

logger = logging.getLogger(__name__)


def error_response(e: Exception):
    """Map a domain error to a JSON body and HTTP status."""
    if isinstance(e, AccessDenied):
        body = {
            "success": False,
            "error": "access_denied",
            "message": str(e),
            "assigned_grade": e.assigned_grade,
            "student_grade": e.student_grade,
        }
        return jsonify(body), 403
    if isinstance(e, UnknownStudent):
        return jsonify({"success": False, "error": "unknown_student", "message": str(e)}), 400
    if isinstance(e, ValidationError):
        return jsonify({"success": False, "error": "validation", "message": str(e)}), 400
    if isinstance(e, AuthenticationError):
        return jsonify({"success": False, "error": "authentication", "message": str(e)}), 401
    if isinstance(e, AuthorizationError):
        return jsonify({"success": False, "error": "forbidden", "message": str(e)}), 403
    if isinstance(e, DomainError):
        return jsonify({"success": False, "error": "domain", "message": str(e)}), 400

    logger.exception("Unexpected error")
    return jsonify({"success": False, "error": "internal", "message": "Internal error"}), 500


def make_guards(container):
    """Build login/admin decorators bound to the container's session slot.

    The current user is read once per request into ``g.user`` and passed
    explicitly to services from there.
    """

    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user = container.auth_service.current_user()
            if user is None:
                return jsonify({"success": False, "error": "authentication", "message": "Login required"}), 401
            g.user = user
            return view(*args, **kwargs)

        return wrapper

    def admin_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user = container.auth_service.current_user()
            if user is None:
                return jsonify({"success": False, "error": "authentication", "message": "Login required"}), 401
            if not user.is_admin:
                return jsonify({"success": False, "error": "forbidden", "message": "Administrators only"}), 403
            g.user = user
            return view(*args, **kwargs)

        return wrapper

    return login_required, admin_required
