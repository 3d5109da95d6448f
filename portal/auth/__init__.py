"""
Auth Blueprint

Unified login for every account kind, logout, current session and
self-service profile updates.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from portal.auth import routes  # noqa: E402, F401
