"""
Admin Blueprint

Admin registration and administration of every account kind. All routes
except registration require an authenticated admin session.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from portal.admin import routes  # noqa: E402, F401
