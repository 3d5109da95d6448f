"""
Admin Decorator
"""

from functools import wraps
from flask_login import current_user, login_required
from portal.errors import PermissionDeniedError
from portal.services.accounts import ADMIN


def admin_required(f):
    """Decorator to ensure the request comes from a logged-in admin.

    - No session: 401 via Flask-Login's unauthorized handler
    - Session of another kind: 403
    """
    @wraps(f)
    @login_required
    def wrapper(*args, **kwargs):
        if current_user.role != ADMIN:
            raise PermissionDeniedError('Admin access required')
        return f(*args, **kwargs)
    return wrapper
