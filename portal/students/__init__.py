"""
Students Blueprint
"""

from flask import Blueprint

students_bp = Blueprint('students', __name__)

from portal.students import routes  # noqa: E402, F401
