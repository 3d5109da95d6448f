"""
Professors Blueprint
"""

from flask import Blueprint

professors_bp = Blueprint('professors', __name__)

from portal.professors import routes  # noqa: E402, F401
