"""
Professor Routes

Professors are created by admins; there is no self-registration.
"""

from flask import jsonify
from portal.admin.decorators import admin_required
from portal.professors import professors_bp
from portal.services import register_professor
from portal.utils import json_payload


@professors_bp.route('/register', methods=['POST'])
@admin_required
def register():
    """Register a professor account (admin only)"""
    professor = register_professor(json_payload())
    return jsonify({'msg': 'Professor registered successfully.', 'professor': professor.summary()}), 201
