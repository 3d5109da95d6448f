"""
Student Routes

Self-registration and the student-ID login used by the student portal.
"""

from flask import jsonify, request
from portal.auth.routes import start_session
from portal.errors import ValidationError
from portal.extensions import session_manager
from portal.services import authenticate_as, get_repository, register_student
from portal.services.accounts import STUDENT
from portal.students import students_bp
from portal.utils import json_payload


@students_bp.route('/register', methods=['POST'])
def register():
    """Register a new student account"""
    student = register_student(json_payload())
    return jsonify({'msg': 'Student registered successfully.', 'student': student.summary()}), 201


@students_bp.route('/login', methods=['POST'])
def login():
    """Login by full student ID (any nn-nnnn-nnnnnn, not only 01-)"""
    payload = json_payload()
    student_id = payload.get('studentID')
    password = payload.get('password')
    if not student_id or not password:
        raise ValidationError('Student ID and password are required.')

    identity = authenticate_as(
        STUDENT, str(student_id).strip(), str(password), message='Invalid Student ID or password.'
    )
    session_manager.destroy(session_manager.token_from_request(request))

    student = get_repository(STUDENT).find_by_key(identity.id)
    return start_session(identity, {'msg': 'Login successful', 'student': student.summary()})
