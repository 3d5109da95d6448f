"""
Registration

Creates accounts of each kind: presence and format checks, uniqueness
pre-check, normalization, hashing, schema validation, then insert. The
pre-check and the insert are not atomic; a racing duplicate is caught by the
table's unique constraint and reported as DuplicateKeyError.
"""

import logging

from sqlalchemy import or_

from portal.errors import DuplicateKeyError, ValidationError
from portal.models import Admin, Professor, Student, ACTIVE
from portal.services.accounts import ADMIN, PROFESSOR, STUDENT, get_repository, normalize_status
from portal.services.credentials import hash_password
from portal.services.validators import (
    clean,
    require_fields,
    validate_contact_number,
    validate_email,
    validate_employee_id,
    validate_professor_id,
    validate_student_email,
    validate_student_id,
)

logger = logging.getLogger(__name__)

STUDENT_FIELDS = (
    'lastName', 'firstName', 'middleName', 'studentID', 'email',
    'password', 'course', 'section', 'yearLevel',
)
PROFESSOR_FIELDS = (
    'lastName', 'firstName', 'middleName', 'professorID', 'email', 'contactNumber',
    'department', 'designation', 'employmentStatus', 'password',
)
ADMIN_FIELDS = (
    'lastName', 'firstName', 'middleName', 'contactNumber', 'email', 'employeeID',
    'department', 'designation', 'employmentStatus', 'password', 'role',
    'accountStatus', 'createdBy',
)


def _cleaned(payload, fields):
    return {field: str(clean(payload.get(field))) for field in fields}


def _name_parts(data):
    return {
        'last_name': data['lastName'].upper(),
        'first_name': data['firstName'].upper(),
        'middle_name': data['middleName'].upper(),
    }


def _insert(kind, record):
    errors = record.validate()
    if errors:
        raise ValidationError('Validation error', details=errors)
    get_repository(kind).add(record)
    logger.info('Registered %s %s', kind, record.business_key)
    return record


def register_student(payload):
    require_fields(payload, STUDENT_FIELDS)
    data = _cleaned(payload, STUDENT_FIELDS)

    validate_student_id(data['studentID'])
    validate_student_email(data['email'])
    email = data['email'].lower()

    repository = get_repository(STUDENT)
    existing = repository.find_by_email(email)
    if existing is not None:
        raise DuplicateKeyError(
            'Email is already used by another student.',
            field='email',
            details={'existingStudentID': existing.student_id},
        )
    existing = repository.find_by_key(data['studentID'])
    if existing is not None:
        raise DuplicateKeyError(
            'Student ID already exists.',
            field='studentID',
            details={'existingEmail': existing.email},
        )

    student = Student(
        student_id=data['studentID'],
        email=email,
        password_hash=hash_password(str(payload['password'])),
        course=data['course'].upper(),
        section=data['section'].upper(),
        year_level=data['yearLevel'],
        account_status=ACTIVE,
        **_name_parts(data),
    )
    return _insert(STUDENT, student)


def register_professor(payload):
    require_fields(payload, PROFESSOR_FIELDS)
    data = _cleaned(payload, PROFESSOR_FIELDS)

    validate_professor_id(data['professorID'])
    validate_email(data['email'])
    validate_contact_number(data['contactNumber'])
    professor_id = data['professorID'].upper()
    email = data['email'].lower()

    exists = Professor.query.filter(
        or_(Professor.email == email, Professor.professor_id == professor_id)
    ).first()
    if exists is not None:
        raise DuplicateKeyError('Email or Professor ID already exists.')

    status = payload.get('accountStatus')
    professor = Professor(
        professor_id=professor_id,
        email=email,
        password_hash=hash_password(str(payload['password'])),
        contact_number=data['contactNumber'],
        department=data['department'].upper(),
        designation=data['designation'],
        employment_status=data['employmentStatus'],
        account_status=normalize_status(status) if status else ACTIVE,
        **_name_parts(data),
    )
    return _insert(PROFESSOR, professor)


def register_admin(payload):
    require_fields(payload, ADMIN_FIELDS)
    data = _cleaned(payload, ADMIN_FIELDS)

    validate_email(data['email'])
    validate_contact_number(data['contactNumber'])
    validate_employee_id(data['employeeID'])
    employee_id = data['employeeID'].upper()
    email = data['email'].lower()

    exists = Admin.query.filter(
        or_(Admin.email == email, Admin.employee_id == employee_id)
    ).first()
    if exists is not None:
        raise DuplicateKeyError('Email or Employee ID already exists.')

    admin = Admin(
        employee_id=employee_id,
        email=email,
        password_hash=hash_password(str(payload['password'])),
        contact_number=data['contactNumber'],
        department=data['department'].upper(),
        designation=data['designation'],
        employment_status=data['employmentStatus'],
        role=data['role'],
        account_status=normalize_status(data['accountStatus']),
        created_by=data['createdBy'],
        **_name_parts(data),
    )
    return _insert(ADMIN, admin)
