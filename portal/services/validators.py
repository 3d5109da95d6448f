"""
Field Validators

Format checks applied to registration and profile payloads before any
store access.
"""

import re

from portal.errors import ValidationError

STUDENT_ID_PATTERN = re.compile(r'^\d{2}-\d{4}-\d{6}$', re.ASCII)
STUDENT_EMAIL_PATTERN = re.compile(r'^[a-z]+\.[a-z]+\.au@phinmaed\.com$')
EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
CONTACT_NUMBER_PATTERN = re.compile(r'^\+?[\d\s\-()]{10,}$', re.ASCII)
PROFESSOR_ID_PATTERN = re.compile(r'^P-[A-Z0-9]+(-[A-Z0-9]+)*$')
EMPLOYEE_ID_PATTERN = re.compile(r'^A-[A-Z0-9]+(-[A-Z0-9]+)*$')


def clean(value):
    """Strip strings; anything else is passed through."""
    return value.strip() if isinstance(value, str) else value


def require_fields(payload, fields):
    """Raise when any of `fields` is missing or blank in the payload."""
    missing = [field for field in fields if not clean(payload.get(field))]
    if missing:
        raise ValidationError('All fields are required.', details=[f'{field} is required.' for field in missing])


def validate_student_id(student_id):
    if not STUDENT_ID_PATTERN.match(student_id):
        raise ValidationError(
            'Student ID format is invalid. Use nn-nnnn-nnnnnn (e.g., 12-3456-789012).'
        )


def validate_student_email(email):
    if not STUDENT_EMAIL_PATTERN.match(email.lower()):
        raise ValidationError(
            'Email format is invalid. Use name.au@phinmaed.com (e.g., jama.presentacion.au@phinmaed.com).'
        )


def validate_email(email):
    if not EMAIL_PATTERN.match(email):
        raise ValidationError('Please enter a valid email address.')


def validate_contact_number(contact_number):
    if not CONTACT_NUMBER_PATTERN.match(contact_number):
        raise ValidationError('Please enter a valid contact number.')


def validate_professor_id(professor_id):
    if not PROFESSOR_ID_PATTERN.match(professor_id.upper()):
        raise ValidationError('Professor ID format is invalid. Use P-nnnn (e.g., P-1024).')


def validate_employee_id(employee_id):
    if not EMPLOYEE_ID_PATTERN.match(employee_id.upper()):
        raise ValidationError('Employee ID format is invalid. Use A-nnnn (e.g., A-0001).')
