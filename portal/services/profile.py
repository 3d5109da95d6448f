"""
Self-Service Account Update

Role-gated profile changes for the logged-in account. Admins may edit their
whole profile; professors only their contact number. Password changes need
the current password first.
"""

import logging

from portal.errors import DuplicateKeyError, NotFoundError, ValidationError
from portal.extensions import db
from portal.services.accounts import ADMIN, PROFESSOR, get_repository
from portal.services.credentials import hash_password, verify_password
from portal.services.identity import identity_for
from portal.services.validators import clean, validate_contact_number, validate_email

logger = logging.getLogger(__name__)


def _upper(value):
    return value.upper()


def _lower(value):
    return value.lower()


def _keep(value):
    return value


# JSON key -> (column, normalizer)
ADMIN_EDITABLE = {
    'lastName': ('last_name', _upper),
    'firstName': ('first_name', _upper),
    'middleName': ('middle_name', _upper),
    'contactNumber': ('contact_number', _keep),
    'email': ('email', _lower),
    'department': ('department', _upper),
    'designation': ('designation', _keep),
    'employmentStatus': ('employment_status', _keep),
    'role': ('role', _keep),
}
PROFESSOR_EDITABLE = {
    'contactNumber': ('contact_number', _keep),
}
EDITABLE_FIELDS = {
    ADMIN: ADMIN_EDITABLE,
    PROFESSOR: PROFESSOR_EDITABLE,
}

FIELD_VALIDATORS = {
    'contactNumber': validate_contact_number,
    'email': validate_email,
}


def update_own_account(session, payload):
    """Apply `payload` to the session's own record and return its new Identity.

    Empty or missing fields leave the stored value untouched. Fields outside
    the caller's role are ignored.
    """
    kind = session.identity.role
    editable = EDITABLE_FIELDS.get(kind)
    if editable is None:
        raise ValidationError('Invalid user type')

    repository = get_repository(kind)
    record = repository.find_by_key(session.identity.id)
    if record is None:
        raise NotFoundError('User not found')

    _change_password(record, payload.get('currentPassword'), payload.get('newPassword'))

    for json_key, (column, normalize) in editable.items():
        value = clean(payload.get(json_key))
        if not value:
            continue
        value = str(value)
        validator = FIELD_VALIDATORS.get(json_key)
        if validator is not None:
            validator(value)
        setattr(record, column, normalize(value))

    if 'email' in editable and record.email:
        with db.session.no_autoflush:
            other = repository.find_by_email(record.email)
        if other is not None and other.id != record.id:
            raise DuplicateKeyError('Email already exists', field='email')

    errors = record.validate()
    if errors:
        raise ValidationError('Validation error', details=errors)

    repository.save(record)
    logger.info('Account %s %s updated own profile', kind, session.identity.id)
    return identity_for(record)


def _change_password(record, current_password, new_password):
    if not current_password:
        if new_password:
            raise ValidationError('Current password is required to set a new password.')
        return
    if not verify_password(str(current_password), record.password_hash):
        raise ValidationError('Current password is incorrect')
    if new_password:
        record.password_hash = hash_password(str(new_password))
