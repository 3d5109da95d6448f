"""
Identity Resolver

Maps a login identifier to its account kind by prefix, loads the record and
checks the password. Unknown identifiers and wrong passwords fail the same
way so a caller cannot tell which accounts exist.
"""

import logging

from flask import current_app

from portal.errors import AccountDisabledError, AuthError, ValidationError
from portal.models import ACTIVE
from portal.services.accounts import ADMIN, PROFESSOR, STUDENT, get_repository
from portal.services.credentials import hash_password, verify_password
from portal.sessions import Identity

logger = logging.getLogger(__name__)

# Checked in order; first matching prefix wins
LOGIN_ROUTES = (
    ('01-', STUDENT),
    ('P-', PROFESSOR),
    ('A-', ADMIN),
)

INVALID_CREDENTIALS = 'Invalid credentials.'


def resolve_login_kind(identifier):
    """Return the account kind an identifier belongs to."""
    for prefix, kind in LOGIN_ROUTES:
        if identifier.startswith(prefix):
            return kind
    raise AuthError('Invalid ID format.')


def identity_for(record):
    return Identity(
        id=record.business_key,
        role=record.KIND,
        full_name=record.full_name,
        email=record.email,
    )


def authenticate(identifier, password):
    """Authenticate a unified-login identifier (01-, P-, A- prefixes)."""
    if not identifier or not password:
        raise ValidationError('ID and password are required.')
    identifier = str(identifier).strip()
    kind = resolve_login_kind(identifier)
    return authenticate_as(kind, identifier, str(password))


def authenticate_as(kind, key, password, message=INVALID_CREDENTIALS):
    record = get_repository(kind).find_by_key(key)
    if record is None:
        # Spend the same hashing time as a real check
        verify_password(password, _get_dummy_hash())
        logger.info('Login failed for unknown %s %s', kind, key)
        raise AuthError(message)

    if not verify_password(password, record.password_hash):
        logger.info('Login failed for %s %s: wrong password', kind, key)
        raise AuthError(message)

    if current_app.config.get('ENFORCE_ACCOUNT_STATUS') and record.account_status != ACTIVE:
        logger.info('Login refused for %s %s: account %s', kind, key, record.account_status)
        raise AccountDisabledError(f'Account is {record.account_status.lower()}.')

    logger.info('Login succeeded for %s %s', kind, key)
    return identity_for(record)


def _get_dummy_hash():
    """Per-app hash of a throwaway password, made with that app's hash method."""
    dummy = current_app.extensions.get('login_dummy_hash')
    if dummy is None:
        dummy = current_app.extensions['login_dummy_hash'] = hash_password('not-a-real-password')
    return dummy
