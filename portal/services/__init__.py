"""
Services Package

Exports all services for easy importing.
"""

from portal.services.accounts import (
    REPOSITORIES,
    get_repository,
    list_accounts,
    update_account_status,
    delete_account,
)
from portal.services.credentials import hash_password, verify_password
from portal.services.identity import LOGIN_ROUTES, authenticate, authenticate_as, resolve_login_kind
from portal.services.registration import register_student, register_professor, register_admin
from portal.services.profile import update_own_account

__all__ = [
    'REPOSITORIES',
    'get_repository',
    'list_accounts',
    'update_account_status',
    'delete_account',
    'hash_password',
    'verify_password',
    'LOGIN_ROUTES',
    'authenticate',
    'authenticate_as',
    'resolve_login_kind',
    'register_student',
    'register_professor',
    'register_admin',
    'update_own_account',
]
