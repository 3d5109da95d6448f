"""
Admin Routes

Admin registration plus cross-kind account administration. Status and
delete routes accept either the internal record id or the account's
business key (employeeID, professorID, studentID). Moving an account off
Active, or deleting it, closes its open sessions.
"""

from flask import jsonify
from portal.admin import admin_bp
from portal.admin.decorators import admin_required
from portal.services import (
    get_repository,
    list_accounts,
    register_admin,
    update_account_status,
    delete_account,
)
from portal.extensions import session_manager
from portal.models import ACTIVE
from portal.services.accounts import ADMIN
from portal.utils import json_payload


@admin_bp.route('/register', methods=['POST'])
def register():
    """Register a new admin account"""
    admin = register_admin(json_payload())
    return jsonify({'msg': 'Admin registered successfully.', 'admin': admin.summary()}), 201


@admin_bp.route('/', methods=['GET'])
@admin_required
def list_admins():
    """All admin accounts, password omitted"""
    admins = get_repository(ADMIN).find_all()
    return jsonify([admin.to_dict() for admin in admins])


@admin_bp.route('/users', methods=['GET'])
@admin_required
def list_users():
    return jsonify({'users': list_accounts()})


@admin_bp.route('/accounts', methods=['GET'])
@admin_required
def list_all_accounts():
    return jsonify({'accounts': list_accounts()})


@admin_bp.route('/users/<ref>/status', methods=['PUT'], defaults={'body_key': 'user'})
@admin_bp.route('/accounts/<ref>/status', methods=['PUT', 'PATCH'], defaults={'body_key': 'account'})
@admin_required
def update_status(ref, body_key):
    """Set accountStatus on whichever account kind matches `ref`"""
    payload = json_payload()
    account = update_account_status(ref, payload.get('accountStatus'))
    if account.account_status != ACTIVE:
        session_manager.destroy_for(account.KIND, account.business_key)
    return jsonify({'msg': 'Account status updated successfully', body_key: account.to_dict()})


@admin_bp.route('/users/<ref>', methods=['DELETE'])
@admin_bp.route('/accounts/<ref>', methods=['DELETE'])
@admin_required
def delete(ref):
    kind, key = delete_account(ref)
    session_manager.destroy_for(kind, key)
    return jsonify({'msg': 'Account deleted successfully'})
