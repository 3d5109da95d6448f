"""
Auth Routes

Session-cookie authentication; Flask-Login resolves `current_user` to the
AccountSession for each request.
"""

from flask import jsonify, request
from flask_login import login_required, current_user
from portal.auth import auth_bp
from portal.extensions import session_manager
from portal.services import authenticate, update_own_account
from portal.utils import json_payload


def start_session(identity, body):
    """Open a session for `identity` and attach its cookie to the response."""
    session = session_manager.create(identity)
    response = jsonify(body)
    return session_manager.set_cookie(response, session)


@auth_bp.route('/login', methods=['POST'])
def login():
    """Unified login; the ID prefix selects the account kind"""
    payload = json_payload()
    identity = authenticate(payload.get('id'), payload.get('password'))

    # Replace any session this client already had
    session_manager.destroy(session_manager.token_from_request(request))

    summary = identity.to_dict()
    summary.pop('userType')
    return start_session(identity, {
        'msg': 'Login successful',
        'userType': identity.role,
        'user': summary,
    })


@auth_bp.route('/update-account', methods=['POST'])
@login_required
def update_account():
    """Update the logged-in account within its role's limits"""
    session = current_user._get_current_object()
    identity = update_own_account(session, json_payload())
    session_manager.update_identity(session.token, full_name=identity.full_name, email=identity.email)
    return jsonify({'msg': 'Account updated successfully'})


@auth_bp.route('/logout', methods=['POST'])
def logout():
    session_manager.destroy(session_manager.token_from_request(request))
    response = jsonify({'msg': 'Logout successful'})
    return session_manager.clear_cookie(response)


@auth_bp.route('/current-user', methods=['GET'])
@login_required
def get_current_user():
    return jsonify({'user': current_user.identity.to_dict()})
