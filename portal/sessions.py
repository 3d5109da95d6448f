"""
Account Sessions

Server-side session store for authenticated accounts. The client cookie
carries only an opaque token; the identity lives in process memory and is
read on every request without re-checking credentials.
"""

from dataclasses import dataclass, replace
import logging
import secrets
import time

from flask import current_app
from flask_login import UserMixin

logger = logging.getLogger(__name__)


def _now():
    return int(time.time())


@dataclass(frozen=True)
class Identity:
    """Normalized identity of an authenticated account."""
    id: str
    role: str
    full_name: str
    email: str

    def to_dict(self):
        return {
            'id': self.id,
            'userType': self.role,
            'fullName': self.full_name,
            'email': self.email,
        }


class AccountSession(UserMixin):
    """Session record exposed to Flask-Login as the current user."""

    def __init__(self, token, identity, expires_at):
        self.token = token
        self.identity = identity
        self.expires_at = expires_at

    def get_id(self):
        return self.token

    @property
    def role(self):
        return self.identity.role

    @property
    def is_expired(self):
        return self.expires_at < _now()

    def __repr__(self):
        return f'<AccountSession {self.identity.role}:{self.identity.id}>'


class SessionManager:
    """Flask extension holding account sessions per application."""

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        app.config.setdefault('ACCOUNT_SESSION_COOKIE', 'portal_session')
        app.config.setdefault('ACCOUNT_SESSION_TTL_SECONDS', 8 * 3600)
        app.config.setdefault('ACCOUNT_SESSION_COOKIE_SECURE', False)
        app.extensions['account_sessions'] = {}

    @property
    def _sessions(self):
        return current_app.extensions['account_sessions']

    def create(self, identity):
        self.sweep()
        token = secrets.token_urlsafe(32)
        ttl = current_app.config['ACCOUNT_SESSION_TTL_SECONDS']
        session = AccountSession(token, identity, _now() + ttl)
        self._sessions[token] = session
        logger.info('Session opened for %s %s', identity.role, identity.id)
        return session

    def sweep(self):
        """Drop every expired session; returns how many were removed."""
        expired = [token for token, session in self._sessions.items() if session.is_expired]
        for token in expired:
            del self._sessions[token]
        if expired:
            logger.debug('Swept %d expired sessions', len(expired))
        return len(expired)

    def get(self, token):
        if not token:
            return None
        session = self._sessions.get(token)
        if session is None:
            return None
        if session.is_expired:
            self._sessions.pop(token, None)
            return None
        return session

    def update_identity(self, token, **changes):
        session = self.get(token)
        if session is None:
            return None
        session.identity = replace(session.identity, **changes)
        return session

    def destroy(self, token):
        session = self._sessions.pop(token, None) if token else None
        if session is not None:
            logger.info('Session closed for %s %s', session.role, session.identity.id)
        return session

    def destroy_for(self, role, account_id):
        """Close every session belonging to one account."""
        tokens = [
            token for token, session in self._sessions.items()
            if session.identity.role == role and session.identity.id == account_id
        ]
        for token in tokens:
            del self._sessions[token]
        if tokens:
            logger.info('Closed %d sessions for %s %s', len(tokens), role, account_id)
        return len(tokens)

    def token_from_request(self, request):
        return request.cookies.get(current_app.config['ACCOUNT_SESSION_COOKIE'])

    def set_cookie(self, response, session):
        response.set_cookie(
            current_app.config['ACCOUNT_SESSION_COOKIE'],
            session.token,
            max_age=current_app.config['ACCOUNT_SESSION_TTL_SECONDS'],
            httponly=True,
            samesite='Lax',
            secure=current_app.config['ACCOUNT_SESSION_COOKIE_SECURE'],
        )
        return response

    def clear_cookie(self, response):
        response.delete_cookie(current_app.config['ACCOUNT_SESSION_COOKIE'])
        return response
