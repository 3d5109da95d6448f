"""
Error Handling

Exception hierarchy for account operations and the Flask handlers that
render them as JSON responses.
"""

import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class PortalError(Exception):
    """Base class for errors reported back to the caller."""
    status_code = 500

    def __init__(self, message, details=None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self):
        body = {'msg': self.message}
        if self.details is not None:
            body['details'] = self.details
        return body


class ValidationError(PortalError):
    """Missing or malformed field."""
    status_code = 400


class DuplicateKeyError(PortalError):
    """Unique constraint violation on `field`."""
    status_code = 400

    def __init__(self, message, field=None, details=None):
        super().__init__(message, details)
        self.field = field


class AuthError(PortalError):
    """Bad credentials or malformed login identifier."""
    status_code = 400


class NotAuthenticatedError(AuthError):
    status_code = 401

    def __init__(self, message='Not authenticated', details=None):
        super().__init__(message, details)


class AccountDisabledError(AuthError):
    status_code = 403


class PermissionDeniedError(PortalError):
    status_code = 403


class NotFoundError(PortalError):
    status_code = 404


class InternalError(PortalError):
    status_code = 500


def register_error_handlers(app):
    """Render every error raised by a view as a JSON body."""
    from portal.extensions import db

    @app.errorhandler(PortalError)
    def handle_portal_error(error):
        db.session.rollback()
        if error.status_code >= 500:
            logger.error('Request failed: %s', error.message)
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return jsonify({'msg': error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        logger.exception('Unhandled error: %s', error)
        db.session.rollback()
        return jsonify(InternalError('Internal server error').to_dict()), 500
