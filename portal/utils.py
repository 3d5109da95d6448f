"""
Request helpers shared by the blueprints.
"""

from flask import request

from portal.errors import ValidationError


def json_payload():
    """Return the request JSON body as a dict."""
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError('Request body must be a JSON object.')
    return payload
