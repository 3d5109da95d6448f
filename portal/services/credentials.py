"""
Credential Service

One-way salted password hashing shared by every account kind.
"""

from flask import current_app
from werkzeug.security import generate_password_hash, check_password_hash


def hash_password(plaintext):
    """Hash a password with the configured method and salt length."""
    return generate_password_hash(
        plaintext,
        method=current_app.config['PASSWORD_HASH_METHOD'],
        salt_length=current_app.config['PASSWORD_SALT_LENGTH'],
    )


def verify_password(plaintext, digest):
    if not digest or plaintext is None:
        return False
    return check_password_hash(digest, plaintext)
