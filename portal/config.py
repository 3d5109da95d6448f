"""
Configuration settings for the Institutional Portal accounts backend
"""
import os


class Config:
    """Flask application configuration"""

    # Flask secret key for sessions
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Database configuration (relative sqlite paths live in the instance folder)
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///portal.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Password hashing (werkzeug method string, includes the work factor)
    PASSWORD_HASH_METHOD = os.environ.get('PASSWORD_HASH_METHOD') or 'pbkdf2:sha256:600000'
    PASSWORD_SALT_LENGTH = int(os.environ.get('PASSWORD_SALT_LENGTH') or 16)

    # Account sessions (server-side, cookie carries only an opaque token)
    ACCOUNT_SESSION_COOKIE = os.environ.get('ACCOUNT_SESSION_COOKIE') or 'portal_session'
    ACCOUNT_SESSION_TTL_SECONDS = int(os.environ.get('ACCOUNT_SESSION_TTL_SECONDS') or 8 * 3600)
    ACCOUNT_SESSION_COOKIE_SECURE = os.environ.get('ACCOUNT_SESSION_COOKIE_SECURE', 'false').lower() == 'true'

    # Reject logins for accounts whose status is not Active
    ENFORCE_ACCOUNT_STATUS = os.environ.get('ENFORCE_ACCOUNT_STATUS', 'true').lower() == 'true'

    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256:1000'
