"""
Flask Extensions

Account sessions are kept server-side; Flask-Login only resolves the
session cookie into the authenticated account for each request.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from portal.sessions import SessionManager

# Database instance
db = SQLAlchemy()

# Login manager, resolves `current_user` from the account session cookie
login_manager = LoginManager()

# Server-side account session store
session_manager = SessionManager()
