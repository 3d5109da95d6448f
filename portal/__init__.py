"""
Institutional Portal Accounts - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging

from flask import Flask, jsonify
from portal.extensions import db, login_manager, session_manager
from portal.config import Config


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    # Initialize extensions
    db.init_app(app)
    session_manager.init_app(app)
    login_manager.init_app(app)
    login_manager.session_protection = None

    # Register blueprints
    from portal.auth import auth_bp
    from portal.admin import admin_bp
    from portal.students import students_bp
    from portal.professors import professors_bp

    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(admin_bp, url_prefix='/api/admins')
    app.register_blueprint(students_bp, url_prefix='/api/students')
    app.register_blueprint(professors_bp, url_prefix='/api/professors')

    from portal.errors import NotAuthenticatedError, register_error_handlers
    register_error_handlers(app)

    # Session lookup for Flask-Login, from the account session cookie
    @login_manager.request_loader
    def load_account_session(request):
        return session_manager.get(session_manager.token_from_request(request))

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify(NotAuthenticatedError().to_dict()), 401

    # Create database tables
    with app.app_context():
        import portal.models  # noqa: F401
        db.create_all()

    return app
