"""
Reservation Booking Site - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import ssl

from flask import Flask
from sqlalchemy import text

from booking.extensions import db
from booking.config import Config, ConfigError

logger = logging.getLogger(__name__)


def create_app(config_class=Config, settings=None):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)
        settings: Optional dict applied on top of config_class, usually
            the result of `load_settings`.

    Returns:
        Configured Flask application instance

    Raises:
        ConfigError: the database CA certificate is missing or invalid.
        sqlalchemy.exc.SQLAlchemyError: the database cannot be reached.
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    if settings:
        app.config.update(settings)

    cert_path = app.config.get('DB_CERT_PATH')
    if cert_path:
        _check_certificate(cert_path)
        engine_options = dict(app.config.get('SQLALCHEMY_ENGINE_OPTIONS') or {})
        engine_options['connect_args'] = {
            'ssl_ca': cert_path,
            'ssl_verify_cert': True,
            'ssl_verify_identity': True,
        }
        app.config['SQLALCHEMY_ENGINE_OPTIONS'] = engine_options

    # Initialize extensions
    db.init_app(app)

    # Register blueprints
    from booking.public import public_bp
    from booking.admin import admin_bp

    app.register_blueprint(public_bp)
    app.register_blueprint(admin_bp, url_prefix='/admin')

    # Layout shows the admin links only while the admin flag is set
    @app.context_processor
    def inject_is_admin_flag():
        """Expose the admin session flag to every template."""
        from flask import session
        return dict(is_admin=session.get('is_admin') is True)

    # Create database tables and make sure the database answers
    with app.app_context():
        import booking.models  # noqa: F401
        db.create_all()
        db.session.execute(text('SELECT 1'))
        logger.info('Database connected (%s)', db.engine.url.render_as_string(hide_password=True))

    return app


def _check_certificate(path):
    """Fail early when the database CA certificate cannot be used."""
    try:
        ssl.create_default_context(cafile=path)
    except (OSError, ssl.SSLError) as e:
        raise ConfigError(f'Cannot load database certificate {path}: {e}') from e
