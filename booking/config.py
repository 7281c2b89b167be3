"""
Configuration settings for the reservation booking site
"""
import json
import os

from sqlalchemy.engine import URL


MYSQL_PORT = 3306


class ConfigError(Exception):
    """Raised when the configuration file cannot be turned into settings."""


class Config:
    """Flask application configuration"""

    # Signs the session cookie; replaced by `cookieSecret` from config.json
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Plaintext admin password, compared as-is on login
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD') or 'admin123'

    # Database configuration. Relative SQLite paths land in the instance folder.
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///booking.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {'pool_pre_ping': True}
    DB_HOST = None
    DB_CERT_PATH = None

    # Session cookie
    SESSION_COOKIE_PATH = '/'
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    SESSION_COOKIE_SECURE = False

    # Server
    CONFIG_PATH = os.environ.get('CONFIG_PATH') or 'config.json'
    SERVER_PORT = 8080
    SERVER_HTTPS = False
    SERVER_CERT_FILE = 'certs/cert.pem'
    SERVER_KEY_FILE = 'certs/privkey.pem'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SECRET_KEY = 'test-secret'
    ADMIN_PASSWORD = 'geheim'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'


def load_settings(path):
    """Read config.json and map it onto Flask config keys.

    Expected layout::

        {"adminWachtwoord": ..., "cookieSecret": ...,
         "mysql": {"gebruiker", "wachtwoord", "host", "database", "certificaatPad"},
         "server": {"poort", "https"}}

    Raises:
        ConfigError: the file is missing, not JSON, or lacks a required key.
    """
    try:
        with open(path, encoding='utf-8') as fh:
            raw = json.load(fh)
    except OSError as e:
        raise ConfigError(f'Cannot open config file {path}: {e}') from e
    except json.JSONDecodeError as e:
        raise ConfigError(f'Cannot read config file {path}: {e}') from e

    try:
        mysql = raw['mysql']
        server = raw['server']
        uri = URL.create(
            'mysql+mysqlconnector',
            username=mysql['gebruiker'],
            password=mysql['wachtwoord'],
            host=mysql['host'],
            port=MYSQL_PORT,
            database=mysql['database'],
        )
        settings = {
            'ADMIN_PASSWORD': raw['adminWachtwoord'],
            'SECRET_KEY': raw['cookieSecret'],
            'SQLALCHEMY_DATABASE_URI': uri.render_as_string(hide_password=False),
            'DB_HOST': mysql['host'],
            'DB_CERT_PATH': mysql['certificaatPad'],
            'SERVER_HTTPS': bool(server.get('https', False)),
        }
        port = server['poort']
    except KeyError as e:
        raise ConfigError(f'Missing key {e} in config file {path}') from e
    except (TypeError, AttributeError) as e:
        raise ConfigError(f'Malformed config file {path}: {e}') from e

    if not settings['DB_CERT_PATH']:
        raise ConfigError(f'Empty database certificate path (mysql.certificaatPad) in config file {path}')

    try:
        settings['SERVER_PORT'] = int(port)
    except (TypeError, ValueError) as e:
        raise ConfigError(f'Invalid server port {port!r} in config file {path}') from e

    settings['SESSION_COOKIE_SECURE'] = settings['SERVER_HTTPS']
    return settings
