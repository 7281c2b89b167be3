"""
Process entry point: logging, config, and the HTTP server.
"""

import logging
import os
import sys

from sqlalchemy.exc import SQLAlchemyError

from booking import create_app
from booking.config import Config, ConfigError, load_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(log_file=None):
    """Log to app.log (appending) and to stderr."""
    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(log_file or os.environ.get('LOG_FILE') or 'app.log'),
            logging.StreamHandler(),
        ]
    )


def main():
    configure_logging()
    logger.info('=== Application starting ===')

    try:
        settings = load_settings(Config.CONFIG_PATH)
        app = create_app(settings=settings)
    except (ConfigError, SQLAlchemyError) as e:
        logger.critical('Startup failed: %s', e)
        sys.exit(1)

    port = app.config['SERVER_PORT']
    https = app.config['SERVER_HTTPS']
    ssl_context = None
    if https:
        ssl_context = (app.config['SERVER_CERT_FILE'], app.config['SERVER_KEY_FILE'])

    logger.info('Server starting on port %s (HTTPS: %s)', port, https)
    app.run(host='0.0.0.0', port=port, ssl_context=ssl_context, threaded=True)
