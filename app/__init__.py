# app/__init__.py - Application Factory Pattern
"""
Flask application factory for the records API.
Used for easier testing and for running the CLI against different configs.
"""

import logging
import os
import sys

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException


LOG_HANDLER_NAME = 'records'


def _add_handler(app, handler):
    handler.set_name(LOG_HANDLER_NAME)
    app.logger.addHandler(handler)


def configure_logging(app):
    """Log to stdout (good for Docker); enable file logging with LOG_TO_FILE=1."""
    # app.logger is shared by every app built in this process; replace, never stack
    for handler in [h for h in app.logger.handlers if h.get_name() == LOG_HANDLER_NAME]:
        app.logger.removeHandler(handler)
        handler.close()

    if app.config.get('LOG_TO_FILE'):
        from logging.handlers import RotatingFileHandler
        try:
            os.makedirs('logs', exist_ok=True)
            file_handler = RotatingFileHandler('logs/app.log', maxBytes=10240, backupCount=3)
            file_handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'))
            _add_handler(app, file_handler)
        except OSError:
            # fallback to stderr if file logging cannot be configured
            _add_handler(app, logging.StreamHandler(sys.stderr))
            app.logger.warning('Could not configure file logging; logs will be sent to stderr')
    else:
        _add_handler(app, logging.StreamHandler(sys.stdout))
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))


def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({'success': False, 'error': e.description}), e.code

    @app.errorhandler(500)
    def handle_server_error(e):
        return jsonify({'success': False, 'error': 'Internal server error'}), 500


def create_app(config_class=None):
    """
    Application Factory Pattern

    Args:
        config_class: Configuration class (default: Config from config.py)

    Returns:
        Flask application instance
    """
    app = Flask(__name__)

    # Load configuration
    if config_class is None:
        from config import Config
        config_class = Config
    app.config.from_object(config_class)

    configure_logging(app)
    app.logger.info('Application startup')

    # Ensure data directory exists when using a local sqlite file
    db_uri = app.config.get('SQLALCHEMY_DATABASE_URI', '')
    if db_uri.startswith('sqlite:///') and ':memory:' not in db_uri:
        db_dir = os.path.dirname(db_uri.replace('sqlite:///', ''))
        if db_dir and not os.path.exists(db_dir):
            try:
                os.makedirs(db_dir, exist_ok=True)
            except OSError:
                app.logger.warning(f'Could not create directory for sqlite DB: {db_dir}')

    # Initialize extensions
    from app.extensions import init_extensions
    init_extensions(app)

    register_error_handlers(app)

    # Register blueprints
    from app.blueprints.records import records_bp
    app.register_blueprint(records_bp)

    # CLI commands for database management and exports
    from app.cli import register_commands
    register_commands(app)

    return app
