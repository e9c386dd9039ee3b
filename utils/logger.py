"""
Logging Setup

Centralized logging configuration for the Flask application with
request tracking.
"""

import logging
import sys
from flask import request, has_request_context


def setup_logger(app):
    """
    Configure logging for the Flask application.

    Sets up:
    - Timestamped log format on stdout
    - Request/response logging for incoming HTTP requests
    - DEBUG level in debug mode, INFO otherwise
    - SQL query logging when SQLALCHEMY_ECHO is on, errors only otherwise

    Args:
        app: Flask application instance
    """
    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        '[%(asctime)s] %(levelname)s in %(module)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)
    handler.set_name('blog-stdout')

    # Repeated create_app() calls share the same named logger
    for existing in list(app.logger.handlers):
        if existing.get_name() == 'blog-stdout':
            app.logger.removeHandler(existing)
    app.logger.addHandler(handler)

    if app.debug:
        app.logger.setLevel(logging.DEBUG)
    else:
        app.logger.setLevel(logging.INFO)

    # Prevent duplicate logs from propagating
    app.logger.propagate = False

    sql_logger = logging.getLogger('sqlalchemy.engine')
    if not app.config.get('SQLALCHEMY_ECHO'):
        sql_logger.setLevel(logging.ERROR)

    @app.before_request
    def log_request_info():
        if has_request_context():
            app.logger.info(
                f"Request: {request.method} {request.path} "
                f"from {request.remote_addr}"
            )

    @app.after_request
    def log_response_info(response):
        if has_request_context():
            app.logger.info(
                f"Response: {response.status_code} for "
                f"{request.method} {request.path}"
            )
        return response

    app.logger.info(f"Logging configured - Level: {logging.getLevelName(app.logger.level)}")

    return app
