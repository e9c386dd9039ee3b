"""
Personal blog - server-rendered posts from a relational database
"""
from flask import Flask, request
from datetime import datetime
import os
from config import get_config
from extensions import db, limiter
from services import BlogService, ViewCounter
from utils.logger import setup_logger
from cli import register_commands


def set_security_headers(response):
    """Apply security headers to all responses."""
    response.headers['X-Content-Type-Options'] = 'nosniff'
    response.headers['X-Frame-Options'] = 'SAMEORIGIN'
    response.headers['X-XSS-Protection'] = '1; mode=block'

    if request.is_secure:
        response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'

    response.headers['Content-Security-Policy'] = (
        "default-src 'self'; "
        "script-src 'self'; "
        "style-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
        "img-src 'self' data: https:; "
        "font-src 'self' https://cdn.jsdelivr.net; "
        "connect-src 'self'; "
        "frame-ancestors 'self'; "
        "base-uri 'self'; "
        "form-action 'self'"
    )

    response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
    response.headers['Permissions-Policy'] = 'geolocation=(), microphone=(), camera=()'

    return response


def format_date(value):
    """Format a datetime for Jinja templates."""
    return value.strftime("%B %d, %Y")


def create_app(config_class=None):
    """
    Application factory.

    Args:
        config_class: Config class to load; defaults to the one selected by FLASK_ENV

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)
    app.config.from_object(config_class or get_config())

    setup_logger(app)

    db.init_app(app)
    limiter.init_app(app)

    # The database handle is passed explicitly to everything that queries
    view_counter = ViewCounter(app, db, max_workers=app.config['VIEW_COUNT_WORKERS'])
    app.extensions['view_counter'] = view_counter
    app.extensions['blog'] = BlogService(
        db,
        view_counter,
        listing_limit=app.config['BLOG_LISTING_LIMIT']
    )

    from routes import main_bp, blog_bp
    app.register_blueprint(main_bp)
    app.register_blueprint(blog_bp)

    app.after_request(set_security_headers)

    # ========== JINJA TEMPLATE GLOBALS ==========

    app.jinja_env.filters["format_date"] = format_date

    @app.context_processor
    def inject_site():
        return {
            "site_name": app.config['SITE_NAME'],
            "site_description": app.config['SITE_DESCRIPTION'],
            "site_tech_tags": app.config['SITE_TECH_TAGS'],
            "current_year": datetime.now().year,
        }

    register_commands(app)

    return app


if __name__ == "__main__":
    app = create_app()

    debug_mode = app.config.get('DEBUG', False)
    env_name = os.environ.get('FLASK_ENV', 'development')

    app.logger.info(f"Starting blog - environment: {env_name}, debug: {debug_mode}")

    host = os.environ.get('FLASK_HOST', '127.0.0.1')
    port = int(os.environ.get('FLASK_PORT', 5000))

    app.run(host=host, port=port, debug=debug_mode)
