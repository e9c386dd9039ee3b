"""
Main Routes Blueprint

Handles the landing page and the site-wide not-found page.
"""

from flask import Blueprint, render_template, request, current_app

main_bp = Blueprint('main', __name__)

PROFILE = {
    "name": "Alex Chen",
    "tagline": "Full-stack developer | Python & web enthusiast",
}

TECH_STACK = ['Python', 'Flask', 'SQLAlchemy', 'Jinja', 'PostgreSQL', 'MySQL', 'Bootstrap', 'pytest']

ABOUT_BLOG = (
    "A server-rendered blog built with Flask and SQLAlchemy. Posts live in a "
    "relational database and every page is rendered on the server, so the "
    "site stays fast and readable without client-side JavaScript."
)


@main_bp.route("/")
def home():
    """Static landing page with a short self-introduction."""
    return render_template(
        "index.html",
        profile=PROFILE,
        tech_stack=TECH_STACK,
        about_blog=ABOUT_BLOG
    )


@main_bp.app_errorhandler(404)
def page_not_found(e):
    """Custom 404 error page for any unmatched route or hidden post."""
    current_app.logger.warning(f"Not found: {request.path}")
    return render_template("404.html"), 404
