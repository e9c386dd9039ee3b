"""
Developer CLI commands.

Usage:
    flask --app app init-db
    flask --app app seed-db

Production schemas are managed outside this application; these commands
exist to get a local database running.
"""

from datetime import datetime, timedelta, timezone

import click
from flask import current_app
from flask.cli import with_appcontext
from sqlalchemy import func, select

from extensions import db
from models import Author, Post

DEMO_AUTHOR = {"name": "Alex Chen", "image": None}

DEMO_POSTS = [
    {
        "title": "Hello, World",
        "slug": "hello-world",
        "summary": "Why I started this blog and what to expect here.",
        "content": "<p>Welcome to the blog. I will be writing about Python, Flask and the web.</p>",
        "published": True,
    },
    {
        "title": "Server-rendered pages with Flask",
        "slug": "server-rendered-flask",
        "summary": "Rendering database records with Jinja templates.",
        "content": (
            "<p>Flask and Jinja make it easy to render pages on the server.</p>"
            "<p>Every page on this site is rendered from rows in the database.</p>"
        ),
        "published": True,
    },
    {
        "title": "Work in progress",
        "slug": "draft-1",
        "summary": None,
        "content": "<p>Not ready yet.</p>",
        "published": False,
    },
]


@click.command('init-db')
@with_appcontext
def init_db_command():
    """Create the Post and Author tables if they do not exist."""
    db.create_all()
    current_app.logger.info("Database tables created")
    click.echo('Initialized the database.')


@click.command('seed-db')
@with_appcontext
def seed_db_command():
    """Insert a demo author and sample posts into an empty database."""
    db.create_all()

    existing = db.session.execute(select(func.count(Post.id))).scalar_one()
    if existing:
        click.echo(f'Database already has {existing} posts, skipping seed.')
        return

    author = Author(**DEMO_AUTHOR)
    db.session.add(author)

    # Oldest first so the first demo post ends up at the bottom of the listing
    now = datetime.now(timezone.utc).replace(tzinfo=None)
    for offset, data in enumerate(DEMO_POSTS):
        db.session.add(Post(author=author, created_at=now - timedelta(days=len(DEMO_POSTS) - offset), **data))

    db.session.commit()
    current_app.logger.info(f"Seeded {len(DEMO_POSTS)} demo posts")
    click.echo(f'Seeded {len(DEMO_POSTS)} posts.')


def register_commands(app):
    app.cli.add_command(init_db_command)
    app.cli.add_command(seed_db_command)
