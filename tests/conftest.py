"""
Pytest Configuration and Fixtures

Provides shared fixtures for testing the Flask application using the
application factory pattern with clean, isolated test instances.
"""

import itertools
import os
from datetime import datetime, timedelta

import pytest

# Config classes read the environment at import time
os.environ['FLASK_ENV'] = 'testing'
os.environ.setdefault('SECRET_KEY', 'test-secret-key-for-pytest')


@pytest.fixture
def test_config(tmp_path):
    """
    Testing configuration backed by a throwaway SQLite file.

    A file database gives the view counter's worker thread its own
    connection instead of sharing the request's in-memory one.
    """
    from config import TestingConfig

    class FileDatabaseConfig(TestingConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'blog-test.db'}"

    return FileDatabaseConfig


@pytest.fixture
def app(test_config):
    """
    Create and configure a Flask application instance for testing.

    Uses the application factory pattern to create a clean instance
    with a fresh schema for each test function.
    """
    from app import create_app
    from extensions import db

    app = create_app(test_config)

    ctx = app.app_context()
    ctx.push()
    db.create_all()

    yield app

    view_counter = app.extensions['view_counter']
    view_counter.drain(timeout=5)
    view_counter.shutdown()
    db.session.remove()
    db.drop_all()
    ctx.pop()


@pytest.fixture
def client(app):
    """Flask test client for making HTTP requests."""
    return app.test_client()


@pytest.fixture
def runner(app):
    """Flask CLI test runner."""
    return app.test_cli_runner()


@pytest.fixture
def blog_service(app):
    """The BlogService wired up by the application factory."""
    return app.extensions['blog']


@pytest.fixture
def view_counter(app):
    """The ViewCounter wired up by the application factory."""
    return app.extensions['view_counter']


@pytest.fixture
def author(app):
    """A persisted author."""
    from extensions import db
    from models import Author

    author = Author(name='Test Author', image='https://example.com/avatar.png')
    db.session.add(author)
    db.session.commit()
    return author


@pytest.fixture
def make_post(app, author):
    """
    Factory for persisted posts.

    Each call creates a published post one day newer than the previous
    one unless overridden.
    """
    from extensions import db
    from models import Post

    counter = itertools.count(1)

    def _make_post(**overrides):
        n = next(counter)
        data = {
            'title': f'Post {n}',
            'slug': f'post-{n}',
            'summary': f'Summary of post {n}.',
            'content': f'<p>Body of post {n}.</p>',
            'published': True,
            'created_at': datetime(2024, 1, 1) + timedelta(days=n),
            'view_count': 0,
            'author_id': author.id,
        }
        data.update(overrides)
        post = Post(**data)
        db.session.add(post)
        db.session.commit()
        return post

    return _make_post


@pytest.fixture
def stored_view_count(app):
    """Read a post's view count straight from the database."""
    from sqlalchemy import select
    from extensions import db
    from models import Post

    def _stored_view_count(post_id):
        return db.session.execute(
            select(Post.view_count).where(Post.id == post_id)
        ).scalar_one()

    return _stored_view_count
