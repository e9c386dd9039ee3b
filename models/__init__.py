"""
Models package for the blog.

Provides the ORM models for posts and their authors.
"""
from .post import Post, Author

__all__ = [
    'Post',
    'Author'
]
