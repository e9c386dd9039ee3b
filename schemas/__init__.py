"""
Schemas Package

Pydantic read projections handed from the service layer to templates.
"""

from .blog import AuthorSchema, PostCardSchema, PostDetailSchema

__all__ = ['AuthorSchema', 'PostCardSchema', 'PostDetailSchema']
