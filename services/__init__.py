"""
Services Package - Business Logic Layer

Service classes that encapsulate database access and background work,
keeping route handlers thin and focused on HTTP concerns.
"""

from .blog_service import BlogService
from .view_counter import ViewCounter

__all__ = ['BlogService', 'ViewCounter']
