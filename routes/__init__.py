"""
Routes Package - Blueprint Registration

Organizes the site's Flask routes into blueprints.
"""

from .main import main_bp
from .blog import blog_bp

__all__ = ['main_bp', 'blog_bp']
