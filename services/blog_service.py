"""
Blog Service - Handles all blog-related business logic

This service wraps the shared database handle for the two blog reads
(published listing, single post by slug) and hands the view-count side
effect to the background ViewCounter.
"""

import re
from typing import List, Optional

from bs4 import BeautifulSoup
from flask import current_app
from sqlalchemy import select
from sqlalchemy.orm import joinedload, load_only

from models import Post
from schemas.blog import PostCardSchema, PostDetailSchema

SLUG_PATTERN = re.compile(r'^[\w\-.~]+$')


class BlogService:
    """Service for reading published posts."""

    def __init__(self, db, view_counter, listing_limit: int = 10, words_per_minute: int = 200):
        """
        Initialize the blog service.

        Args:
            db: Flask-SQLAlchemy handle shared by every request
            view_counter: ViewCounter used for best-effort view increments
            listing_limit: Maximum number of posts on the listing page
            words_per_minute: Reading speed for reading time estimates
        """
        self.db = db
        self.view_counter = view_counter
        self.listing_limit = listing_limit
        self.words_per_minute = words_per_minute

    def get_published_posts(self) -> List[PostCardSchema]:
        """
        Fetch the newest published posts for the listing page.

        Returns:
            Up to listing_limit cards, newest first
        """
        stmt = (
            select(Post)
            .options(load_only(
                Post.id, Post.title, Post.slug, Post.summary, Post.created_at, Post.view_count
            ))
            .where(Post.published.is_(True))
            .order_by(Post.created_at.desc())
            .limit(self.listing_limit)
        )
        posts = self.db.session.execute(stmt).scalars().all()
        return [PostCardSchema.model_validate(post) for post in posts]

    def get_published_post(self, slug: str) -> Optional[PostDetailSchema]:
        """
        Fetch a single post by slug, with its author.

        Args:
            slug: URL slug from the request path

        Returns:
            The post, or None if it does not exist or is not published
        """
        if not slug or not SLUG_PATTERN.match(slug):
            return None

        stmt = (
            select(Post)
            .options(joinedload(Post.author))
            .where(Post.slug == slug)
        )
        post = self.db.session.execute(stmt).scalar_one_or_none()

        # Drafts are indistinguishable from missing posts
        if post is None or not post.published:
            return None

        detail = PostDetailSchema.model_validate(post)
        return detail.model_copy(update={'reading_time': self.calculate_reading_time(post.content)})

    def record_view(self, post_id: int) -> None:
        """Queue a view-count increment without waiting for it."""
        self.view_counter.record_view(post_id)
        current_app.logger.debug(f"Queued view count increment for post {post_id}")

    def calculate_reading_time(self, html: str) -> int:
        """
        Calculate estimated reading time based on word count.

        Args:
            html: Post content as HTML

        Returns:
            Estimated reading time in minutes (minimum 1)
        """
        text = BeautifulSoup(html or '', 'html.parser').get_text(separator=' ')
        words = len(text.split())
        return max(1, round(words / self.words_per_minute))
