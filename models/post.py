"""
Blog post and author models.

Both tables belong to an externally managed schema; the ORM maps onto the
existing camelCase column names.
"""
from extensions import db
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship


def _utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Author(db.Model):
    """Attributed writer of a post."""
    __tablename__ = 'Author'

    id = Column(Integer, primary_key=True)
    name = Column(String(191), nullable=True)
    image = Column(String(512), nullable=True)  # Avatar URL

    posts = relationship('Post', back_populates='author')

    def __repr__(self):
        return f'<Author {self.id} - {self.name}>'


class Post(db.Model):
    """Blog article with publication state and view metrics."""
    __tablename__ = 'Post'

    id = Column(Integer, primary_key=True)
    title = Column(String(191), nullable=False)
    slug = Column(String(191), unique=True, nullable=False)
    summary = Column(String(500), nullable=True)
    content = Column(Text, nullable=False)  # Raw HTML
    published = Column(Boolean, nullable=False, default=False)
    created_at = Column('createdAt', DateTime, nullable=False, default=_utcnow)
    view_count = Column('viewCount', Integer, nullable=False, default=0)
    author_id = Column('authorId', Integer, ForeignKey('Author.id'), nullable=False)

    author = relationship('Author', back_populates='posts')

    # Listing query: published posts, newest first
    __table_args__ = (
        Index('idx_post_published_created', 'published', 'createdAt'),
    )

    def __repr__(self):
        return f'<Post {self.slug} - published: {self.published}>'
