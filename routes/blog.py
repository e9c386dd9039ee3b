"""
Blog Routes Blueprint

Handles the published post listing and post detail pages.
"""

from flask import Blueprint, render_template, abort, current_app

from extensions import limiter

blog_bp = Blueprint('blog', __name__, url_prefix='/blog')


def _blog_service():
    return current_app.extensions['blog']


@blog_bp.route("", strict_slashes=False)
def blog_home():
    """Listing of the newest published posts."""
    posts = _blog_service().get_published_posts()
    current_app.logger.info(f"Blog home accessed - {len(posts)} posts")
    return render_template("blog/list.html", posts=posts)


@blog_bp.route("/<slug>")
@limiter.limit(lambda: current_app.config['BLOG_DETAIL_RATE_LIMIT'])
def post_detail(slug):
    """Display a published post and count the visit in the background."""
    blog_service = _blog_service()

    post = blog_service.get_published_post(slug)
    if post is None:
        abort(404)

    blog_service.record_view(post.id)
    current_app.logger.info(f"Post accessed: {slug}")

    return render_template("blog/detail.html", post=post)
