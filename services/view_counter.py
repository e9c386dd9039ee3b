"""
View Counter - Best-effort background view-count increments

Visiting a post bumps its stored view count without holding up the page.
Each increment runs on a small worker pool inside its own application
context and database session. Failures are logged and dropped, never
retried and never reported to the visitor.
"""

import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional, Set

from sqlalchemy import update

from models import Post


class ViewCounter:
    """Dispatches view-count updates to a bounded thread pool."""

    def __init__(self, app, db, max_workers: int = 2):
        """
        Args:
            app: Flask application the worker threads push contexts for
            db: Flask-SQLAlchemy handle used for the update
            max_workers: Size of the worker pool
        """
        self.app = app
        self.db = db
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix='view-counter'
        )
        self._pending: Set[Future] = set()
        self._idle = threading.Condition()

    def record_view(self, post_id: int) -> Optional[Future]:
        """
        Queue a +1 increment for a post and return without waiting.

        Returns:
            Future resolving to the number of rows updated, or None if the
            pool no longer accepts work
        """
        try:
            future = self._executor.submit(self._increment, post_id)
        except RuntimeError as e:
            # Pool shut down, e.g. during interpreter exit
            self.app.logger.error(f"View count update for post {post_id} dropped: {e}", exc_info=True)
            return None
        with self._idle:
            self._pending.add(future)
        future.add_done_callback(self._on_done)
        return future

    def _increment(self, post_id: int) -> int:
        with self.app.app_context():
            result = self.db.session.execute(
                update(Post)
                .where(Post.id == post_id)
                .values(view_count=Post.view_count + 1)
            )
            self.db.session.commit()
            if result.rowcount == 0:
                self.app.logger.warning(f"View count not updated, post {post_id} no longer exists")
            return result.rowcount

    def _on_done(self, future: Future) -> None:
        if not future.cancelled() and future.exception() is not None:
            error = future.exception()
            self.app.logger.error(f"View count update failed: {error}", exc_info=error)

        with self._idle:
            self._pending.discard(future)
            if not self._pending:
                self._idle.notify_all()

    @property
    def pending_count(self) -> int:
        with self._idle:
            return len(self._pending)

    def drain(self, timeout: Optional[float] = None) -> bool:
        """
        Block until every queued increment has finished and been logged.

        Returns:
            True if nothing is left pending, False on timeout
        """
        with self._idle:
            return self._idle.wait_for(lambda: not self._pending, timeout=timeout)

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)
