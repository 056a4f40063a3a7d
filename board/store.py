"""In-memory comment log shared by all requests."""

import logging
import threading
from collections import deque

from board.models import Comment

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 200


class CommentStore:
    """Newest-first bounded log of comments.

    Every read and write happens under the store's own lock. Callers only
    ever get copies of the underlying sequence.
    """

    def __init__(self, limit: int = DEFAULT_LIMIT):
        if limit < 1:
            raise ValueError("limit must be at least 1")
        self.limit = limit
        # appendleft on a full deque drops the oldest entry from the right
        self._comments: deque[Comment] = deque(maxlen=limit)
        self._lock = threading.Lock()

    def add(self, comment: Comment) -> None:
        with self._lock:
            self._comments.appendleft(comment)
            size = len(self._comments)
        logger.debug(f"Stored comment (log size {size})")

    def recent(self) -> list[Comment]:
        with self._lock:
            return list(self._comments)

    def __len__(self) -> int:
        with self._lock:
            return len(self._comments)
