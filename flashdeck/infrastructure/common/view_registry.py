"""In-process registry of view versions used to invalidate cached reads."""

from collections import defaultdict
from threading import Lock

import structlog

logger = structlog.get_logger(__name__)


class ViewRegistry:
    """
    Tracks a version number per named view.

    Mutations bump the version of the views they affect; read endpoints
    expose it as an ETag so clients holding an older copy fetch again.
    """

    def __init__(self) -> None:
        self._versions: defaultdict[str, int] = defaultdict(int)
        self._lock = Lock()

    def invalidate(self, *views: str) -> None:
        with self._lock:
            for view in views:
                self._versions[view] += 1
        logger.debug("views_invalidated", views=list(views))

    def version(self, view: str) -> int:
        with self._lock:
            return self._versions.get(view, 0)

    def etag(self, view: str) -> str:
        """Weak ETag for the current version of a view."""
        return f'W/"{view}:{self.version(view)}"'
