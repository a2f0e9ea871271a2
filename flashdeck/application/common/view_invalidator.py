"""Protocol for marking rendered views as stale."""

from typing import Protocol


class ViewInvalidatorProtocol(Protocol):
    def invalidate(self, *views: str) -> None:
        """Mark the named views as stale so their next read is fresh."""
        ...
