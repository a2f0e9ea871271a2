from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from flashdeck.core import container
from flashdeck.database import DatabaseSession
from flashdeck.infrastructure.common.view_registry import ViewRegistry

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Turn a container provider into a FastAPI dependency.

    The request's session is bound to ``container.db`` only while the use
    case and its repositories are built; they keep their reference after
    the override is lifted.
    """

    def build(db: DatabaseSession) -> T:
        container.db.override(db)
        try:
            return provider()
        finally:
            container.db.reset_override()

    return build


def get_view_registry() -> ViewRegistry:
    return container.view_registry()
