"""Endpoint guards shared by routers."""

from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, TypeVar

from fastapi import HTTPException, status

from flashdeck.feature_flags import is_ai_enabled

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])

AI_DISABLED_DETAIL = "AI card generation is not available on this server"


def require_ai_enabled(func: F) -> F:
    """
    Answer 410 Gone from an async endpoint when no AI provider is configured.

    Apply below the route decorator:

        @router.post("/{deck_id}/cards/generate")
        @require_ai_enabled
        async def generate_cards(...): ...
    """

    @wraps(func)
    async def guarded(*args: Any, **kwargs: Any) -> Any:  # noqa: ANN401
        if is_ai_enabled():
            return await func(*args, **kwargs)
        raise HTTPException(status_code=status.HTTP_410_GONE, detail=AI_DISABLED_DETAIL)

    return guarded  # type: ignore[return-value]
