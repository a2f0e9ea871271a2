"""
Uniform boundary for mutation use cases.

Every mutation follows the same contract: whatever goes wrong inside the use
case is turned into a ``Failure(ActionError)`` so only a discriminated result
ever reaches the presentation layer.

Example:
    class DeleteDeckUseCase:
        @mutation_action("Failed to delete deck")
        def delete_deck(self, caller: Caller | None, deck_id: int) -> DeckId:
            user = require_caller(caller)
            ...
            return deck.id

    result = use_case.delete_deck(caller, 42)  # Success(DeckId(42)) or Failure(...)
"""

import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from functools import wraps
from typing import Any, ParamSpec, TypeVar

import structlog
from starlette import status

from flashdeck.application.common.result import Failure, Result, Success
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.domain.identity.entities.caller import Caller
from flashdeck.exceptions import AIProviderError, FlashdeckError, UnauthorizedError

logger = structlog.get_logger(__name__)

P = ParamSpec("P")
T = TypeVar("T")


@dataclass(frozen=True)
class ActionError:
    """Error half of a mutation result."""

    code: str
    message: str
    status_code: int
    upgrade_required: bool = False
    requires_description: bool = False
    reason: str | None = None

    @classmethod
    def from_exception(cls, error: FlashdeckError) -> "ActionError":
        """Build from an application exception, keeping its machine-readable flags."""
        return cls(
            code=error.code,
            message=error.message,
            status_code=error.status_code,
            upgrade_required=error.upgrade_required,
            requires_description=error.requires_description,
            reason=error.reason.value if isinstance(error, AIProviderError) else None,
        )

    @classmethod
    def from_domain_error(cls, error: DomainError) -> "ActionError":
        """Entity invariant violations surface as validation failures."""
        return cls(
            code="validation_error",
            message=error.message,
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        )

    @classmethod
    def internal(cls, message: str) -> "ActionError":
        return cls(
            code="internal_error",
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def require_caller(caller: Caller | None) -> Caller:
    """
    Resolve the acting caller.

    Raises:
        UnauthorizedError: If the request carried no identity
    """
    if caller is None:
        raise UnauthorizedError
    return caller


def _failure_for(error: Exception, fallback_message: str, action: str) -> Failure[ActionError]:
    if isinstance(error, FlashdeckError):
        logger.info("action_rejected", action=action, code=error.code, message=error.message)
        return Failure(ActionError.from_exception(error))
    if isinstance(error, DomainError):
        logger.info("action_rejected", action=action, code="validation_error", message=str(error))
        return Failure(ActionError.from_domain_error(error))
    logger.error("action_failed", action=action, error=str(error), exc_info=error)
    return Failure(ActionError.internal(fallback_message))


def mutation_action(
    fallback_message: str,
) -> Callable[[Callable[P, Any]], Callable[P, Any]]:
    """
    Wrap a use case method so it returns a Result instead of raising.

    Works for both plain and ``async`` methods. Unexpected exceptions are
    logged and reported with ``fallback_message``.
    """

    def decorator(func: Callable[P, Any]) -> Callable[P, Any]:
        action = func.__qualname__

        if inspect.iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[Any, ActionError]:
                try:
                    awaitable: Awaitable[Any] = func(*args, **kwargs)
                    return Success(await awaitable)
                except Exception as e:  # noqa: BLE001
                    return _failure_for(e, fallback_message, action)

            return async_wrapper

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[Any, ActionError]:
            try:
                return Success(func(*args, **kwargs))
            except Exception as e:  # noqa: BLE001
                return _failure_for(e, fallback_message, action)

        return wrapper

    return decorator
