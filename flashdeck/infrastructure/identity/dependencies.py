"""FastAPI dependencies for identity."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from flashdeck.domain.identity.entities.caller import Caller
from flashdeck.infrastructure.identity.services.token_service import verify_access_token

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_caller(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> Caller | None:
    """
    Resolve the caller from the Authorization header.

    A missing or invalid token resolves to None rather than an error: use
    cases decide how to answer an anonymous request.
    """
    if credentials is None:
        return None
    return verify_access_token(credentials.credentials)


CurrentCaller = Annotated[Caller | None, Depends(get_current_caller)]
