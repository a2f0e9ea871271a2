"""Verification of bearer tokens issued by the identity provider."""

from datetime import UTC, datetime, timedelta

import jwt
import structlog
from jwt import InvalidTokenError

from flashdeck.config import get_settings
from flashdeck.domain.identity.entities.caller import Caller

logger = structlog.get_logger(__name__)

ALGORITHM = "HS256"
DEFAULT_TOKEN_LIFETIME = timedelta(hours=1)


def create_access_token(
    user_id: str,
    features: list[str] | None = None,
    expires_in: timedelta = DEFAULT_TOKEN_LIFETIME,
) -> str:
    """
    Create an access token for a user.

    Tokens are normally minted by the identity provider; this is used for
    local development and tests.
    """
    expire = datetime.now(UTC) + expires_in
    to_encode = {"sub": user_id, "features": list(features or []), "exp": expire}
    return jwt.encode(to_encode, get_settings().SECRET_KEY, algorithm=ALGORITHM)


def verify_access_token(token: str) -> Caller | None:
    """Verify an access token and return the caller if valid."""
    try:
        payload = jwt.decode(token, get_settings().SECRET_KEY, algorithms=[ALGORITHM])
        user_id = payload.get("sub")
        if not user_id:
            return None
        features = payload.get("features") or []
        if not isinstance(features, list):
            return None
        return Caller.create(str(user_id), [str(feature) for feature in features])
    except (InvalidTokenError, ValueError) as e:
        logger.debug("invalid_access_token", error=str(e))
        return None
