"""Protocol for plan entitlement checks."""

from typing import Protocol

from flashdeck.domain.identity.entities.caller import Caller
from flashdeck.domain.identity.entitlements import Feature


class EntitlementServiceProtocol(Protocol):
    """Answers whether a caller's plan includes a feature. Holds no state of its own."""

    def has_feature(self, caller: Caller, feature: Feature) -> bool: ...
