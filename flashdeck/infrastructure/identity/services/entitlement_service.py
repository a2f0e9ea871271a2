"""Entitlement checks backed by the caller's token claims."""

from collections.abc import Iterable

from flashdeck.domain.identity.entities.caller import Caller
from flashdeck.domain.identity.entitlements import Feature


class EntitlementService:
    """
    Answers feature checks from the plan features in the caller's token.

    ``default_features`` are granted to every caller, which lets a
    self-hosted deployment switch on paid features for everyone.
    """

    def __init__(self, default_features: Iterable[str] = ()) -> None:
        self.default_features = frozenset(default_features)

    def has_feature(self, caller: Caller, feature: Feature) -> bool:
        return feature in self.default_features or caller.has_feature(feature)
