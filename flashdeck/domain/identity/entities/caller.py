"""Caller entity for identity resolution."""

from dataclasses import dataclass, field

from flashdeck.domain.common.value_objects.ids import UserId
from flashdeck.domain.identity.entitlements import canonical_feature


@dataclass(frozen=True)
class Caller:
    """
    The authenticated user behind a request.

    Users are owned by the external identity provider, so the application
    only knows their opaque id and the features their plan grants.
    """

    id: UserId
    features: frozenset[str] = field(default_factory=frozenset)

    def has_feature(self, feature: str) -> bool:
        """Check whether the caller's token grants a feature."""
        return feature in self.features

    @classmethod
    def create(cls, user_id: str, features: list[str] | None = None) -> "Caller":
        """Build a caller from primitive token claims, folding feature aliases."""
        return cls(
            id=UserId(user_id),
            features=frozenset(canonical_feature(name) for name in features or ()),
        )
