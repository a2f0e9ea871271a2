"""Identity domain: the authenticated caller and the plan features granted to them."""

from .entities.caller import Caller
from .entitlements import Feature

__all__ = ["Caller", "Feature"]
