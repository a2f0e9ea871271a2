from .entitlement_service import EntitlementService

__all__ = ["EntitlementService"]
