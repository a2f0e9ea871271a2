from .entitlement_service import EntitlementServiceProtocol

__all__ = ["EntitlementServiceProtocol"]
