"""
Application layer.

Use cases orchestrating the domain, plus the protocols the infrastructure
layer implements (repositories, entitlement checks, AI generation, view
invalidation).
"""
