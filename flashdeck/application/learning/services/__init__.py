from .deck_ownership_guard import DeckOwnershipGuard

__all__ = ["DeckOwnershipGuard"]
