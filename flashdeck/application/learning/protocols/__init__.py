from .ai_card_generation_service import AICardGenerationServiceProtocol, GeneratedCard
from .card_repository import CardRepositoryProtocol
from .deck_repository import DeckRepositoryProtocol

__all__ = [
    "AICardGenerationServiceProtocol",
    "CardRepositoryProtocol",
    "DeckRepositoryProtocol",
    "GeneratedCard",
]
