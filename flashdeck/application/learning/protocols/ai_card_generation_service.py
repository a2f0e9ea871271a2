from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class GeneratedCard:
    front: str
    back: str


class AICardGenerationServiceProtocol(Protocol):
    async def generate_cards(self, deck_name: str, deck_description: str) -> list[GeneratedCard]:
        """
        Ask the AI provider for a batch of front/back pairs about a deck's topic.

        Raises:
            AIProviderError: If the provider call fails
        """
        ...
