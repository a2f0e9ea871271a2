import structlog
from pydantic_ai.models import Model

from flashdeck.application.learning.protocols.ai_card_generation_service import GeneratedCard
from flashdeck.infrastructure.ai.ai_agents import (
    build_card_generation_prompt,
    get_card_generation_agent,
)
from flashdeck.infrastructure.ai.provider_errors import to_provider_error

logger = structlog.get_logger(__name__)


class AIService:
    def __init__(self, model: Model | None = None) -> None:
        self.model = model

    async def generate_cards(self, deck_name: str, deck_description: str) -> list[GeneratedCard]:
        agent = get_card_generation_agent(self.model)
        try:
            result = await agent.run(build_card_generation_prompt(deck_name, deck_description))
        except Exception as e:
            error = to_provider_error(e)
            logger.warning("ai_generation_failed", reason=error.reason.value, error=str(e))
            raise error from e
        return [GeneratedCard(front=card.front, back=card.back) for card in result.output.cards]
