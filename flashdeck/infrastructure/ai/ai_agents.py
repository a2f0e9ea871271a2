from pydantic import BaseModel, Field
from pydantic_ai import Agent
from pydantic_ai.models import Model

from flashdeck.domain.learning.entities.card import MAX_CARD_SIDE_LENGTH
from flashdeck.domain.learning.generation import (
    MAX_GENERATED_CARDS,
    MAX_GENERATED_FRONT_LENGTH,
    MIN_GENERATED_CARDS,
    TARGET_GENERATED_CARDS,
)
from flashdeck.infrastructure.ai.ai_model import get_ai_model


class GeneratedCardItem(BaseModel):
    front: str = Field(
        ..., min_length=1, max_length=MAX_GENERATED_FRONT_LENGTH, description="Question or term"
    )
    back: str = Field(
        ..., min_length=1, max_length=MAX_CARD_SIDE_LENGTH, description="Answer or definition"
    )


class GeneratedCardBatch(BaseModel):
    # Short batches are accepted here; the use case rejects them
    cards: list[GeneratedCardItem] = Field(
        ...,
        max_length=MAX_GENERATED_CARDS,
        description=(
            f"Between {MIN_GENERATED_CARDS} and {MAX_GENERATED_CARDS} cards, "
            f"ideally {TARGET_GENERATED_CARDS}"
        ),
    )


def build_card_generation_prompt(deck_name: str, deck_description: str) -> str:
    return (
        f"Generate {TARGET_GENERATED_CARDS} flashcards for a deck titled "
        f'"{deck_name}".\n\n'
        f"Deck description: {deck_description}\n\n"
        "Cover the most important material this deck is meant to teach."
    )


def get_card_generation_agent(model: Model | None = None) -> Agent[None, GeneratedCardBatch]:
    """Card generation agent over ``model``, or the configured provider when omitted."""
    return Agent(
        model or get_ai_model(),
        output_type=GeneratedCardBatch,
        instructions=f"""
        You write educational flashcards for a study app.
        Each card has a front (a question, term or prompt) and a back (the answer,
        definition or explanation).
        RULES:
        1. Each card tests ONE fact or concept
        2. Fronts are short and unambiguous, and work without any other context
        3. Backs are precise; add a short explanation only where it helps memory
        4. Avoid yes/no questions and avoid repeating the same fact on two cards
        5. Stay within the topic given by the deck name and description
        Produce between {MIN_GENERATED_CARDS} and {MAX_GENERATED_CARDS} cards,
        aiming for {TARGET_GENERATED_CARDS}.
        """,
    )
