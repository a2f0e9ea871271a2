"""
Learning bounded context - Domain layer.

This context handles flashcard-based learning features:
- Deck and card management
- AI-powered card generation limits
- The in-memory study session

Aggregates:
- Deck: owns its cards; every card is authorized through its deck
"""
