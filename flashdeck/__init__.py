"""Flashdeck: flashcard decks, AI card generation and study sessions."""

__version__ = "0.1.0"
