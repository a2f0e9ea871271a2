"""
Domain layer.

Pure business logic with no framework or persistence imports:
- common: base classes, value objects and domain exceptions
- identity: the authenticated caller and plan features
- learning: decks, cards and the study session engine
"""
