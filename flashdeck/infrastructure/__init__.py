"""
Infrastructure layer.

SQLAlchemy repositories and mappers, FastAPI routers and schemas, token
verification, AI agents and the view registry.
"""
