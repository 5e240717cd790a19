"""Infrastructure layer: database schema, engine and board repositories.

This layer depends on stdlib, SQLAlchemy and the domain entity models.
It must never import from services, commands, web or output.
"""
