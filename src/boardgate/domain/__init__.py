"""Domain layer: policy modes, board entities, verdicts and violations.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, web or config.
"""
