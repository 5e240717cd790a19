"""Service layer: validation and comment-policy evaluation returning ServiceResult.

Services may import from domain and infrastructure layers.
They must never import from commands, output or web.
"""
