"""Request-layer adapters: framework-neutral request, response envelope, middleware.

The web layer may import from services and domain. HTTP frameworks wrap
these adapters; nothing here binds to a particular one.
"""
