"""Domain layer — value types, the client entity, registry and view.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
