"""Infrastructure layer — JSON storage and the workspace that wires it up.

This layer depends on stdlib, pydantic, and the domain layer.
It must never import from services, commands, or output.
"""
