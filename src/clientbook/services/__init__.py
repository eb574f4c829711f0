"""Service layer — command objects and their execution."""
