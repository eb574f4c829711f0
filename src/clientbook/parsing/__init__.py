"""Parsing layer — raw command text to value types and command objects."""
