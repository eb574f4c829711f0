"""clientbook — a command-driven client registry."""

__version__ = "0.1.0"
