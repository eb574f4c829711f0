"""Registry invariant errors.

These protect the identity-uniqueness invariant of :class:`ClientRegistry`.
Commands pre-check before mutating, so reaching one of these from a
command indicates a logic defect upstream.
"""

from __future__ import annotations


class ClientbookError(Exception):
    """Base class for all clientbook errors."""


class DuplicateClientError(ClientbookError):
    """Raised when an operation would store two clients with the same identity."""

    def __init__(self) -> None:
        super().__init__("Operation would result in duplicate clients")


class ClientNotFoundError(ClientbookError):
    """Raised when the target client is not in the registry."""

    def __init__(self) -> None:
        super().__init__("Client not found in registry")
