"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: Every executed command returns a ServiceResult.
The CLI shell and renderers consume this type.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for command execution.

    Attributes:
        ok: Whether the command succeeded.
        op: Command word (e.g. ``"edit"``).
        message: Human-readable feedback for the user.
        data: Command-specific payload on success.
        warnings: Non-fatal issues (e.g. a failed save).
        error: Structured error if ``ok`` is False.
        list_changed: The displayed client list should be redrawn.
        show_help: The help text should be shown.
        exit: The application should exit.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    message: str = ""
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    list_changed: bool = False
    show_help: bool = False
    exit: bool = False


def failure(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
    """Shorthand for an ``ok=False`` result."""
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=detail),
    )
