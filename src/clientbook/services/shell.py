"""ShellService — one line of user input, end to end.

Pipeline: PARSE → EXECUTE → PERSIST

Parse failures become ``ok=False`` results. After a successful mutating
command the registry is saved; a failed save is added to the result's
warnings and never undoes the in-memory change.
"""

from __future__ import annotations

import logging

import structlog

from clientbook.parsing.commands import parse_command
from clientbook.parsing.errors import ParseError
from clientbook.services.base import BaseService
from clientbook.services.command import CommandService
from clientbook.services.result import ServiceResult, failure

logger = logging.getLogger(__name__)


class ShellService(BaseService):
    """Runs raw command lines against the workspace."""

    def run_line(self, line: str) -> ServiceResult:
        word = line.strip().split(" ", 1)[0]
        with structlog.contextvars.bound_contextvars(command=word):
            try:
                command = parse_command(line)
            except ParseError as exc:
                logger.debug("Rejected input %r: %s", line, exc.code)
                return failure(word or "input", exc.code, exc.message)

            result = CommandService(self._workspace).execute(command)
            if not (result.ok and command.mutates):
                return result

            warnings = list(result.warnings)
            self._persist(warnings)
            if warnings == result.warnings:
                return result
            return result.model_copy(update={"warnings": warnings})
