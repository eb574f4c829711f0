"""BaseService — foundation for clientbook services.

Every service receives a :class:`Workspace` at construction time. The
workspace provides the registry, the view pipeline, and the store.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from clientbook.infrastructure.workspace import Workspace

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class CommandService(BaseService):
            def execute(self, command: Command) -> ServiceResult:
                shown = self._workspace.view.displayed
                ...
    """

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace

    def _persist(self, warnings: list[str]) -> None:
        """Save the registry if autosave is on.

        INVARIANT: Save failures are warnings, never errors. The
        in-memory change stands either way.
        """
        if not self._workspace.autosave:
            return
        from clientbook.infrastructure.storage import StorageError

        try:
            self._workspace.save()
        except StorageError as exc:
            logger.warning("Save failed: %s", exc)
            warnings.append(str(exc))
