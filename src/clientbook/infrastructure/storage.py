"""JSON storage for the client registry.

INVARIANT: Corrupt or schema-invalid data never reaches the registry.
A file that fails to load as a whole yields an empty client list and a
logged warning; the caller decides whether to overwrite it later.

Writes are atomic: the document goes to a sibling temp file first and
is then moved over the target.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from clientbook.domain.client import Client
from clientbook.domain.errors import ClientbookError, DuplicateClientError
from clientbook.domain.records import ClientRecord
from clientbook.domain.registry import ClientRegistry

logger = logging.getLogger(__name__)


class StorageError(ClientbookError):
    """Raised when the data file cannot be written."""


class ClientbookDocument(BaseModel):
    """Top-level JSON document: ``{"clients": [...]}``."""

    clients: list[ClientRecord] = Field(default_factory=list)


class JsonClientStore:
    """Reads and writes the client list as a JSON document."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> list[Client]:
        """Return the stored clients, or an empty list if none can be trusted."""
        if not self.path.is_file():
            logger.debug("No data file at %s; starting empty", self.path)
            return []
        try:
            raw = self.path.read_text(encoding="utf-8")
            document = ClientbookDocument.model_validate_json(raw)
            clients = [record.to_client() for record in document.clients]
            ClientRegistry(clients)
        except (OSError, ValidationError, ValueError, TypeError, DuplicateClientError) as exc:
            logger.warning("Ignoring unreadable data file %s: %s", self.path, exc)
            return []
        logger.debug("Loaded %d clients from %s", len(clients), self.path)
        return clients

    def save(self, clients: list[Client]) -> None:
        """Write *clients* to the data file.

        Raises:
            StorageError: The file or its directory could not be written.
        """
        document = {"clients": [ClientRecord.from_client(c).dump() for c in clients]}
        payload = json.dumps(document, indent=2, ensure_ascii=False) + "\n"
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            msg = f"Could not save data to {self.path}: {exc}"
            raise StorageError(msg) from exc
        logger.debug("Saved %d clients to %s", len(clients), self.path)
