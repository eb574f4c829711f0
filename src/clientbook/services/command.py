"""CommandService — validates and applies one command.

Each command runs to completion against the workspace's registry and
view before the next is accepted:

VALIDATE → RESOLVE INDEX → APPLY → RESPOND

Registry invariant errors (duplicate identity, client not found) are
pre-checked here and are never caught: if one escapes, it is a defect.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from clientbook.domain.client import Client
from clientbook.domain.edits import EditDescriptor, from_optional
from clientbook.domain.predicates import (
    SHOW_ALL,
    KeywordPredicate,
    PreferencePredicate,
    PriorityPredicate,
)
from clientbook.domain.view import RANK_ORDERINGS
from clientbook.services.base import BaseService
from clientbook.services.commands import (
    MESSAGE_ONLY_ONE_FILTER_ALLOWED,
    MESSAGE_UNKNOWN_RANK_KEYWORD,
    AddCommand,
    ClearCommand,
    Command,
    DeleteCommand,
    DescCommand,
    EditCommand,
    ExitCommand,
    ExpandCommand,
    FilterCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    RankCommand,
)
from clientbook.services.contracts import client_item, client_list
from clientbook.services.result import ServiceResult, failure

if TYPE_CHECKING:
    from clientbook.domain.registry import ClientRegistry
    from clientbook.domain.view import ClientView

logger = logging.getLogger(__name__)

MESSAGE_INVALID_INDEX = "The client index provided is positive but out of range"
MESSAGE_DUPLICATE_CLIENT = "This client already exists in the address book"
MESSAGE_NOT_EDITED = "At least one field to edit must be provided."

MESSAGE_LISTED = "Listed all clients"
MESSAGE_CLIENTS_LISTED = "{count} clients listed!"
MESSAGE_CLIENTS_RANKED = "{count} clients ranked!"
MESSAGE_ADDED = "New client added: {client}"
MESSAGE_EDITED = "Edited Client: {client}"
MESSAGE_DELETED = "Deleted Client: {client}"
MESSAGE_DESCRIPTION_ADDED = "Added description to Client: {client}"
MESSAGE_DESCRIPTION_REMOVED = "Removed description from Client: {client}"
MESSAGE_EXPANDED = "Showing details of Client: {name}"
MESSAGE_CLEARED = "Address book has been cleared!"
MESSAGE_EXIT = "Exiting clientbook as requested ..."
MESSAGE_HELP = "Opened help window."


class CommandService(BaseService):
    """Executes command objects against the workspace."""

    def execute(self, command: Command) -> ServiceResult:
        """Run *command* and report the outcome.

        Returns ``ok=False`` for every user-facing failure; the registry
        and view are untouched in that case.
        """
        handler = _HANDLERS.get(type(command))
        if handler is None:
            msg = f"No handler for command type {type(command).__name__}"
            raise TypeError(msg)
        logger.debug("Executing %s", command)
        return handler(self, command)

    # ------------------------------------------------------------------
    # View commands
    # ------------------------------------------------------------------

    def _list(self, command: ListCommand) -> ServiceResult:
        self._view.reset()
        return self._listing(command.word, MESSAGE_LISTED)

    def _find(self, command: FindCommand) -> ServiceResult:
        self._view.set_filter(KeywordPredicate(command.keywords))
        return self._listing(command.word, MESSAGE_CLIENTS_LISTED)

    def _filter(self, command: FilterCommand) -> ServiceResult:
        selectors = [s for s in (command.preference, command.priority) if s is not None]
        blank_preference = command.preference is not None and not command.preference.strip()
        if len(selectors) != 1 or blank_preference:
            return failure(command.word, "INVALID_FILTER", MESSAGE_ONLY_ONE_FILTER_ALLOWED)
        if command.preference is not None:
            self._view.set_filter(PreferencePredicate(command.preference.strip()))
        else:
            assert command.priority is not None
            self._view.set_filter(PriorityPredicate(command.priority))
        return self._listing(command.word, MESSAGE_CLIENTS_LISTED)

    def _rank(self, command: RankCommand) -> ServiceResult:
        ordering = RANK_ORDERINGS.get(command.keyword.lower())
        if ordering is None:
            return failure(
                command.word,
                "UNKNOWN_RANK_KEYWORD",
                MESSAGE_UNKNOWN_RANK_KEYWORD,
                keyword=command.keyword,
            )
        self._view.set_ordering(ordering)
        return self._listing(command.word, MESSAGE_CLIENTS_RANKED)

    def _expand(self, command: ExpandCommand) -> ServiceResult:
        client = self._resolve(command.index)
        if client is None:
            return self._invalid_index(command)
        return ServiceResult(
            ok=True,
            op=command.word,
            message=MESSAGE_EXPANDED.format(name=client.name),
            data={"client": client_item(client, index=command.index)},
        )

    # ------------------------------------------------------------------
    # Mutating commands
    # ------------------------------------------------------------------

    def _add(self, command: AddCommand) -> ServiceResult:
        if self._registry.contains(command.client):
            return failure(command.word, "DUPLICATE_CLIENT", MESSAGE_DUPLICATE_CLIENT)
        self._registry.add(command.client)
        return self._mutation(command.word, MESSAGE_ADDED, command.client)

    def _edit(self, command: EditCommand) -> ServiceResult:
        if not command.descriptor.is_any_field_edited():
            return failure(command.word, "NOT_EDITED", MESSAGE_NOT_EDITED)
        target = self._resolve(command.index)
        if target is None:
            return self._invalid_index(command)

        edited = command.descriptor.apply(target)
        if not target.is_same_client(edited) and self._registry.contains(edited):
            return failure(command.word, "DUPLICATE_CLIENT", MESSAGE_DUPLICATE_CLIENT)

        self._registry.replace(target, edited)
        self._view.set_filter(SHOW_ALL)
        return self._mutation(
            command.word,
            MESSAGE_EDITED,
            edited,
            fields_changed=command.descriptor.edited_fields(),
        )

    def _delete(self, command: DeleteCommand) -> ServiceResult:
        target = self._resolve(command.index)
        if target is None:
            return self._invalid_index(command)
        self._registry.remove(target)
        return self._mutation(command.word, MESSAGE_DELETED, target)

    def _desc(self, command: DescCommand) -> ServiceResult:
        target = self._resolve(command.index)
        if target is None:
            return self._invalid_index(command)
        edited = EditDescriptor(description=from_optional(command.description)).apply(target)
        self._registry.replace(target, edited)
        if command.description is not None:
            template = MESSAGE_DESCRIPTION_ADDED
        else:
            template = MESSAGE_DESCRIPTION_REMOVED
        return self._mutation(command.word, template, edited)

    def _clear(self, command: ClearCommand) -> ServiceResult:
        self._registry.replace_all([])
        return ServiceResult(ok=True, op=command.word, message=MESSAGE_CLEARED, list_changed=True)

    # ------------------------------------------------------------------
    # Application commands
    # ------------------------------------------------------------------

    def _exit(self, command: ExitCommand) -> ServiceResult:
        return ServiceResult(ok=True, op=command.word, message=MESSAGE_EXIT, exit=True)

    def _help(self, command: HelpCommand) -> ServiceResult:
        return ServiceResult(ok=True, op=command.word, message=MESSAGE_HELP, show_help=True)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def _registry(self) -> ClientRegistry:
        return self._workspace.registry

    @property
    def _view(self) -> ClientView:
        return self._workspace.view

    def _resolve(self, index: int) -> Client | None:
        """Client at 1-based *index* of the displayed sequence, or None."""
        try:
            return self._view.get(index)
        except IndexError:
            return None

    def _invalid_index(self, command: Any) -> ServiceResult:
        return failure(
            command.word,
            "INVALID_INDEX",
            MESSAGE_INVALID_INDEX,
            index=command.index,
            displayed=len(self._view),
        )

    def _listing(self, op: str, template: str) -> ServiceResult:
        shown = self._view.displayed
        return ServiceResult(
            ok=True,
            op=op,
            message=template.format(count=len(shown)),
            data=client_list(shown),
            list_changed=True,
        )

    def _mutation(self, op: str, template: str, client: Client, **extra: Any) -> ServiceResult:
        return ServiceResult(
            ok=True,
            op=op,
            message=template.format(client=client.summary()),
            data={"client": client_item(client), **extra},
            list_changed=True,
        )


_HANDLERS: dict[type[Command], Callable[[CommandService, Any], ServiceResult]] = {
    ListCommand: CommandService._list,
    FindCommand: CommandService._find,
    FilterCommand: CommandService._filter,
    RankCommand: CommandService._rank,
    ExpandCommand: CommandService._expand,
    AddCommand: CommandService._add,
    EditCommand: CommandService._edit,
    DeleteCommand: CommandService._delete,
    DescCommand: CommandService._desc,
    ClearCommand: CommandService._clear,
    ExitCommand: CommandService._exit,
    HelpCommand: CommandService._help,
}
