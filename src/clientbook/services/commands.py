"""Command objects — one frozen dataclass per command word.

Together they form a tagged variant. Each carries only its parsed
arguments; :class:`~clientbook.services.command.CommandService` holds
the behaviour and dispatches on the command type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from clientbook.domain.client import Client
from clientbook.domain.edits import EditDescriptor
from clientbook.domain.fields import Description, Priority

MESSAGE_ONLY_ONE_FILTER_ALLOWED = (
    "Filter command takes exactly one filter condition of either product preference "
    "or priority and the arguments must not be empty! \n"
    "filter pref/PRODUCT or priority/LEVEL\n"
    "Example: filter pref/coffee or filter priority/3"
)
MESSAGE_UNKNOWN_RANK_KEYWORD = "Please provide a valid keyword for entry ranking: name or total"


@dataclass(frozen=True)
class Command:
    """Base for every command variant.

    Attributes:
        word: Command word typed by the user.
        usage: Usage text shown on format errors.
        mutates: Whether a successful run changes the registry.
    """

    word: ClassVar[str] = ""
    usage: ClassVar[str] = ""
    mutates: ClassVar[bool] = False


@dataclass(frozen=True)
class AddCommand(Command):
    word: ClassVar[str] = "add"
    usage: ClassVar[str] = (
        "add: Adds a client to the address book.\n"
        "Parameters: name/NAME phone/PHONE email/EMAIL address/ADDRESS "
        "[tag/TAG]... [pref/PREFERENCE] [freq/FREQUENCY]\n"
        "Example: add name/John Doe phone/98765432 email/johnd@example.com "
        "address/311, Clementi Ave 2, #02-25 tag/friends pref/Shampoo freq/7"
    )
    mutates: ClassVar[bool] = True

    client: Client


@dataclass(frozen=True)
class EditCommand(Command):
    word: ClassVar[str] = "edit"
    usage: ClassVar[str] = (
        "edit: Edits the details of the client identified by the index number used in "
        "the displayed client list. Existing values will be overwritten by the input values.\n"
        "Parameters: INDEX (must be a positive integer) [name/NAME] [phone/PHONE] "
        "[email/EMAIL] [address/ADDRESS] [tag/TAG]... [pref/PREFERENCE] "
        "[freq/FREQUENCY] [priority/PRIORITY]\n"
        "Example: edit 1 phone/91234567 email/johndoe@example.com"
    )
    mutates: ClassVar[bool] = True

    index: int
    descriptor: EditDescriptor = field(default_factory=EditDescriptor)


@dataclass(frozen=True)
class DeleteCommand(Command):
    word: ClassVar[str] = "delete"
    usage: ClassVar[str] = (
        "delete: Deletes the client identified by the index number used in the "
        "displayed client list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: delete 1"
    )
    mutates: ClassVar[bool] = True

    index: int


@dataclass(frozen=True)
class DescCommand(Command):
    word: ClassVar[str] = "desc"
    usage: ClassVar[str] = (
        "desc: Sets the description of the client identified by the index number used "
        "in the displayed client list. A blank description removes it.\n"
        "Parameters: INDEX (must be a positive integer) [DESCRIPTION]\n"
        "Example: desc 1 Prefers email contact"
    )
    mutates: ClassVar[bool] = True

    index: int
    description: Description | None = None


@dataclass(frozen=True)
class ExpandCommand(Command):
    word: ClassVar[str] = "expand"
    usage: ClassVar[str] = (
        "expand: Shows every detail of the client identified by the index number used "
        "in the displayed client list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: expand 1"
    )

    index: int


@dataclass(frozen=True)
class ListCommand(Command):
    word: ClassVar[str] = "list"
    usage: ClassVar[str] = "list: Lists all clients sorted by name."


@dataclass(frozen=True)
class FindCommand(Command):
    word: ClassVar[str] = "find"
    usage: ClassVar[str] = (
        "find: Finds all clients whose name, tags or product preference contain any of "
        "the specified keywords (case-insensitive) and displays them as a list with "
        "index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        "Example: find alice bob shampoo"
    )

    keywords: tuple[str, ...]


@dataclass(frozen=True)
class FilterCommand(Command):
    word: ClassVar[str] = "filter"
    usage: ClassVar[str] = (
        "filter: Filters all clients based on either priority level or product "
        "preference containing the specified keyword (case-insensitive).\n"
        "Parameters: pref/PRODUCT_PREFERENCE or priority/PRIORITY_LEVEL\n"
        "Example: filter pref/shampoo or filter priority/1"
    )

    preference: str | None = None
    priority: Priority | None = None


@dataclass(frozen=True)
class RankCommand(Command):
    word: ClassVar[str] = "rank"
    usage: ClassVar[str] = (
        "rank: Ranks the displayed clients by the given keyword.\n"
        "Parameters: KEYWORD (name or total)\n"
        "Example: rank total"
    )

    keyword: str


@dataclass(frozen=True)
class ClearCommand(Command):
    word: ClassVar[str] = "clear"
    usage: ClassVar[str] = "clear: Removes every client."
    mutates: ClassVar[bool] = True


@dataclass(frozen=True)
class ExitCommand(Command):
    word: ClassVar[str] = "exit"
    usage: ClassVar[str] = "exit: Exits the program."


@dataclass(frozen=True)
class HelpCommand(Command):
    word: ClassVar[str] = "help"
    usage: ClassVar[str] = "help: Shows program usage instructions."


COMMAND_TYPES: tuple[type[Command], ...] = (
    AddCommand,
    EditCommand,
    DeleteCommand,
    DescCommand,
    ExpandCommand,
    ListCommand,
    FindCommand,
    FilterCommand,
    RankCommand,
    ClearCommand,
    ExitCommand,
    HelpCommand,
)
