"""Command-line parser: one line of user input to one command object.

Format problems raise :class:`ParseError`, as does a filter that does not
name exactly one non-empty selector. Business rules that need the
registry or the view (an index out of range, an unknown rank keyword, an
edit with no fields) are left to the command service.
"""

from __future__ import annotations

from collections.abc import Callable

from clientbook.domain.client import Client
from clientbook.domain.edits import UNSET, Edit, EditDescriptor, SetTo, from_optional
from clientbook.parsing.errors import MESSAGE_UNKNOWN_COMMAND, ParseError, invalid_format
from clientbook.parsing.fields import (
    parse_address,
    parse_description,
    parse_email,
    parse_index,
    parse_name,
    parse_phone,
    parse_priority,
    parse_product_preference,
    parse_tags,
)
from clientbook.parsing.tokenizer import (
    PREFIX_ADDRESS,
    PREFIX_EMAIL,
    PREFIX_FREQUENCY,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_PREFERENCE,
    PREFIX_PRIORITY,
    PREFIX_TAG,
    ArgumentMap,
    tokenize,
)
from clientbook.services.commands import (
    MESSAGE_ONLY_ONE_FILTER_ALLOWED,
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

_ADD_PREFIXES = (
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_EMAIL,
    PREFIX_ADDRESS,
    PREFIX_TAG,
    PREFIX_PREFERENCE,
    PREFIX_FREQUENCY,
)
_EDIT_PREFIXES = (*_ADD_PREFIXES, PREFIX_PRIORITY)
_SINGLE_VALUED = tuple(p for p in _EDIT_PREFIXES if p != PREFIX_TAG)


def parse_command(line: str) -> Command:
    """Parse one line of user input.

    Raises:
        ParseError: The command word is unknown or its arguments are malformed.
    """
    stripped = line.strip()
    if not stripped:
        raise invalid_format(HelpCommand.usage)
    word, *rest = stripped.split(maxsplit=1)
    args = rest[0] if rest else ""
    parser = _PARSERS.get(word)
    if parser is None:
        raise ParseError(MESSAGE_UNKNOWN_COMMAND, code="UNKNOWN_COMMAND")
    return parser(args)


# ---------------------------------------------------------------------------
# Per-command parsers
# ---------------------------------------------------------------------------


def _parse_add(args: str) -> AddCommand:
    tokens = tokenize(args, *_ADD_PREFIXES)
    required = (PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS)
    if tokens.preamble or not all(tokens.has(p) for p in required):
        raise invalid_format(AddCommand.usage)
    tokens.verify_no_duplicates(*(p for p in _ADD_PREFIXES if p != PREFIX_TAG))

    client = Client(
        name=parse_name(tokens.value(PREFIX_NAME) or ""),
        phone=parse_phone(tokens.value(PREFIX_PHONE) or ""),
        email=parse_email(tokens.value(PREFIX_EMAIL) or ""),
        address=parse_address(tokens.value(PREFIX_ADDRESS) or ""),
        tags=parse_tags(tokens.all_values(PREFIX_TAG)) if tokens.has(PREFIX_TAG) else frozenset(),
        product_preference=parse_product_preference(
            tokens.value(PREFIX_PREFERENCE),
            tokens.value(PREFIX_FREQUENCY),
        ),
    )
    return AddCommand(client)


def _parse_edit(args: str) -> EditCommand:
    tokens = tokenize(args, *_EDIT_PREFIXES)
    if not tokens.preamble:
        raise invalid_format(EditCommand.usage)
    index = parse_index(tokens.preamble)
    tokens.verify_no_duplicates(*_SINGLE_VALUED)
    return EditCommand(index, _build_descriptor(tokens))


def _build_descriptor(tokens: ArgumentMap) -> EditDescriptor:
    def set_if_given[T](prefix: str, parse: Callable[[str], T]) -> Edit[T]:
        value = tokens.value(prefix)
        return UNSET if value is None else SetTo(parse(value))

    preference = parse_product_preference(
        tokens.value(PREFIX_PREFERENCE),
        tokens.value(PREFIX_FREQUENCY),
    )
    return EditDescriptor(
        name=set_if_given(PREFIX_NAME, parse_name),
        phone=set_if_given(PREFIX_PHONE, parse_phone),
        email=set_if_given(PREFIX_EMAIL, parse_email),
        address=set_if_given(PREFIX_ADDRESS, parse_address),
        tags=SetTo(parse_tags(tokens.all_values(PREFIX_TAG))) if tokens.has(PREFIX_TAG) else UNSET,
        product_preference=UNSET if preference is None else SetTo(preference),
        priority=(
            from_optional(parse_priority(tokens.value(PREFIX_PRIORITY)))
            if tokens.has(PREFIX_PRIORITY)
            else UNSET
        ),
    )


def _parse_single_index(args: str, usage: str) -> int:
    if not args.strip():
        raise invalid_format(usage)
    return parse_index(args)


def _parse_delete(args: str) -> DeleteCommand:
    return DeleteCommand(_parse_single_index(args, DeleteCommand.usage))


def _parse_expand(args: str) -> ExpandCommand:
    return ExpandCommand(_parse_single_index(args, ExpandCommand.usage))


def _parse_desc(args: str) -> DescCommand:
    parts = args.split(maxsplit=1)
    if not parts:
        raise invalid_format(DescCommand.usage)
    index_text = parts[0]
    text = parts[1] if len(parts) > 1 else ""
    return DescCommand(parse_index(index_text), parse_description(text))


def _parse_find(args: str) -> FindCommand:
    keywords = tuple(args.split())
    if not keywords:
        raise invalid_format(FindCommand.usage)
    return FindCommand(keywords)


def _parse_filter(args: str) -> FilterCommand:
    tokens = tokenize(args, PREFIX_PREFERENCE, PREFIX_PRIORITY)
    if tokens.preamble:
        raise invalid_format(FilterCommand.usage)
    tokens.verify_no_duplicates(PREFIX_PREFERENCE, PREFIX_PRIORITY)
    preference = tokens.value(PREFIX_PREFERENCE)
    priority_text = tokens.value(PREFIX_PRIORITY)
    given = [v for v in (preference, priority_text) if v is not None]
    if len(given) != 1 or not given[0]:
        raise ParseError(MESSAGE_ONLY_ONE_FILTER_ALLOWED, code="INVALID_FILTER")
    return FilterCommand(
        preference=preference,
        priority=parse_priority(priority_text) if priority_text is not None else None,
    )


def _parse_rank(args: str) -> RankCommand:
    keyword = args.strip()
    if not keyword or len(keyword.split()) != 1:
        raise invalid_format(RankCommand.usage)
    return RankCommand(keyword)


_PARSERS: dict[str, Callable[[str], Command]] = {
    AddCommand.word: _parse_add,
    EditCommand.word: _parse_edit,
    DeleteCommand.word: _parse_delete,
    DescCommand.word: _parse_desc,
    ExpandCommand.word: _parse_expand,
    ListCommand.word: lambda _args: ListCommand(),
    FindCommand.word: _parse_find,
    FilterCommand.word: _parse_filter,
    RankCommand.word: _parse_rank,
    ClearCommand.word: lambda _args: ClearCommand(),
    ExitCommand.word: lambda _args: ExitCommand(),
    HelpCommand.word: lambda _args: HelpCommand(),
}
