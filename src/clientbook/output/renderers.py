"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a renderer that prints the message only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from clientbook.output.console import create_console, get_output, style_for_priority
from clientbook.services.commands import COMMAND_TYPES
from clientbook.services.contracts import client_list

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rich.console import Console

    from clientbook.domain.client import Client
    from clientbook.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    width: int | None = None,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_message)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {msg}"
    return result.message


def render_clients(clients: Sequence[Client], *, width: int | None = None) -> str:
    """Render *clients* as the numbered client table."""
    console = create_console(width=width)
    items = client_list(clients)["items"]
    if items:
        console.print(_client_table(items))
    else:
        console.print(Text("No clients to show.", style="dim"))
    return get_output(console).rstrip("\n")


def help_text() -> str:
    """Usage text for every command word."""
    return "\n\n".join(command.usage for command in COMMAND_TYPES)


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="cb.ok")
    op = Text(f"  {result.op}", style="cb.op")
    console.print(label, op)
    if result.message:
        console.print(Text(f"  {result.message}"))


def _tags_text(tags: list[str]) -> Text:
    text = Text()
    for i, tag in enumerate(tags):
        if i:
            text.append(" ")
        text.append(tag, style="cb.tag")
    return text


def _priority_text(level: int | None) -> Text:
    if level is None:
        return Text("")
    return Text(str(level), style=style_for_priority(level))


def _client_table(items: list[dict[str, Any]], *, verbose: bool = False) -> Table:
    """Build a Rich Table for the displayed client list."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", style="cb.index", justify="right", no_wrap=True)
    table.add_column("Name", style="cb.name")
    table.add_column("Phone", no_wrap=True)
    table.add_column("Tags")
    table.add_column("Preference")
    table.add_column("Total", style="cb.total", justify="right")
    table.add_column("Priority", justify="right")
    if verbose:
        table.add_column("Email", style="dim")
        table.add_column("Address", style="dim")

    for item in items:
        preference = item.get("productPreference")
        row: list[Text | str] = [
            str(item.get("index", "")),
            str(item.get("name", "")),
            str(item.get("phone", "")),
            _tags_text(item.get("tags", [])),
            preference["label"] if preference else "",
            str(item.get("totalPurchase", 0)),
            _priority_text(item.get("priority")),
        ]
        if verbose:
            row.extend([str(item.get("email", "")), str(item.get("address", ""))])
        table.add_row(*row)

    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="cb.error")
    op = Text(f"  {result.op}", style="cb.op")
    console.print(label, op, Text(" — "), Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Success renderers ─────────────────────────────────────────────────


def _render_message(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render add/edit/delete/desc/clear/exit results."""
    _status_line(console, result)
    if verbose and result.data.get("fields_changed"):
        console.print(Text(f"  fields_changed: {', '.join(result.data['fields_changed'])}"))


def _render_listing(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list/find/filter/rank results as a table."""
    _status_line(console, result)
    items = result.data.get("items", [])
    if not items:
        console.print(Text("  No clients to show.", style="dim"))
        return
    console.print(_client_table(items, verbose=verbose))


def _render_expand(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the full record of one client as a panel."""
    _status_line(console, result)
    item = result.data.get("client", {})
    lines = Text()
    lines.append(f"Phone: {item.get('phone', '')}\n")
    lines.append(f"Email: {item.get('email', '')}\n")
    lines.append(f"Address: {item.get('address', '')}\n")
    lines.append("Tags: ")
    lines.append_text(_tags_text(item.get("tags", [])))
    preference = item.get("productPreference")
    if preference:
        lines.append(f"\nPreferred Products: {preference['label']}")
        lines.append(f"\nPurchase Frequency: {preference['frequency']}")
    lines.append(f"\nTotal Purchase: {item.get('totalPurchase', 0)}", style="cb.total")
    if item.get("priority") is not None:
        lines.append("\nPriority: ")
        lines.append_text(_priority_text(item["priority"]))
    if item.get("description"):
        lines.append(f"\nDescription: {item['description']}")
    title = Text(str(item.get("name", "")), style="cb.name")
    console.print(Panel(lines, title=title, expand=False))


def _render_help(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    console.print()
    console.print(Text(help_text()))


_OP_RENDERERS: dict[str, Any] = {
    "list": _render_listing,
    "find": _render_listing,
    "filter": _render_listing,
    "rank": _render_listing,
    "expand": _render_expand,
    "help": _render_help,
}
