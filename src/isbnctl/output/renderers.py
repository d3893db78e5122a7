"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from isbnctl.output.console import ELEMENT_STYLES, create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from isbnctl.services.result import ServiceResult

_ELEMENT_KEYS = ("prefix", "group", "registrant", "publication", "check_digit")


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    width: int | None = None,
    show_isbn10: bool = True,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose, show_isbn10=show_isbn10)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Successful hyphenate/inspect print bare ISBNs, groups print ids.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    if result.op == "hyphenate":
        return "\n".join(str(item["isbn"]) for item in result.items)
    if result.op == "inspect":
        return str(result.data.get("isbn", ""))
    if result.op == "groups":
        return "\n".join(str(item["id"]) for item in result.items)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    console.print(Text.assemble(("OK", "isbn.ok"), (f"  {result.op}", "isbn.op")))


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    """Print a single indented key-value field."""
    line = Text(f"  {key}: ", style="isbn.key")
    line.append(str(value), style=style)
    console.print(line)


def _styled_elements(elements: dict[str, Any]) -> Text:
    """Hyphenated ISBN with each element in its own color."""
    text = Text()
    for i, (key, style) in enumerate(zip(_ELEMENT_KEYS, ELEMENT_STYLES, strict=True)):
        if i:
            text.append("-")
        text.append(str(elements[key]), style=style)
    return text


def _render_items(result: ServiceResult, console: Console) -> None:
    """Dispatch to the per-op item table, used for failed batches too."""
    if result.op == "validate":
        console.print(_validate_table(result.items))
    elif result.op == "hyphenate":
        console.print(_hyphenate_table(result.items))


def _validate_table(items: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Input", style="isbn.input", no_wrap=True)
    table.add_column("Valid", justify="center")
    table.add_column("Form")
    for item in items:
        mark = Text("yes", style="isbn.ok") if item["valid"] else Text("no", style="isbn.error")
        table.add_row(Text(str(item["input"])), mark, item.get("form") or "")
    return table


def _hyphenate_table(items: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Input", style="isbn.input", no_wrap=True)
    table.add_column("ISBN", style="isbn.value", no_wrap=True)
    table.add_column("Reason", style="isbn.reason")
    for item in items:
        table.add_row(Text(str(item["input"])), item.get("isbn") or "", item.get("reason") or "")
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "isbn.error"), (f"  {result.op}", "isbn.op"), f": {msg}")
    )

    if result.items:
        _render_items(result, console)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_batch(result: ServiceResult, console: Console, **_: Any) -> None:
    """Render validate/hyphenate results as a table."""
    _status_line(console, result)
    _render_items(result, console)


def _render_inspect(
    result: ServiceResult, console: Console, *, verbose: bool = False, show_isbn10: bool = True
) -> None:
    """Render the element breakdown of a single ISBN."""
    data = result.data
    _status_line(console, result)
    console.print(Text("  isbn: ", style="isbn.key") + _styled_elements(data["elements"]))
    _field(console, "gtin", data["gtin"])
    _field(console, "group", f"{data['group']} ({data['group_name']})")
    if show_isbn10 and data.get("isbn10"):
        _field(console, "isbn10", data["isbn10"])

    if verbose:
        console.print(Text("  elements:", style="dim"))
        for key, style in zip(_ELEMENT_KEYS, ELEMENT_STYLES, strict=True):
            line = Text(f"    {key}: ", style="isbn.key")
            line.append(str(data["elements"][key]), style=style)
            console.print(line)
        if data.get("input_form"):
            _field(console, "input_form", data["input_form"])


def _render_groups(
    result: ServiceResult, console: Console, *, verbose: bool = False, **_: Any
) -> None:
    """Render registration groups as a table."""
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Group", style="isbn.value", no_wrap=True)
    table.add_column("Agency")
    if verbose:
        table.add_column("Rules", justify="right")
    for item in result.items:
        row = [str(item["id"]), str(item["name"])]
        if verbose:
            row.append(str(item["rules"]))
        table.add_row(*row)
    console.print(table)
    _field(console, "count", result.data.get("count", 0))


def _render_generic(result: ServiceResult, console: Console, **_: Any) -> None:
    """Fallback renderer: status line plus flat key-value data."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "validate": _render_batch,
    "hyphenate": _render_batch,
    "inspect": _render_inspect,
    "groups": _render_groups,
}
