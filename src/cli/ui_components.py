"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- The two reporting passes (per request, then the summary) stay independent
  and can be composed or dropped on their own.
"""

from __future__ import annotations

import json
from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from core.domain.models import BatchReport, Outcome


def format_payload(outcome: Outcome) -> str:
    """Text printed as soon as a request completes.

    JSON bodies are re-serialized compactly (`{"namespaces":[]}`); anything
    else is printed as received.
    """

    if not outcome.ok:
        return f"Error: {outcome.error}"
    try:
        return json.dumps(json.loads(outcome.body), separators=(",", ":"), ensure_ascii=False)
    except (ValueError, RecursionError):
        return outcome.body


def format_summary_line(outcome: Outcome) -> str:
    number = outcome.index + 1
    if outcome.ok:
        return f"Request {number} status: {outcome.status_code}"
    return f"Request {number} failed: {outcome.error}"


def format_timing_line(report: BatchReport) -> str:
    return (
        f"Total time for {report.requested} concurrent requests: "
        f"{report.elapsed_seconds:.3f}s"
    )


def print_outcome(console: Console, outcome: Outcome) -> None:
    text = escape(format_payload(outcome))
    if outcome.ok:
        console.print(text, soft_wrap=True, highlight=False)
    else:
        console.print(f"[red]{text}[/red]", soft_wrap=True, highlight=False)


def print_summary(console: Console, outcomes: Sequence[Outcome]) -> None:
    """Second pass: one indexed line per outcome, in dispatch order."""

    for outcome in outcomes:
        line = escape(format_summary_line(outcome))
        style = "green" if outcome.ok else "red"
        console.print(f"[{style}]{line}[/{style}]", soft_wrap=True, highlight=False)


def print_batch_error(console: Console, message: str) -> None:
    console.print(f"[bold red]Error making requests:[/bold red] {escape(message)}", soft_wrap=True)


def print_report(console: Console, report: BatchReport) -> None:
    """Summary pass plus timing line. Prints nothing for an empty batch."""

    if report.requested == 0:
        return
    print_summary(console, report.outcomes)
    if report.completed:
        console.print(format_timing_line(report), style="dim", highlight=False)


def build_settings_table(rows: Sequence[tuple[str, str, str]], *, title: str) -> Table:
    table = Table(title=title)
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    for row in rows:
        table.add_row(*row)
    return table
