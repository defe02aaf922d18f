"""ns-fanout CLI (Typer).

Commands:
- `run`: send the configured batch and print both reporting passes.
- `doctor`: environment diagnostics.

The batch itself is configured only through settings (env / `.env`).
"""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console

from cli import doctor
from cli.ui_components import print_batch_error, print_outcome, print_report
from core.config import AppSettings
from core.services.fanout import FanOutHooks, run_batch

app = typer.Typer(no_args_is_help=True, help="Fire N concurrent requests at one endpoint and report.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


@app.command(name="run")
def run_command() -> None:
    """Send the configured batch of concurrent requests."""

    settings = AppSettings()
    hooks = FanOutHooks(
        on_outcome=lambda outcome: print_outcome(_console, outcome),
        on_batch_error=lambda message: print_batch_error(_err_console, message),
    )
    report = asyncio.run(run_batch(settings, hooks=hooks))
    print_report(_console, report)


def run() -> None:
    app()
