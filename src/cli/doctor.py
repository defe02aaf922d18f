"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console

from adapters.http_client import build_async_client
from adapters.http_dispatcher import HttpxDispatcher, describe_error
from cli.ui_components import build_settings_table
from core.config import AppSettings, get_user_env_file
from core.services.fanout import build_descriptor

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_target(settings: AppSettings) -> tuple[bool, str]:
    """Send a single request with the batch descriptor."""

    try:
        async with build_async_client(settings) as client:
            outcome = await HttpxDispatcher(client).send(build_descriptor(settings), 0)
    except Exception as exc:
        return False, describe_error(exc)
    if outcome.ok:
        return True, f"HTTP {outcome.status_code}"
    return False, outcome.error


@app.command()
def run() -> None:
    """Show the effective settings and probe the target endpoint."""

    settings = AppSettings()

    rows: list[tuple[str, str, str]] = [
        ("Target", "OK", f"{settings.http_method.upper()} {settings.target_url}"),
        ("Requests per batch", "OK", str(settings.request_count)),
        ("Content-Type", "OK", settings.content_type),
        ("Timeout", "OK", f"{settings.http_timeout_seconds:g}s"),
    ]

    env_file = get_user_env_file()
    rows.append(("User .env", "OK" if env_file.exists() else "OPTIONAL", str(env_file)))

    ok_http, detail_http = asyncio.run(_check_target(settings))
    rows.append(("Target reachable", "OK" if ok_http else "FAIL", detail_http))

    _console.print(build_settings_table(rows, title="ns-fanout Doctor"))

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] `run` still completes when the target is down; "
            "every request is reported as failed."
        )


@app.command(name="env-file")
def env_file() -> None:
    """Print the path of the user-level .env file read at startup."""

    _console.print(str(get_user_env_file()), highlight=False, soft_wrap=True)
