"""Helpers shared by CLI commands."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import typer
from pydantic import ValidationError as SettingsError
from rich.console import Console
from rich.markup import escape

from marqo_client.client import MarqoClient
from marqo_client.core.config import Settings
from marqo_client.core.errors import MarqoError

console = Console()


def _print_error(message: str) -> None:
    console.print(f"[red]Error:[/red] {escape(message)}")


@contextmanager
def client_session() -> Iterator[MarqoClient]:
    """Yield a client configured from MARQO_* settings.

    Invalid settings and library errors are printed and turned into exit
    code 1.
    """
    try:
        settings = Settings()
    except SettingsError as exc:
        _print_error(f"invalid configuration: {exc}")
        raise typer.Exit(code=1) from exc

    client = MarqoClient.from_settings(settings)
    try:
        yield client
    except MarqoError as exc:
        _print_error(str(exc))
        raise typer.Exit(code=1) from exc
    finally:
        client.close()
