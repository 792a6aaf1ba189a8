"""Typer application entry point for the marqo-client CLI."""

import typer

from marqo_client.cli.commands import documents as documents_command
from marqo_client.cli.commands import indexes as indexes_command
from marqo_client.cli.commands import search as search_command
from marqo_client.cli.commands import system as system_command

app = typer.Typer(no_args_is_help=True, name="marqo-client")

app.add_typer(indexes_command.app, name="indexes")
app.add_typer(documents_command.app, name="documents")
app.add_typer(system_command.models_app, name="models")
app.add_typer(system_command.device_app, name="device")

# Registered as a direct command so INDEX and QUERY parse as arguments
app.command(name="search", help="Search an index")(search_command.search_command)


if __name__ == "__main__":
    app()
