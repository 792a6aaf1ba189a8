"""Index management commands."""

from __future__ import annotations

import typer
from rich.table import Table

from marqo_client.cli.common import client_session, console
from marqo_client.models.indexes import (
    CreateIndexRequest,
    GetIndexHealthRequest,
    GetIndexSettingsRequest,
    GetIndexStatsRequest,
    IndexDefaults,
    RefreshIndexRequest,
)

app = typer.Typer(no_args_is_help=True, help="Manage indexes")


@app.command("list")
def list_command() -> None:
    """List all indexes."""
    with client_session() as client:
        response = client.list_indexes()

    if not response.results:
        console.print("No indexes found")
        return
    table = Table(title="Indexes")
    table.add_column("Name")
    for summary in response.results:
        table.add_row(summary.index_name)
    console.print(table)


@app.command("create")
def create_command(
    name: str = typer.Argument(..., help="Index name"),
    model: str | None = typer.Option(None, "-m", "--model", help="Embedding model"),
    shards: int | None = typer.Option(None, "--shards"),
    replicas: int | None = typer.Option(None, "--replicas"),
) -> None:
    """Create an index."""
    request = CreateIndexRequest(
        index_name=name,
        index_defaults=IndexDefaults(model=model) if model else None,
        number_of_shards=shards,
        number_of_replicas=replicas,
    )
    with client_session() as client:
        response = client.create_index(request)
    console.print(f"[green]Created index {response.index}[/green]")


@app.command("delete")
def delete_command(name: str = typer.Argument(..., help="Index name")) -> None:
    """Delete an index."""
    with client_session() as client:
        client.delete_index(name)
    console.print(f"[green]Deleted index {name}[/green]")


@app.command("stats")
def stats_command(name: str = typer.Argument(..., help="Index name")) -> None:
    """Show document and vector counts."""
    with client_session() as client:
        stats = client.get_index_stats(GetIndexStatsRequest(index_name=name))
    console.print(f"Documents: {stats.number_of_documents}")
    console.print(f"Vectors: {stats.number_of_vectors}")


@app.command("health")
def health_command(name: str = typer.Argument(..., help="Index name")) -> None:
    """Show index health."""
    with client_session() as client:
        health = client.get_index_health(GetIndexHealthRequest(index_name=name))

    color = {"green": "green", "yellow": "yellow"}.get(health.status, "red")
    console.print(f"{name} [{color}]{health.status}[/{color}]")
    if health.backend is not None:
        console.print(f"Backend: {health.backend.status}")


@app.command("settings")
def settings_command(name: str = typer.Argument(..., help="Index name")) -> None:
    """Print index settings as JSON."""
    with client_session() as client:
        settings = client.get_index_settings(GetIndexSettingsRequest(index_name=name))
    console.print_json(settings.model_dump_json(exclude_none=True))


@app.command("refresh")
def refresh_command(name: str = typer.Argument(..., help="Index name")) -> None:
    """Refresh an index."""
    with client_session() as client:
        response = client.refresh_index(RefreshIndexRequest(index_name=name))
    shards = response.shards
    console.print(
        f"Refreshed {name}: {shards.successful}/{shards.total} shards "
        f"({shards.failed} failed)"
    )
