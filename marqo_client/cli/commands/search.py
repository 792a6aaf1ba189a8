"""Search command."""

from __future__ import annotations

import typer
from rich.table import Table

from marqo_client.cli.common import client_session, console
from marqo_client.models.search import SearchRequest


def search_command(
    index: str = typer.Argument(..., help="Index name"),
    query: str = typer.Argument(..., help="Query text"),
    limit: int | None = typer.Option(None, "-l", "--limit"),
    offset: int | None = typer.Option(None, "--offset"),
    method: str | None = typer.Option(
        None, "-m", "--method", help="TENSOR, LEXICAL or HYBRID"
    ),
    filter_string: str | None = typer.Option(None, "-f", "--filter"),
) -> None:
    """Search an index and print the hits."""
    request = SearchRequest(
        index_name=index,
        q=query,
        limit=limit,
        offset=offset,
        search_method=method.upper() if method else None,
        filter=filter_string,
    )
    with client_session() as client:
        response = client.search(request)

    if not response.hits:
        console.print("No results")
        return

    table = Table(title=f"Results for {query!r} ({response.processing_time_ms:.0f} ms)")
    table.add_column("ID")
    table.add_column("Score", justify="right")
    for hit in response.hits:
        score = hit.get("_score")
        table.add_row(
            str(hit.get("_id", "-")),
            f"{score:.4f}" if isinstance(score, (int, float)) else "-",
        )
    console.print(table)
