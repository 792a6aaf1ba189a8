"""Document commands: upsert from a JSON file, fetch and delete by id."""

from __future__ import annotations

import json
from pathlib import Path

import typer

from marqo_client.cli.common import client_session, console
from marqo_client.models.documents import (
    DeleteDocumentsRequest,
    GetDocumentRequest,
    UpsertDocumentsRequest,
)

app = typer.Typer(no_args_is_help=True, help="Manage documents")


def _load_documents(file: Path) -> list[dict]:
    if not file.exists():
        raise typer.BadParameter(f"Document file not found: {file}")
    try:
        data = json.loads(file.read_text())
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"Invalid JSON in {file}: {exc}") from exc
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list) or not all(isinstance(doc, dict) for doc in data):
        raise typer.BadParameter("Document file must hold an object or a list of objects")
    return data


@app.command("upsert")
def upsert_command(
    index: str = typer.Argument(..., help="Index name"),
    file: Path = typer.Argument(..., help="JSON file with one document or a list"),
    tensor_fields: list[str] = typer.Option(
        None, "-t", "--tensor-field", help="Field to vectorise (repeatable)"
    ),
    refresh: bool | None = typer.Option(None, "--refresh/--no-refresh"),
) -> None:
    """Add or replace documents."""
    request = UpsertDocumentsRequest(
        index_name=index,
        documents=_load_documents(file),
        tensor_fields=tensor_fields or None,
        refresh=refresh,
    )
    with client_session() as client:
        response = client.upsert_documents(request)

    failed = [item for item in response.items if item.status >= 300]
    console.print(
        f"Upserted {len(response.items) - len(failed)} documents "
        f"into {response.index_name}"
    )
    for item in failed:
        console.print(f"[red]{item.id}: {item.error or item.result}[/red]")
    if response.errors:
        raise typer.Exit(code=1)


@app.command("get")
def get_command(
    index: str = typer.Argument(..., help="Index name"),
    document_id: str = typer.Argument(..., help="Document id"),
    expose_facets: bool = typer.Option(False, "--expose-facets"),
) -> None:
    """Print one document as JSON."""
    request = GetDocumentRequest(
        index_name=index,
        document_id=document_id,
        expose_facets=expose_facets or None,
    )
    with client_session() as client:
        document = client.get_document(request)
    console.print_json(data=document)


@app.command("delete")
def delete_command(
    index: str = typer.Argument(..., help="Index name"),
    ids: list[str] = typer.Argument(..., help="Document ids"),
) -> None:
    """Delete documents by id."""
    with client_session() as client:
        response = client.delete_documents(
            DeleteDocumentsRequest(index_name=index, ids=ids)
        )
    deleted = response.details.deleted_documents if response.details else len(ids)
    console.print(f"Deleted {deleted} documents from {response.index_name}")
