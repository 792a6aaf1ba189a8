"""Model cache and device commands."""

from __future__ import annotations

import typer
from rich.table import Table

from marqo_client.cli.common import client_session, console
from marqo_client.models.system import MODEL_DEVICES, EjectModelRequest

models_app = typer.Typer(no_args_is_help=True, help="Inspect the model cache")
device_app = typer.Typer(no_args_is_help=True, help="Inspect server devices")


@models_app.command("list")
def list_models_command() -> None:
    """List loaded models."""
    with client_session() as client:
        response = client.list_models()

    table = Table(title="Loaded models")
    table.add_column("Model")
    table.add_column("Device")
    for model in response.models:
        table.add_row(model.model_name, model.model_device)
    console.print(table)


@models_app.command("eject")
def eject_command(
    name: str = typer.Argument(..., help="Model name"),
    device: str = typer.Option(
        "cpu", "-d", "--device", help=f"One of: {', '.join(MODEL_DEVICES)}"
    ),
) -> None:
    """Eject a model from the cache."""
    with client_session() as client:
        client.eject_model(EjectModelRequest(model_name=name, model_device=device))
    console.print(f"[green]Ejected {name} from {device}[/green]")


@device_app.command("cpu")
def cpu_command() -> None:
    """Show CPU and memory usage."""
    with client_session() as client:
        info = client.get_cpu_info()
    console.print(f"CPU: {info.cpu_usage_percent}")
    console.print(f"Memory: {info.memory_used_percent} ({info.memory_used_gb})")


@device_app.command("cuda")
def cuda_command() -> None:
    """Show CUDA devices."""
    with client_session() as client:
        info = client.get_cuda_info()

    if not info.cuda_devices:
        console.print("No CUDA devices")
        return
    table = Table(title="CUDA devices")
    table.add_column("Device")
    table.add_column("Memory used")
    table.add_column("Total memory")
    for device in info.cuda_devices:
        table.add_row(device.device_name, device.memory_used, device.total_memory)
    console.print(table)
