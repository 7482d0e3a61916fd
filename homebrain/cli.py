"""
Command-line interface for HomeBrain.
"""

import asyncio
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="homebrain",
    help="Voice and chat command interpretation for family coordination",
    no_args_is_help=True,
)

console = Console()


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", "--host", "-h", help="Host to bind to"),
    port: int = typer.Option(8080, "--port", "-p", help="Port to bind to"),
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload"),
):
    """Start the API server."""
    from homebrain.server.app import run_server

    console.print(f"[green]Starting server on {host}:{port}[/green]")
    run_server(host=host, port=port, reload=reload)


@app.command()
def classify(
    text: str = typer.Argument(..., help="Command text to classify"),
):
    """Show the intent a command is classified as."""
    from homebrain.commands.intent import classify as classify_text

    intent = classify_text(text)

    table = Table(title=f"Intent: {intent.kind.value}")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value")

    for key, value in intent.params.items():
        table.add_row(key, value)

    console.print(table)


@app.command()
def respond(
    action: str = typer.Argument(..., help="Action tag (e.g. task_completed)"),
    detail: str = typer.Argument(..., help="Detail to interpolate"),
):
    """Render the response sentence for an action."""
    from homebrain.commands.responses import respond as render

    console.print(render(action, detail))


@app.command()
def demo(
    text: str = typer.Argument(..., help="Command to run against a sample family"),
):
    """Run a command against an in-memory sample family."""
    from homebrain.commands.executor import CommandExecutor
    from homebrain.store.memory import MemoryDataStore
    from homebrain.store.models import ListType

    store = MemoryDataStore()
    family = store.create_family("Demo", owner_id=1)
    store.create_list(family.id, created_by=1, name="Groceries", type=ListType.GROCERY)

    result = asyncio.run(CommandExecutor(store).process(text, actor_id=1))

    style = "green" if result.success else "red"
    console.print(f"[{style}]{result.action.value}[/{style}] {result.response}")
    console.print(
        f"[dim]events={len(store.events)} tasks={len(store.tasks)} "
        f"list_items={len(store.list_items)}[/dim]"
    )


@app.command()
def stt(
    audio_url: str = typer.Argument(..., help="URL of the recorded audio"),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Language code"),
):
    """Transcribe audio with the configured STT backend."""
    from homebrain.errors import TranscriptionError
    from homebrain.stt.transcriber import create_transcriber

    async def run() -> str:
        transcriber = create_transcriber()
        try:
            return await transcriber.transcribe(audio_url, language)
        finally:
            await transcriber.backend.aclose()

    try:
        text = asyncio.run(run())
    except TranscriptionError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    console.print(text)


@app.command()
def info():
    """Show configuration and available backends."""
    from homebrain import __version__
    from homebrain.config import get_config
    from homebrain.stt.transcriber import STT_BACKENDS

    config = get_config()

    table = Table(title=f"HomeBrain {__version__}")
    table.add_column("Property")
    table.add_column("Value")

    table.add_row("LLM Backend", config.llm.backend)
    table.add_row("LLM Model", config.llm.model)
    table.add_row("LLM Timeout", f"{config.llm.timeout:g}s (retries: {config.llm.retries})")
    table.add_row("STT Backend", config.stt.backend)
    table.add_row("STT Endpoint", config.stt.base_url)
    table.add_row("Chat History", str(config.chat.history_limit))

    console.print(table)

    console.print("\n[bold]STT Backends[/bold]")
    for name in STT_BACKENDS:
        console.print(f"  - {name}")

    console.print()


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
