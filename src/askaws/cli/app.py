"""Main CLI application using Typer."""
import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.table import Table

from ..client import CopyOutcome, PyperclipClipboard, SubmitOutcome
from .providers import API_BASE_ENV, get_api_base, get_session

# Load environment variables
load_dotenv()

app = typer.Typer(
    name="askaws",
    help="Terminal chat client for the AWS assistant API",
    no_args_is_help=True,
    add_completion=True,
)

console = Console()

_API_BASE_HELP = f"Base URL of the chat API (overrides {API_BASE_ENV})"


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question to send"),
    api_base: str | None = typer.Option(
        None,
        "--api-base",
        "-a",
        help=_API_BASE_HELP
    ),
):
    """Send one question and print the reply."""
    async def _ask():
        async with get_session(api_base) as session:
            outcome = await session.submit(question)

            if outcome == SubmitOutcome.IGNORED_EMPTY:
                console.print("[yellow]Nothing to send: the question is empty[/yellow]")
                raise typer.Exit(code=1)

            reply = session.messages[-1].text
            if outcome == SubmitOutcome.FAILED:
                console.print(f"[red]Error: {escape(session.error)}[/red]")
                console.print(f"[dim]{escape(reply)}[/dim]")
                raise typer.Exit(code=1)

            console.print(Markdown(reply))

    asyncio.run(_ask())


@app.command()
def chat(
    api_base: str | None = typer.Option(
        None,
        "--api-base",
        "-a",
        help=_API_BASE_HELP
    ),
):
    """Interactive console chat."""
    async def _chat():
        clipboard = PyperclipClipboard()

        async with get_session(api_base) as session:
            console.print("[bold cyan]askaws Interactive Chat[/bold cyan]")
            console.print(f"[dim]API: {escape(session.endpoint.url)}[/dim]")
            console.print("[dim]Type 'clear' to reset, 'copy' to copy the last answer, "
                          "'exit', 'quit', or 'q' to leave[/dim]\n")

            while True:
                try:
                    user_input = console.input("[bold yellow]You:[/bold yellow] ")
                except (KeyboardInterrupt, EOFError):
                    console.print("\n[dim]Goodbye![/dim]")
                    break

                command = user_input.strip().lower()
                if not command:
                    continue

                if command in ('exit', 'quit', 'q'):
                    console.print("[dim]Goodbye![/dim]")
                    break

                if command == "clear":
                    session.clear()
                    console.print("[dim]Chat cleared[/dim]\n")
                    continue

                if command == "copy":
                    outcome = session.copy_last_reply(clipboard)
                    if outcome == CopyOutcome.COPIED:
                        console.print("[dim]Answer copied[/dim]\n")
                    elif outcome == CopyOutcome.NO_REPLY:
                        console.print("[yellow]No answer to copy[/yellow]\n")
                    continue

                with console.status("[dim]Assistant is typing…[/dim]"):
                    outcome = await session.submit(user_input)

                reply = session.messages[-1].text
                if outcome == SubmitOutcome.FAILED:
                    console.print(f"[red]Error: {escape(session.error)}[/red]")
                    console.print(f"[bold green]Assistant:[/bold green] {escape(reply)}\n")
                else:
                    console.print("[bold green]Assistant:[/bold green]")
                    console.print(Markdown(reply))
                    console.print()

    asyncio.run(_chat())


@app.command(name="tui")
def tui_command(
    api_base: str | None = typer.Option(
        None,
        "--api-base",
        "-a",
        help=_API_BASE_HELP
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
):
    """Launch the interactive TUI chat interface."""
    async def _tui():
        from ..ui import run_chat_tui

        await run_chat_tui(get_session(api_base), log_level=log_level)

    try:
        asyncio.run(_tui())
    except KeyboardInterrupt:
        pass
    console.print("\n[dim]Goodbye![/dim]")


@app.command()
def config(
    api_base: str | None = typer.Option(
        None,
        "--api-base",
        "-a",
        help=_API_BASE_HELP
    ),
):
    """Show the resolved API configuration."""
    from ..client import ChatEndpoint

    endpoint = ChatEndpoint(get_api_base(api_base))

    table = Table(show_header=False)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    table.add_row("API base", endpoint.api_base)
    table.add_row("Chat endpoint", endpoint.url)
    table.add_row("Kind", "Local API" if endpoint.is_local else "Production API")
    console.print(table)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
