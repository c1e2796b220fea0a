"""Status command for the NoteOf CLI."""

from typing import Optional

import typer
from rich.console import Console

from noteof import EndpointResolver
from noteof.cli.utils import auth
from noteof.utils import token_exists_in_keyring

app = typer.Typer(help="Show authentication status")
console = Console()


@app.callback(invoke_without_command=True)
def main(username: Optional[str] = typer.Option(None, help="NoteOf username")):
    """Show which user and endpoint the CLI will use."""
    resolved_username = username or auth.load_config().get("username")
    endpoint = EndpointResolver(auth.resolve_endpoint()).resolve()

    console.print(f"Endpoint: [bold]{endpoint}[/bold]")
    if not resolved_username:
        console.print("Not logged in")
        return

    if token_exists_in_keyring(resolved_username):
        console.print(f"Logged in as [bold]{resolved_username}[/bold]")
    else:
        console.print(f"No stored token for [bold]{resolved_username}[/bold]")
