"""Logout command for the NoteOf CLI."""

from typing import Optional

import typer
from rich.console import Console

from noteof.cli.utils import auth
from noteof.utils import delete_token_in_keyring

app = typer.Typer(help="Logout from NoteOf")
console = Console()


@app.callback(invoke_without_command=True)
def main(
    username: Optional[str] = typer.Option(None, help="NoteOf username"),
    forget: bool = typer.Option(
        False, help="Also remove the saved username from the config file"
    ),
):
    """Remove the stored API token."""
    resolved_username = auth.get_username(username)

    if delete_token_in_keyring(resolved_username):
        console.print(f"Logged out [bold]{resolved_username}[/bold]")
    else:
        console.print(f"No stored token for [bold]{resolved_username}[/bold]")

    if forget:
        config = auth.load_config()
        if config.pop("username", None) is not None:
            auth.save_config(config)
