"""Login command for the NoteOf CLI."""

from typing import Optional

import typer
from rich.console import Console

from noteof.cli.utils import auth

app = typer.Typer(help="Login to NoteOf")
console = Console()


@app.callback(invoke_without_command=True)
def main(
    username: Optional[str] = typer.Option(None, help="NoteOf username"),
    password: Optional[str] = typer.Option(None, help="NoteOf password"),
    usage: str = typer.Option("noteof-cli", help="What the API token is used for"),
    endpoint: Optional[str] = typer.Option(None, help="Override the API endpoint"),
    save_config: bool = typer.Option(
        False, help="Save username and endpoint to config file"
    ),
):
    """Login to NoteOf and store the API token in the keyring."""
    resolved_username = auth.get_username(username)
    if not password:
        password = typer.prompt("NoteOf password", hide_input=True)

    token, user = auth.login(resolved_username, password, usage, endpoint)

    if save_config:
        config = auth.load_config()
        config["username"] = resolved_username
        if endpoint:
            config["endpoint"] = endpoint
        auth.save_config(config)

    console.print(f"Successfully logged in as [bold]{user.username}[/bold]")
    if token.expiration:
        console.print(f"Token expires {token.expiration.isoformat()}")
