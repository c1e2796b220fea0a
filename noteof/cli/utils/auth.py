"""Configuration and token handling for the NoteOf CLI."""

import json
import os
from pathlib import Path
from typing import Any, Dict, NoReturn, Optional, Tuple

import typer
from rich.console import Console
from rich.panel import Panel

from noteof import NoteOfAPI, NotesClient
from noteof.exceptions import (
    InvalidCredentialsError,
    ServerError,
    UnexpectedServerResponseError,
)
from noteof.models import Token, User
from noteof.utils import get_token_from_keyring, store_token_in_keyring

console = Console()

ENDPOINT_ENV = "NOTEOF_ENDPOINT"

# State storage
config_dir = os.getenv("NOTEOF_CONFIG_DIR") or os.path.expanduser("~/.config/noteof")
config_path = os.path.join(config_dir, "config.json")


def load_config() -> Dict[str, Any]:
    """Load configuration from file."""
    try:
        if os.path.exists(config_path):
            with open(config_path, "r", encoding="utf-8") as f:
                return json.load(f)
    except (json.JSONDecodeError, OSError) as exc:
        console.print(f"[yellow]Warning:[/yellow] Could not load config file: {exc}")
    return {}


def save_config(config: Dict[str, Any]) -> None:
    """Save configuration to file."""
    try:
        Path(config_dir).mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
        # Ensure file has restrictive permissions
        os.chmod(config_path, 0o600)
    except OSError as exc:
        console.print(f"[yellow]Warning:[/yellow] Could not save config file: {exc}")


def resolve_endpoint(provided_endpoint: Optional[str] = None) -> Optional[str]:
    """Command line option > environment > config file; None means the default."""
    return (
        provided_endpoint
        or os.getenv(ENDPOINT_ENV)
        or load_config().get("endpoint")
        or None
    )


def get_username(provided_username: Optional[str] = None) -> str:
    """Determine the username: command line arg > config file > prompt."""
    username = provided_username or load_config().get("username")
    if not username:
        username = typer.prompt("NoteOf username")
    return username


def login(
    username: str,
    password: str,
    usage: str,
    endpoint: Optional[str] = None,
) -> Tuple[Token, User]:
    """Authenticate and store the token in the keyring."""
    api = NoteOfAPI(resolve_endpoint(endpoint))
    try:
        token, user = api.authenticate(username, password, usage)
    except InvalidCredentialsError as exc:
        console.print(
            f"[bold red]Error:[/bold red] Invalid username or password for {username}"
        )
        raise typer.Exit(1) from exc
    except UnexpectedServerResponseError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        console.print(
            Panel(
                "The NoteOf server returned an unexpected response.\n"
                "Check the endpoint with [bold]--endpoint[/bold] or "
                f"{ENDPOINT_ENV} and try again.",
                title="API Error",
                border_style="red",
            )
        )
        raise typer.Exit(1) from exc

    store_token_in_keyring(username, token.api_token)
    return token, user


def get_client(
    username: Optional[str] = None, endpoint: Optional[str] = None
) -> NotesClient:
    """Get a NotesClient for the stored token of a user."""
    resolved_username = get_username(username)
    token = get_token_from_keyring(resolved_username)
    if not token:
        console.print(
            f"[bold red]Error:[/bold red] Not logged in as {resolved_username}. "
            "Run [bold]noteof auth login[/bold] first."
        )
        raise typer.Exit(1)
    return NoteOfAPI(resolve_endpoint(endpoint)).with_token(token)


def fail(exc: Exception) -> NoReturn:
    """Print a library error and exit."""
    if isinstance(exc, InvalidCredentialsError):
        console.print(
            "[bold red]Error:[/bold red] Token rejected. "
            "Run [bold]noteof auth login[/bold] again."
        )
    elif isinstance(exc, ServerError):
        console.print(
            f"[bold red]Error:[/bold red] Server returned {exc.status_code}: {exc.body}"
        )
    else:
        console.print(f"[bold red]Error:[/bold red] {str(exc)}")
    raise typer.Exit(1) from exc
