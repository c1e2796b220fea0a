"""Example of how to use the NoteOf client."""

import argparse
import getpass
import logging

from rich import pretty
from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install

from noteof import InvalidCredentialsError, Note, NoteOfAPI

install(show_locals=True)
pretty.install()

console = Console()


def main():
    """Main function."""
    logging.basicConfig(
        level=logging.INFO, format="%(message)s", handlers=[RichHandler()]
    )

    parser = argparse.ArgumentParser(description="NoteOf client example.")
    parser.add_argument("--username", required=True, help="Your NoteOf username.")
    parser.add_argument(
        "--password",
        help="Your NoteOf password. If not provided, you will be prompted.",
    )
    parser.add_argument("--endpoint", help="Override the API endpoint.")
    args = parser.parse_args()

    password = args.password or getpass.getpass("Password: ")
    api = NoteOfAPI(args.endpoint)

    try:
        notes, token, user = api.login(args.username, password, usage="example")
    except InvalidCredentialsError:
        logging.error("Invalid username or password.")
        return

    console.rule(f"Logged in as {user.username}")
    console.print(token)

    created = notes.create_note(Note.from_text("Hello from noteof", tags=["Café"]))
    console.print(created)
    console.print("has tag 'cafe':", created.has_tag("cafe"))

    console.rule("All notes")
    for note in notes.list_notes():
        console.print(note)

    notes.delete_note(created.note_id)


if __name__ == "__main__":
    main()
