"""Note models and their wire representation."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from pydantic import Field, field_validator, model_serializer

from noteof.tags import canonicalize_tag

from ._base import NoteOfModel, Timestamp


class NoteText(NoteOfModel):
    """One revision of a note's content."""

    note_text: str = ""
    created: Optional[Timestamp] = None


class Note(NoteOfModel):
    """
    A note as stored by the server.

    ``note_id`` is assigned by the server and absent on notes that have not
    been created yet. ``history`` holds prior revisions, excluding
    ``current``, in the order the server sent them.
    """

    note_id: Optional[int] = None
    archived: bool = False
    starred: bool = False
    created: Optional[Timestamp] = None

    tags: List[str] = Field(default_factory=list)

    current: Optional[NoteText] = None
    history: List[NoteText] = Field(default_factory=list)

    @field_validator("tags", "history", mode="before")
    @classmethod
    def _null_as_empty(cls, v):
        # the server sends null for empty collections
        return [] if v is None else v

    @model_serializer(mode="wrap")
    def _omit_empty_history(self, handler) -> Dict[str, Any]:
        data = handler(self)
        if not data.get("history"):
            data.pop("history", None)
        return data

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        tags: Optional[Iterable[str]] = None,
        starred: bool = False,
        archived: bool = False,
    ) -> "Note":
        """Build a new, not yet created note."""
        return cls(
            current=NoteText(note_text=text),
            tags=list(tags or []),
            starred=starred,
            archived=archived,
        )

    @property
    def text(self) -> Optional[str]:
        if self.current is None:
            return None
        return self.current.note_text

    def canonical_tags(self) -> List[str]:
        return [canonicalize_tag(t) for t in self.tags]

    def has_tag(self, tag: str) -> bool:
        """Compare against the note's tags by canonical form."""
        return canonicalize_tag(tag) in self.canonical_tags()

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready dict for request bodies; unset fields are left out."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
