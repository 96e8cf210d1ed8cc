"""Task data model."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from pydantic import BaseModel, Field, field_validator, model_validator


def _utcnow() -> datetime:
    return datetime.now(UTC)


def ensure_aware(value: datetime | None) -> datetime | None:
    """Treat naive datetimes as UTC so every stored timestamp compares cleanly."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class Task(BaseModel):
    """Task model representing a single to-do item.

    Attributes:
        id: Unique identifier for the task (UUID4 string)
        title: Main task text
        note: Optional free-form note
        due_date: Optional due date
        is_complete: Completion status
        created_date: Creation timestamp, never changes after creation
        completed_date: Completion timestamp, present only while complete
    """

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    title: str
    note: str | None = None
    due_date: datetime | None = None
    is_complete: bool = False
    created_date: datetime = Field(default_factory=_utcnow)
    completed_date: datetime | None = None

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be empty")
        return value

    @field_validator("note")
    @classmethod
    def _blank_note_is_none(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value

    @field_validator("due_date", "created_date", "completed_date")
    @classmethod
    def _naive_is_utc(cls, value: datetime | None) -> datetime | None:
        return ensure_aware(value)

    @model_validator(mode="after")
    def _completed_date_follows_flag(self) -> Task:
        # An incomplete task never keeps a completion timestamp.
        if not self.is_complete and self.completed_date is not None:
            self.completed_date = None
        return self

    @classmethod
    def new(
        cls,
        title: str,
        note: str | None = None,
        due_date: datetime | None = None,
    ) -> Task:
        """Create a fresh, incomplete task with a new identity."""
        return cls(title=title, note=note, due_date=due_date)

    def set_complete(self, value: bool, *, at: datetime | None = None) -> Task:
        """Return a copy with the completion flag set.

        Marking complete stamps ``completed_date`` (``at`` or now); marking
        incomplete clears it.
        """
        if value:
            return self.model_copy(
                update={
                    "is_complete": True,
                    "completed_date": ensure_aware(at) or _utcnow(),
                }
            )
        return self.model_copy(update={"is_complete": False, "completed_date": None})

    def toggled(self, *, at: datetime | None = None) -> Task:
        """Return a copy with the completion flag flipped."""
        return self.set_complete(not self.is_complete, at=at)

    def edited(
        self,
        *,
        title: str | None = None,
        note: str | None = None,
        due_date: datetime | None = None,
    ) -> Task:
        """Return a copy with new content; identity and state are preserved.

        ``note`` and ``due_date`` are replaced as given, so passing ``None``
        clears them. ``title`` is kept when ``None``.
        """
        data = self.model_dump()
        if title is not None:
            data["title"] = title
        data["note"] = note
        data["due_date"] = due_date
        return Task.model_validate(data)
