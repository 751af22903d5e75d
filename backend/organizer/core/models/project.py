from __future__ import annotations

from uuid import UUID

from pydantic import Field, field_validator

from .base import AppBaseModel, TimestampedModel


class Source(AppBaseModel):
    """Attribution label for a note's origin (e.g. an LLM)."""

    id: UUID
    name: str


class Topic(AppBaseModel):
    """Classification label for a note."""

    id: UUID
    name: str


class Tag(AppBaseModel):
    """Free-form label attached to notes through `note_tags`."""

    id: UUID
    name: str


class NoteTag(AppBaseModel):
    """One note-tag association row from the `note_tags` junction table."""

    note_id: UUID
    tag_id: UUID


class Project(TimestampedModel):
    """Project domain model."""

    id: UUID = Field(description="Unique project identifier")
    title: str = Field(description="Project title")
    description: str | None = Field(default=None, description="Optional project description")
    is_archived: bool = Field(default=False, description="Whether project is archived")


class Note(TimestampedModel):
    """Note domain model with its source and topic denormalized inline.

    `llm_sources` and `topics` mirror the embedded-select keys PostgREST returns for
    `llm_sources (id, name)` and `topics (id, name)`. `tags` is derived, never stored,
    and is only populated by the project detail loader.
    """

    id: UUID = Field(description="Unique note identifier")
    project_id: UUID = Field(description="Owning project")
    content: str = Field(default="", description="Note content")

    llm_source_id: UUID | None = Field(default=None, description="Source the note came from")
    topic_id: UUID | None = Field(default=None, description="Topic the note is filed under")

    llm_source: Source | None = Field(default=None, alias="llm_sources")
    topic: Topic | None = Field(default=None, alias="topics")

    tags: list[Tag] = Field(default_factory=list, description="Tags ordered by name")

    @field_validator("content", mode="before")
    @classmethod
    def normalize_content(cls, v: str | None) -> str:
        return v if v is not None else ""
