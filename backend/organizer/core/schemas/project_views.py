from __future__ import annotations

from pydantic import Field

from organizer.core.models.base import AppBaseModel
from organizer.core.models.project import Note, Project, Source, Tag, Topic  # noqa: TCH001


class ProjectSummary(Project):
    """A project decorated with its single most recent note.

    `recent_note` is None when the project has no notes or its note could not be loaded.
    """

    recent_note: Note | None = Field(default=None, alias="recentNote")

    @classmethod
    def from_project(cls, project: Project, recent_note: Note | None) -> ProjectSummary:
        return cls(**project.model_dump(), recent_note=recent_note)


class ProjectDetail(AppBaseModel):
    """Everything the project page needs in one consistent snapshot.

    - notes: the project's notes, newest update first, each with `tags` attached
    - sources, topics, tags: full catalogs ordered by name, for selection lists
    """

    project: Project
    notes: list[Note] = Field(default_factory=list)
    sources: list[Source] = Field(default_factory=list)
    topics: list[Topic] = Field(default_factory=list)
    tags: list[Tag] = Field(default_factory=list)
