from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from uuid import UUID


class LoadStage(str, Enum):
    """Individual storage fetch a loader performs."""

    PROJECTS = "projects"
    PROJECT = "project"
    RECENT_NOTE = "recent_note"
    NOTES = "notes"
    SOURCES = "sources"
    TOPICS = "topics"
    TAGS = "tags"
    NOTE_TAGS = "note_tags"

    @property
    def label(self) -> str:
        """Human-readable name used in user-facing messages."""
        return _STAGE_LABELS[self]


_STAGE_LABELS: dict[LoadStage, str] = {
    LoadStage.PROJECTS: "projects",
    LoadStage.PROJECT: "project",
    LoadStage.RECENT_NOTE: "recent note",
    LoadStage.NOTES: "notes",
    LoadStage.SOURCES: "LLM sources",
    LoadStage.TOPICS: "topics",
    LoadStage.TAGS: "tags",
    LoadStage.NOTE_TAGS: "note tags",
}


class LoaderError(Exception):
    """Base class for errors surfaced by the read loaders."""

    status_code: int = 500

    @property
    def public_message(self) -> str:
        """Message safe to show to end users; never includes storage details."""
        return "Failed to load data"


class ProjectNotFoundError(LoaderError):
    """The requested project does not exist (or could not be fetched at all)."""

    status_code = 404

    def __init__(self, project_id: UUID | str) -> None:
        super().__init__(f"Project {project_id} not found")
        self.project_id = project_id

    @property
    def public_message(self) -> str:
        return "Project not found"


class ProjectLoadError(LoaderError):
    """A dependent fetch failed after the project itself was found."""

    status_code = 500

    def __init__(self, stage: LoadStage, project_id: UUID | str) -> None:
        super().__init__(f"Failed to load {stage.value} for project {project_id}")
        self.stage = stage
        self.project_id = project_id

    @property
    def public_message(self) -> str:
        return f"Failed to load {self.stage.label}"
