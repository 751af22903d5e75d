from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from uuid import UUID

    from organizer.core.models.project import Note, NoteTag, Project, Source, Tag, Topic


class ProjectRepository(ABC):
    """Abstract read-only repository over projects, notes and their catalogs.

    Implementations perform I/O and therefore expose async methods. Storage
    failures propagate as the client's own exceptions; the loaders decide which
    of them are fatal.
    """

    @abstractmethod
    async def list_active_projects(self) -> Sequence[Project]:  # pragma: no cover - interface only
        """Return non-archived projects, most recently updated first."""

    @abstractmethod
    async def get_project(self, project_id: UUID | str) -> Project | None:  # pragma: no cover
        """Fetch a project by id or return None if not found."""

    @abstractmethod
    async def get_recent_note(self, project_id: UUID | str) -> Note | None:  # pragma: no cover
        """Return the project's newest note by `created_at`, or None if it has none.

        Ties on `created_at` resolve in storage order, which is not deterministic.
        """

    @abstractmethod
    async def list_project_notes(self, project_id: UUID | str) -> Sequence[Note]:  # pragma: no cover
        """Return all notes of a project, most recently updated first."""

    @abstractmethod
    async def list_sources(self) -> Sequence[Source]: ...

    @abstractmethod
    async def list_topics(self) -> Sequence[Topic]: ...

    @abstractmethod
    async def list_tags(self) -> Sequence[Tag]: ...

    @abstractmethod
    async def list_note_tags(self, note_ids: Sequence[UUID]) -> Sequence[NoteTag]:  # pragma: no cover
        """Return junction rows whose `note_id` is in `note_ids`.

        An empty `note_ids` yields an empty result rather than an error.
        """
