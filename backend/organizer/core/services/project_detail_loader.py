from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any, TypeVar

from organizer.core.errors import LoadStage, ProjectLoadError, ProjectNotFoundError
from organizer.core.schemas.project_views import ProjectDetail
from organizer.core.services.tag_join import attach_tags
from organizer.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Awaitable, Sequence
    from uuid import UUID

    from organizer.core.models.project import Note, NoteTag
    from organizer.core.repositories.project_repository import ProjectRepository


logger = get_logger(__name__)

T = TypeVar("T")

# Order in which failures are reported when several fetches fail at once
_REPORT_ORDER = (
    LoadStage.NOTES,
    LoadStage.SOURCES,
    LoadStage.TOPICS,
    LoadStage.TAGS,
    LoadStage.NOTE_TAGS,
)


class ProjectDetailLoader:
    """Loads one project with its notes, catalogs and per-note tags.

    Either the whole detail is returned or an error is raised; callers never
    receive a half-built snapshot.
    """

    def __init__(self, repo: ProjectRepository) -> None:
        self._repo = repo

    async def load(self, project_id: UUID | str) -> ProjectDetail:
        """Return the project detail or raise.

        Raises:
            ProjectNotFoundError: the project row does not exist or cannot be read.
            ProjectLoadError: any later fetch failed; `stage` names which one.
        """
        try:
            project = await self._repo.get_project(project_id)
        except Exception as err:
            logger.error(
                "Error fetching project %s: %s",
                project_id,
                err,
                extra={"project_id": str(project_id), "stage": LoadStage.PROJECT.value},
            )
            raise ProjectNotFoundError(project_id) from err
        if project is None:
            logger.info("Project %s not found", project_id, extra={"project_id": str(project_id)})
            raise ProjectNotFoundError(project_id)

        # Catalogs do not depend on the notes; the junction lookup does.
        # Every issued fetch runs to completion before failures are reported.
        results = await asyncio.gather(
            self._notes_with_note_tags(project_id),
            self._fetch(LoadStage.SOURCES, project_id, self._repo.list_sources()),
            self._fetch(LoadStage.TOPICS, project_id, self._repo.list_topics()),
            self._fetch(LoadStage.TAGS, project_id, self._repo.list_tags()),
            return_exceptions=True,
        )
        _raise_first_failure(results)

        (notes, note_tags), sources, topics, tags = results
        attach_tags(notes, note_tags, tags)

        return ProjectDetail(
            project=project,
            notes=list(notes),
            sources=list(sources),
            topics=list(topics),
            tags=list(tags),
        )

    async def _notes_with_note_tags(
        self, project_id: UUID | str
    ) -> tuple[Sequence[Note], Sequence[NoteTag]]:
        notes = await self._fetch(LoadStage.NOTES, project_id, self._repo.list_project_notes(project_id))
        note_ids = [n.id for n in notes]
        note_tags = await self._fetch(LoadStage.NOTE_TAGS, project_id, self._repo.list_note_tags(note_ids))
        return notes, note_tags

    @staticmethod
    async def _fetch(stage: LoadStage, project_id: UUID | str, call: Awaitable[T]) -> T:
        try:
            return await call
        except Exception as err:
            logger.error(
                "Error fetching %s for project %s: %s",
                stage.label,
                project_id,
                err,
                extra={"project_id": str(project_id), "stage": stage.value},
            )
            raise ProjectLoadError(stage, project_id) from err


def _raise_first_failure(results: Sequence[Any]) -> None:
    failures: list[ProjectLoadError] = []
    for result in results:
        if isinstance(result, ProjectLoadError):
            failures.append(result)
        elif isinstance(result, BaseException):
            raise result
    if failures:
        raise min(failures, key=lambda e: _REPORT_ORDER.index(e.stage))


async def load_project_detail(repo: ProjectRepository, project_id: UUID | str) -> ProjectDetail:
    """Convenience wrapper around `ProjectDetailLoader.load`."""
    return await ProjectDetailLoader(repo).load(project_id)
