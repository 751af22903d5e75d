from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from organizer.core.errors import LoadStage
from organizer.core.schemas.project_views import ProjectSummary
from organizer.utils.logging import get_logger

if TYPE_CHECKING:
    from organizer.core.models.project import Note, Project
    from organizer.core.repositories.project_repository import ProjectRepository


logger = get_logger(__name__)


class ProjectSummaryLoader:
    """Builds the project overview: active projects, each with its latest note."""

    def __init__(self, repo: ProjectRepository) -> None:
        self._repo = repo

    async def load(self) -> list[ProjectSummary]:
        """Return non-archived projects (newest update first) with `recent_note` attached.

        Never raises for storage failures. If the project list cannot be read the
        result is empty; if one project's note cannot be read only that project
        loses its `recent_note`.
        """
        try:
            projects = await self._repo.list_active_projects()
        except Exception as err:
            logger.error(
                "Error fetching projects: %s",
                err,
                extra={"stage": LoadStage.PROJECTS.value},
            )
            return []

        # Results come back in argument order, so each note stays with its project
        recent_notes = await asyncio.gather(*(self._recent_note(p) for p in projects))
        return [
            ProjectSummary.from_project(project, note)
            for project, note in zip(projects, recent_notes, strict=True)
        ]

    async def _recent_note(self, project: Project) -> Note | None:
        try:
            return await self._repo.get_recent_note(project.id)
        except Exception as err:
            logger.warning(
                "Error fetching notes for project %s: %s",
                project.id,
                err,
                extra={"project_id": str(project.id), "stage": LoadStage.RECENT_NOTE.value},
            )
            return None


async def load_project_summaries(repo: ProjectRepository) -> list[ProjectSummary]:
    """Convenience wrapper around `ProjectSummaryLoader.load`."""
    return await ProjectSummaryLoader(repo).load()
