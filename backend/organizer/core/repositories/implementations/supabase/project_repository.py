from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

from organizer.core.models.project import Note, NoteTag, Project, Source, Tag, Topic
from organizer.core.repositories.project_repository import ProjectRepository

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from uuid import UUID

    from supabase import Client


class SupabaseProjectRepository(ProjectRepository):
    """Supabase implementation of the ProjectRepository.

    Uses Supabase's PostgREST client for reads only. Notes are selected together with
    their `llm_sources` and `topics` rows via PostgREST resource embedding; tags are
    not embedded because they sit behind the `note_tags` junction.
    """

    PROJECTS_TABLE = "projects"
    NOTES_TABLE = "notes"
    SOURCES_TABLE = "llm_sources"
    TOPICS_TABLE = "topics"
    TAGS_TABLE = "tags"
    NOTE_TAGS_TABLE = "note_tags"

    NOTE_SELECT = "*, llm_sources (id, name), topics (id, name)"

    def __init__(self, client: Client) -> None:
        self._client: Client = client

    async def list_active_projects(self) -> Sequence[Project]:
        resp = await self._run(
            lambda: self._client.table(self.PROJECTS_TABLE)
            .select("*")
            .eq("is_archived", False)
            .order("updated_at", desc=True)
            .execute()
        )
        return [Project.model_validate(r) for r in resp.data or []]

    async def get_project(self, project_id: UUID | str) -> Project | None:
        resp = await self._run(
            lambda: self._client.table(self.PROJECTS_TABLE)
            .select("*")
            .eq("id", str(project_id))
            .limit(1)
            .execute()
        )
        items = resp.data or []
        if not items:
            return None
        return Project.model_validate(items[0])

    async def get_recent_note(self, project_id: UUID | str) -> Note | None:
        resp = await self._run(
            lambda: self._client.table(self.NOTES_TABLE)
            .select(self.NOTE_SELECT)
            .eq("project_id", str(project_id))
            .order("created_at", desc=True)
            .limit(1)
            .execute()
        )
        items = resp.data or []
        if not items:
            return None
        return self._row_to_note(items[0])

    async def list_project_notes(self, project_id: UUID | str) -> Sequence[Note]:
        resp = await self._run(
            lambda: self._client.table(self.NOTES_TABLE)
            .select(self.NOTE_SELECT)
            .eq("project_id", str(project_id))
            .order("updated_at", desc=True)
            .execute()
        )
        return [self._row_to_note(r) for r in resp.data or []]

    async def list_sources(self) -> Sequence[Source]:
        rows = await self._list_catalog(self.SOURCES_TABLE)
        return [Source.model_validate(r) for r in rows]

    async def list_topics(self) -> Sequence[Topic]:
        rows = await self._list_catalog(self.TOPICS_TABLE)
        return [Topic.model_validate(r) for r in rows]

    async def list_tags(self) -> Sequence[Tag]:
        rows = await self._list_catalog(self.TAGS_TABLE)
        return [Tag.model_validate(r) for r in rows]

    async def list_note_tags(self, note_ids: Sequence[UUID]) -> Sequence[NoteTag]:
        ids = [str(i) for i in note_ids]
        if not ids:
            # `in.()` is legal PostgREST but there is nothing to ask for
            return []

        resp = await self._run(
            lambda: self._client.table(self.NOTE_TAGS_TABLE)
            .select("*")
            .in_("note_id", ids)
            .execute()
        )
        return [NoteTag.model_validate(r) for r in resp.data or []]

    async def _list_catalog(self, table: str) -> list[dict[str, Any]]:
        resp = await self._run(
            lambda: self._client.table(table)
            .select("*")
            .order("name")
            .execute()
        )
        return resp.data or []

    @staticmethod
    async def _run(func: Callable[[], Any]) -> Any:
        return await asyncio.to_thread(func)

    @staticmethod
    def _row_to_note(row: dict[str, Any]) -> Note:
        normalized = dict(row)
        # Derived only; a stray `tags` column must not leak into the read model
        normalized.pop("tags", None)
        return Note.model_validate(normalized)
