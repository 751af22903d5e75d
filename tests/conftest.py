from __future__ import annotations

import os
from datetime import UTC, datetime, timedelta
from types import SimpleNamespace
from uuid import uuid4

import pytest

# Settings() is built at import time and requires the Supabase connection values.
os.environ.setdefault("APP_SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("APP_SUPABASE_ANON_KEY", "test-anon-key")

from organizer.core.models.project import Note, NoteTag, Project, Source, Tag, Topic  # noqa: E402
from organizer.core.repositories.project_repository import ProjectRepository  # noqa: E402

T0 = datetime(2025, 1, 1, tzinfo=UTC)


def at(minutes: int) -> datetime:
    return T0 + timedelta(minutes=minutes)


class StorageError(Exception):
    """Stands in for a PostgREST APIError."""


class InMemoryProjectRepository(ProjectRepository):
    """Repository double over plain lists, with per-method failure injection."""

    def __init__(self, *, projects=(), notes=(), sources=(), topics=(), tags=(), note_tags=()):
        self.projects = list(projects)
        self.notes = list(notes)
        self.sources = list(sources)
        self.topics = list(topics)
        self.tags = list(tags)
        self.note_tags = list(note_tags)
        self.failures: dict[str, set] = {}
        self.calls: list[tuple[str, object]] = []

    def fail(self, method: str, *keys) -> None:
        """Make `method` raise; with keys, only for those project ids."""
        self.failures[method] = set(keys)

    def _check(self, method: str, key=None) -> None:
        self.calls.append((method, key))
        if method in self.failures:
            keys = self.failures[method]
            if not keys or key in keys:
                raise StorageError(f"{method} failed")

    async def list_active_projects(self):
        self._check("list_active_projects")
        active = [p for p in self.projects if not p.is_archived]
        return sorted(active, key=lambda p: p.updated_at, reverse=True)

    async def get_project(self, project_id):
        self._check("get_project", project_id)
        return next((p for p in self.projects if str(p.id) == str(project_id)), None)

    async def get_recent_note(self, project_id):
        self._check("get_recent_note", project_id)
        notes = sorted(self._notes_for(project_id), key=lambda n: n.created_at, reverse=True)
        return notes[0] if notes else None

    async def list_project_notes(self, project_id):
        self._check("list_project_notes", project_id)
        return sorted(self._notes_for(project_id), key=lambda n: n.updated_at, reverse=True)

    async def list_sources(self):
        self._check("list_sources")
        return sorted(self.sources, key=lambda s: s.name)

    async def list_topics(self):
        self._check("list_topics")
        return sorted(self.topics, key=lambda t: t.name)

    async def list_tags(self):
        self._check("list_tags")
        return sorted(self.tags, key=lambda t: t.name)

    async def list_note_tags(self, note_ids):
        self._check("list_note_tags", tuple(note_ids))
        wanted = set(note_ids)
        return [row for row in self.note_tags if row.note_id in wanted]

    def _notes_for(self, project_id):
        # Copies, so loaders attaching tags never touch the stored rows
        return [n.model_copy(deep=True) for n in self.notes if str(n.project_id) == str(project_id)]


def make_project(title: str, *, updated: int = 0, archived: bool = False) -> Project:
    return Project(id=uuid4(), title=title, created_at=at(0), updated_at=at(updated), is_archived=archived)


def make_note(project: Project, content: str, *, created: int = 0, updated: int | None = None,
              source: Source | None = None, topic: Topic | None = None) -> Note:
    return Note(
        id=uuid4(),
        project_id=project.id,
        content=content,
        llm_source_id=source.id if source else None,
        topic_id=topic.id if topic else None,
        llm_sources=source,
        topics=topic,
        created_at=at(created),
        updated_at=at(updated if updated is not None else created),
    )


@pytest.fixture
def catalog():
    sources = [Source(id=uuid4(), name="ChatGPT"), Source(id=uuid4(), name="Claude")]
    topics = [Topic(id=uuid4(), name="Design"), Topic(id=uuid4(), name="Research")]
    tags = [Tag(id=uuid4(), name="alpha"), Tag(id=uuid4(), name="beta"), Tag(id=uuid4(), name="gamma")]
    return SimpleNamespace(sources=sources, topics=topics, tags=tags)


@pytest.fixture
def workspace(catalog):
    """One active project with three notes, one empty project, one archived project."""
    p1 = make_project("Compiler notes", updated=30)
    p2 = make_project("Empty project", updated=20)
    archived = make_project("Old stuff", updated=40, archived=True)

    n1 = make_note(p1, "first", created=1, updated=9, source=catalog.sources[0], topic=catalog.topics[0])
    n2 = make_note(p1, "second", created=5, updated=6, source=catalog.sources[1], topic=catalog.topics[1])
    n3 = make_note(p1, "third", created=3, updated=3)
    stale = make_note(archived, "archived note", created=50)

    alpha, beta, gamma = catalog.tags
    note_tags = [
        NoteTag(note_id=n1.id, tag_id=gamma.id),
        NoteTag(note_id=n1.id, tag_id=alpha.id),
        NoteTag(note_id=n2.id, tag_id=beta.id),
    ]

    repo = InMemoryProjectRepository(
        projects=[p2, archived, p1],
        notes=[n1, n2, n3, stale],
        sources=catalog.sources,
        topics=catalog.topics,
        tags=catalog.tags,
        note_tags=note_tags,
    )
    return SimpleNamespace(repo=repo, p1=p1, p2=p2, archived=archived, n1=n1, n2=n2, n3=n3, catalog=catalog)
