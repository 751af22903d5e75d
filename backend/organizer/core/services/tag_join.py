from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from uuid import UUID

    from organizer.core.models.project import Note, NoteTag, Tag


def index_note_tags(rows: Iterable[NoteTag]) -> dict[UUID, set[UUID]]:
    """Group junction rows into `note_id -> {tag_id}`; duplicate rows collapse."""
    index: dict[UUID, set[UUID]] = defaultdict(set)
    for row in rows:
        index[row.note_id].add(row.tag_id)
    return index


def attach_tags(notes: Sequence[Note], note_tags: Iterable[NoteTag], catalog: Sequence[Tag]) -> None:
    """Resolve each note's tags through the `note_tags` junction, in place.

    PostgREST embedding does not span the many-to-many table, so the join happens
    here. Both indexes are built once, so the pass is linear in notes, junction rows
    and catalog size apart from sorting each note's own handful of tags.

    Resolved tags follow catalog order (the catalog is fetched ordered by name).
    Junction rows naming a tag id missing from the catalog are skipped. Notes
    without any rows get an empty list.
    """
    by_note = index_note_tags(note_tags)
    position = {tag.id: i for i, tag in enumerate(catalog)}

    for note in notes:
        tag_ids = by_note.get(note.id, ())
        known = sorted((position[t] for t in tag_ids if t in position))
        note.tags = [catalog[i] for i in known]
