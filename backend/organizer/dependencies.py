from __future__ import annotations

from fastapi import Depends
from supabase import Client  # noqa: TCH002

from organizer.core.repositories.implementations.supabase.project_repository import (
    SupabaseProjectRepository,
)
from organizer.core.repositories.project_repository import ProjectRepository  # noqa: TCH001
from organizer.core.services.project_detail_loader import ProjectDetailLoader
from organizer.core.services.project_summary_loader import ProjectSummaryLoader
from organizer.db.base import get_supabase_client


def get_client() -> Client:
    """Return the shared Supabase client."""
    return get_supabase_client()


def get_project_repository(client: Client = Depends(get_client)) -> ProjectRepository:
    """Get a request-scoped project repository backed by Supabase."""
    return SupabaseProjectRepository(client)


def get_project_summary_loader(
    repo: ProjectRepository = Depends(get_project_repository),
) -> ProjectSummaryLoader:
    return ProjectSummaryLoader(repo)


def get_project_detail_loader(
    repo: ProjectRepository = Depends(get_project_repository),
) -> ProjectDetailLoader:
    return ProjectDetailLoader(repo)
