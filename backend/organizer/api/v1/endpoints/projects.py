from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from organizer.core.errors import LoaderError
from organizer.core.schemas.project_views import ProjectDetail, ProjectSummary
from organizer.core.services.project_detail_loader import ProjectDetailLoader  # noqa: TCH001
from organizer.core.services.project_summary_loader import ProjectSummaryLoader  # noqa: TCH001
from organizer.dependencies import get_project_detail_loader, get_project_summary_loader

router = APIRouter()


@router.get("/", response_model=list[ProjectSummary])
async def list_projects(loader: ProjectSummaryLoader = Depends(get_project_summary_loader)):
    """List active projects, each with its most recent note.

    Storage failures degrade to an empty list or a missing `recentNote`; this
    endpoint does not error on them.
    """
    return await loader.load()


@router.get("/{project_id}", response_model=ProjectDetail)
async def get_project_detail(
    project_id: str,
    loader: ProjectDetailLoader = Depends(get_project_detail_loader),
):
    try:
        return await loader.load(project_id)
    except LoaderError as err:
        # Storage details were logged by the loader; only the generic message goes out
        raise HTTPException(status_code=err.status_code, detail=err.public_message) from err
