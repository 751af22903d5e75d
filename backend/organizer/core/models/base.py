from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel as PydanticBaseModel
from pydantic import ConfigDict


class AppBaseModel(PydanticBaseModel):
    """Base model for all domain models.

    Storage rows may carry columns the read models do not declare; they are dropped.
    """

    model_config = ConfigDict(
        from_attributes=True,
        extra="ignore",
        populate_by_name=True,
    )


class TimestampedModel(AppBaseModel):
    """Base model with timestamp fields as stored; `created_at` must come from the row."""

    created_at: datetime
    updated_at: datetime | None = None
