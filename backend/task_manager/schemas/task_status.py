from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from task_manager.schemas.base import STRING_MAX_LENGTH, CamelModel, check_not_null


class TaskStatusCreate(CamelModel):
    name: str = Field(min_length=1, max_length=STRING_MAX_LENGTH)
    slug: str = Field(min_length=1, max_length=STRING_MAX_LENGTH)


class TaskStatusUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=STRING_MAX_LENGTH)
    slug: Optional[str] = Field(default=None, min_length=1, max_length=STRING_MAX_LENGTH)

    @field_validator("name", "slug")
    @classmethod
    def validate_required(cls, value):
        return check_not_null(value)


class TaskStatusOut(CamelModel):
    id: int
    name: str
    slug: str
    created_at: Optional[datetime] = None
