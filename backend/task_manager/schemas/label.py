from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from task_manager.schemas.base import CamelModel, check_not_null


class LabelCreate(CamelModel):
    name: str = Field(min_length=3, max_length=1000)


class LabelUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=3, max_length=1000)

    @field_validator("name")
    @classmethod
    def validate_required(cls, value):
        return check_not_null(value)


class LabelOut(CamelModel):
    id: int
    name: str
    created_at: Optional[datetime] = None
