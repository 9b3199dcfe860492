from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from task_manager.schemas.base import STRING_MAX_LENGTH, CamelModel, check_not_blank, check_not_null


class TaskCreate(CamelModel):
    name: str = Field(max_length=STRING_MAX_LENGTH)
    index: Optional[int] = None
    description: Optional[str] = None
    task_status: str = Field(min_length=1)
    assignee_id: Optional[int] = None
    labels_ids: List[int] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value):
        return check_not_blank(value)


class TaskUpdate(CamelModel):
    name: Optional[str] = Field(default=None, max_length=STRING_MAX_LENGTH)
    index: Optional[int] = None
    description: Optional[str] = None
    task_status: Optional[str] = Field(default=None, min_length=1)
    assignee_id: Optional[int] = None
    labels_ids: Optional[List[int]] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, value):
        return check_not_blank(value)

    @field_validator("task_status", "labels_ids")
    @classmethod
    def validate_required(cls, value):
        return check_not_null(value)


class TaskOut(CamelModel):
    id: int
    index: Optional[int] = None
    name: str
    description: Optional[str] = None
    task_status: str
    assignee_id: Optional[int] = None
    labels_ids: List[int] = Field(default_factory=list)
    created_at: Optional[datetime] = None
