from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from task_manager.schemas.base import STRING_MAX_LENGTH, CamelModel, check_email, check_not_null


class UserCreate(CamelModel):
    first_name: Optional[str] = Field(default=None, max_length=STRING_MAX_LENGTH)
    last_name: Optional[str] = Field(default=None, max_length=STRING_MAX_LENGTH)
    email: str = Field(max_length=STRING_MAX_LENGTH)
    password: str = Field(min_length=3)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value):
        return check_email(value)


class UserUpdate(CamelModel):
    first_name: Optional[str] = Field(default=None, max_length=STRING_MAX_LENGTH)
    last_name: Optional[str] = Field(default=None, max_length=STRING_MAX_LENGTH)
    email: Optional[str] = Field(default=None, max_length=STRING_MAX_LENGTH)
    password: Optional[str] = Field(default=None, min_length=3)

    @field_validator("email", "password")
    @classmethod
    def validate_required(cls, value):
        return check_not_null(value)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value):
        return check_email(value)


class UserOut(CamelModel):
    id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class LoginRequest(BaseModel):
    username: str
    password: str
