import re

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
STRING_MAX_LENGTH = 255


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def check_email(value):
    if value is None:
        return value
    value = value.strip()
    if not EMAIL_PATTERN.match(value):
        raise ValueError("must be a well-formed email address")
    return value


def check_not_null(value):
    if value is None:
        raise ValueError("must not be null")
    return value


def check_not_blank(value):
    if value is None or not value.strip():
        raise ValueError("must not be blank")
    return value
