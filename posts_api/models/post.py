from datetime import datetime
from enum import Enum

from posts_api.models.camel_model import CamelModel


class Post(CamelModel):
    id: str
    title: str
    text: str
    view_counter: int | None = None
    published: bool | None = None
    created_at: datetime
    updated_at: datetime


class ViolationReason(str, Enum):
    MISSING_FIELD = "missing_field"
    OUT_OF_RANGE = "out_of_range"
    PATTERN_MISMATCH = "pattern_mismatch"
    TOO_LONG = "too_long"
    TYPE_MISMATCH = "type_mismatch"


class Violation(CamelModel):
    field: str
    reason: ViolationReason
    message: str
