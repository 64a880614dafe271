from datetime import datetime
from typing import Any, Mapping

import pendulum
from aws_lambda_powertools import Logger
from humps import camelize
from pydantic import (
    ConfigDict,
    Field,
    ValidationError,
    conint,
    constr,
    field_validator,
)
from pydantic_core import ErrorDetails

from posts_api.exceptions import PostValidationException
from posts_api.models.camel_model import CamelModel
from posts_api.models.post import Violation, ViolationReason

TITLE_MAX_LENGTH = 100
TITLE_PATTERN = r"^[A-Za-z0-9_ ,.!?]+$"
TEXT_MAX_LENGTH = 2000
# DynamoDB numbers hold at most 38 significant digits
VIEW_COUNTER_MAX = 10**38 - 1

logger = Logger(utc=True)


def _utcnow() -> datetime:
    return pendulum.now("UTC")


class CreatePost(CamelModel):
    title: constr(
        strip_whitespace=True,
        min_length=1,
        max_length=TITLE_MAX_LENGTH,
        pattern=TITLE_PATTERN,
    )
    text: constr(min_length=1, max_length=TEXT_MAX_LENGTH)
    view_counter: conint(ge=-VIEW_COUNTER_MAX, le=VIEW_COUNTER_MAX) | None = None
    published: bool | None = None
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    model_config = ConfigDict(extra="ignore")

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def default_null_timestamp(cls, value: Any) -> Any:
        return _utcnow() if value is None else value


_REASONS_BY_ERROR_TYPE = {
    "missing": ViolationReason.MISSING_FIELD,
    "string_too_short": ViolationReason.MISSING_FIELD,
    "string_too_long": ViolationReason.TOO_LONG,
    "string_pattern_mismatch": ViolationReason.PATTERN_MISMATCH,
    "greater_than_equal": ViolationReason.OUT_OF_RANGE,
    "less_than_equal": ViolationReason.OUT_OF_RANGE,
}


def _to_violation(error: ErrorDetails) -> Violation:
    field = camelize(str(error["loc"][0])) if error["loc"] else "body"
    reason = _REASONS_BY_ERROR_TYPE.get(error["type"], ViolationReason.TYPE_MISMATCH)
    if error["type"] != "missing" and error.get("input", "") is None:
        reason = ViolationReason.MISSING_FIELD
    return Violation(field=field, reason=reason, message=error["msg"])


def validate_post(candidate: Mapping[str, Any]) -> CreatePost:
    """Validate caller input against the post document rules.

    Every rule is checked, so the raised exception lists all violated fields
    rather than the first one. Timestamps the caller did not supply are set to
    the current UTC time.
    """
    try:
        return CreatePost.model_validate(candidate)
    except ValidationError as exc:
        violations = [_to_violation(error) for error in exc.errors()]
        logger.info(f"Post rejected with {len(violations)} violation(s)")
        raise PostValidationException(violations) from exc
