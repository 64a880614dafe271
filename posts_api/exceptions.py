from typing import Any

from fastapi import HTTPException, status

from posts_api.models.post import Violation


class PostValidationException(HTTPException):
    def __init__(self, violations: list[Violation], detail: Any = None) -> None:
        super().__init__(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=detail or "The post is invalid",
        )
        self.violations = violations


class StoreUnavailableException(HTTPException):
    def __init__(self, detail: Any = None) -> None:
        super().__init__(status.HTTP_503_SERVICE_UNAVAILABLE, detail=detail)


class WriteConflictException(HTTPException):
    def __init__(self, detail: Any = None) -> None:
        super().__init__(status.HTTP_409_CONFLICT, detail=detail)
