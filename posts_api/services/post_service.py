import asyncio
import uuid
from typing import Any, Callable, TypeVar

from aws_lambda_powertools import Logger

from posts_api.exceptions import StoreUnavailableException
from posts_api.models.post import Post
from posts_api.repositories.post_repository import PostRepository
from posts_api.schemas.post_schema import validate_post

T = TypeVar("T")


class PostService:
    ERROR_STORE_TIMEOUT = "The post store did not respond in time"

    def __init__(self, repository: PostRepository, timeout_in_seconds: float):
        self._logger = Logger(utc=True)
        self._repo = repository
        self._timeout = timeout_in_seconds

    async def create_post(self, data: dict[str, Any]) -> Post:
        create_model = validate_post(data)
        post = Post(id=str(uuid.uuid4()), **create_model.model_dump())
        await self._call_store(
            self._repo.create_post, post.model_dump(mode="json", exclude_none=True)
        )
        self._logger.info(f"Post created: {post.id=}")
        return post

    async def list_posts(self) -> list[Post]:
        items = await self._call_store(self._repo.get_all_posts)
        self._logger.debug(f"Listed {len(items)} post(s)")
        return [Post(**item) for item in items]

    async def _call_store(self, func: Callable[..., T], *args: Any) -> T:
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(func, *args), timeout=self._timeout
            )
        except asyncio.TimeoutError as exc:
            raise StoreUnavailableException(self.ERROR_STORE_TIMEOUT) from exc
