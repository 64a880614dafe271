from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import Response

from posts_api.deps import post_service
from posts_api.models.post import Post
from posts_api.services.post_service import PostService

router = APIRouter()


@router.get(
    "",
    response_model=list[Post],
    status_code=status.HTTP_200_OK,
    response_model_exclude_none=True,
)
async def get_posts(service: PostService = Depends(post_service)) -> list[Post]:
    return await service.list_posts()


@router.post(
    "",
    response_model=Post,
    status_code=status.HTTP_201_CREATED,
    response_model_exclude_none=True,
)
async def create_post(
    response: Response,
    data: dict[str, Any] = Body(...),
    service: PostService = Depends(post_service),
) -> Post:
    post = await service.create_post(data)
    response.headers["Location"] = f"/posts/{post.id}"
    return post
