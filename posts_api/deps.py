from fastapi import Request

from posts_api.services.post_service import PostService


def post_service(request: Request) -> PostService:
    return request.app.state.post_service
