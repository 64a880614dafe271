from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from posts_api.api.routers import posts_router

router = APIRouter()
router.include_router(posts_router.router, prefix="/posts", tags=["posts"])


@router.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def root() -> str:
    return "ok"
