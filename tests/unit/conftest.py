import pytest

from posts_api.repositories.post_repository import PostRepository
from posts_api.services.post_service import PostService
from posts_api.settings import Settings


@pytest.fixture
def post_repository(initialize_posts_table, settings: Settings) -> PostRepository:
    return PostRepository(settings)


@pytest.fixture
def post_service(post_repository: PostRepository, settings: Settings) -> PostService:
    return PostService(post_repository, settings.store_call_timeout_in_seconds)
