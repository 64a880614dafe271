import uuid
from random import randint

import boto3
import pendulum
import pytest
from moto import mock_aws

from posts_api.models.post import Post
from posts_api.settings import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def dynamodb_resource(settings: Settings):
    with mock_aws():
        yield boto3.Session().resource("dynamodb", region_name=settings.aws_region)


@pytest.fixture
def posts_table(dynamodb_resource, settings: Settings):
    return dynamodb_resource.Table(settings.posts_table_name)


@pytest.fixture
def initialize_posts_table(
    dynamodb_resource, posts: list[Post], posts_table, settings: Settings
):
    dynamodb_resource.create_table(
        AttributeDefinitions=[
            {
                "AttributeName": "id",
                "AttributeType": "S",
            },
        ],
        TableName=settings.posts_table_name,
        KeySchema=[
            {"AttributeName": "id", "KeyType": "HASH"},
        ],
        ProvisionedThroughput={"ReadCapacityUnits": 10, "WriteCapacityUnits": 10},
    )
    with posts_table.batch_writer() as batch:
        for post in posts:
            batch.put_item(Item=post.model_dump(mode="json", exclude_none=True))


@pytest.fixture
def make_post(faker):
    def make() -> Post:
        now = pendulum.now("UTC")
        return Post(
            id=str(uuid.uuid4()),
            title=" ".join(faker.pystr(min_chars=3, max_chars=20) for _ in range(3)),
            text=faker.text(max_nb_chars=500),
            view_counter=randint(0, 1000),
            published=faker.boolean(),
            created_at=now,
            updated_at=now,
        )

    return make


@pytest.fixture
def posts(make_post) -> list[Post]:
    posts = []
    for _ in range(10):
        posts.append(make_post())
    return posts
