from typing import Any

import boto3
from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import Attr
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from posts_api.exceptions import StoreUnavailableException, WriteConflictException
from posts_api.settings import Settings

UNAVAILABLE_ERROR_CODES = {
    "InternalServerError",
    "ProvisionedThroughputExceededException",
    "RequestLimitExceeded",
    "ResourceNotFoundException",
    "ServiceUnavailable",
    "ThrottlingException",
}


class PostRepository:
    ERROR_STORE_UNAVAILABLE = "The post store is unavailable"
    ERROR_WRITE_CONFLICT = "A post with this id already exists"

    def __init__(self, settings: Settings):
        self._logger = Logger(utc=True)
        self._resource = boto3.resource(
            "dynamodb",
            region_name=settings.aws_region,
            endpoint_url=settings.dynamodb_endpoint_url,
            config=Config(
                connect_timeout=settings.store_timeout_in_seconds,
                read_timeout=settings.store_timeout_in_seconds,
                retries={"max_attempts": settings.store_max_attempts, "mode": "standard"},
            ),
        )
        self._table = self._resource.Table(settings.posts_table_name)

    @property
    def table_name(self) -> str:
        return self._table.name

    def close(self):
        self._resource.meta.client.close()

    def create_post(self, data: dict[str, Any]):
        try:
            self._table.put_item(Item=data, ConditionExpression=Attr("id").not_exists())
        except ClientError as exc:
            if exc.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise WriteConflictException(self.ERROR_WRITE_CONFLICT) from exc
            self._raise_if_unavailable(exc)
            raise
        except BotoCoreError as exc:
            self._raise_if_unavailable(exc)

    def get_all_posts(self) -> list[dict[str, Any]]:
        items = []
        try:
            response = self._table.scan()
            items.extend(response["Items"])
            while "LastEvaluatedKey" in response:
                response = self._table.scan(
                    ExclusiveStartKey=response["LastEvaluatedKey"]
                )
                items.extend(response["Items"])
        except ClientError as exc:
            self._raise_if_unavailable(exc)
            raise
        except BotoCoreError as exc:
            self._raise_if_unavailable(exc)
        return items

    def create_table(self):
        client = self._resource.meta.client
        try:
            client.describe_table(TableName=self.table_name)
            self._logger.info(f"Table already exists: {self.table_name=}")
            return
        except ClientError as exc:
            if exc.response["Error"]["Code"] != "ResourceNotFoundException":
                raise
        self._logger.info(f"Creating table: {self.table_name=}")
        self._resource.create_table(
            TableName=self.table_name,
            AttributeDefinitions=[{"AttributeName": "id", "AttributeType": "S"}],
            KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
            BillingMode="PAY_PER_REQUEST",
        )
        client.get_waiter("table_exists").wait(TableName=self.table_name)

    def _raise_if_unavailable(self, exc: Exception):
        if isinstance(exc, ClientError):
            if exc.response["Error"]["Code"] not in UNAVAILABLE_ERROR_CODES:
                return
        raise StoreUnavailableException(self.ERROR_STORE_UNAVAILABLE) from exc
