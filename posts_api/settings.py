from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    debug: bool = False
    app_name: str = "posts-api"
    aws_region: str = Field(default="eu-central-1", alias="AWS_DEFAULT_REGION")
    create_posts_table: bool = False
    dynamodb_endpoint_url: str | None = None
    stage: str = "dev"
    store_max_attempts: int = Field(default=3, ge=1)
    store_timeout_in_seconds: float = Field(default=5.0, gt=0)

    @computed_field
    @property
    def posts_table_name(self) -> str:
        return f"{self.stage}-posts"

    @computed_field
    @property
    def store_call_timeout_in_seconds(self) -> float:
        # leaves room for every botocore attempt to hit its own timeout
        return self.store_timeout_in_seconds * self.store_max_attempts
