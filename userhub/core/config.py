from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # ── App ──────────────────────────────────────────────────────────────────
    app_name: str = "userhub"
    app_version: str = "0.1.0"

    # ── AWS Region ───────────────────────────────────────────────────────────
    aws_region: str = Field(default="us-east-1", alias="AWS_REGION")

    # ── DynamoDB ─────────────────────────────────────────────────────────────
    dynamodb_table_name: str = Field(default="Users", alias="DYNAMODB_TABLE_NAME")
    # Empty → real AWS. Set to http://localhost:8000 for DynamoDB Local.
    dynamodb_endpoint_url: str = Field(default="", alias="DYNAMODB_ENDPOINT_URL")

    # ── CORS ─────────────────────────────────────────────────────────────────
    cors_origins: list[str] = Field(
        default=["http://localhost:3000"], alias="CORS_ORIGINS"
    )

    # ── Observability ────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="json", alias="LOG_FORMAT")


@lru_cache
def get_settings() -> Settings:
    return Settings()
