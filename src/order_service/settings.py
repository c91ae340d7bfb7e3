"""
order_service.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the API, logging and AWS backends.
- Hide credentials from repr/logging.
- Offer a cached settings instance for the entrypoint.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    - Every field can be overridden with an `ORDERS_`-prefixed env var.
    - Defaults target a LocalStack-style emulator on localhost.
    """

    model_config = SettingsConfigDict(env_prefix="ORDERS_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "order-service"
    log_level: str = "INFO"
    # JSON lines for log shipping; false switches to structlog's console renderer.
    log_json: bool = True

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # AWS
    aws_region: str = "us-east-1"
    use_localstack: bool = False
    service_url: str | None = "http://localhost:4566"
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = Field(default=None, repr=False)

    # Resources
    bucket_name: str = "orders-receipts"
    table_name: str = "Orders"
    queue_name: str = "orders-events"

    @model_validator(mode="after")
    def _credentials_come_in_pairs(self) -> Settings:
        if (self.aws_access_key_id is None) != (self.aws_secret_access_key is None):
            raise ValueError(
                "aws_access_key_id and aws_secret_access_key must be set together"
            )
        return self

    @property
    def mode(self) -> str:
        # Reported by the health endpoint.
        return "LocalStack" if self.use_localstack else "AWS"

    @property
    def endpoint_url(self) -> str | None:
        # Only the emulator gets an explicit endpoint; live AWS resolves per region.
        if self.use_localstack and self.service_url:
            return self.service_url
        return None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Resource names are read once at startup and handed to `OrderService`; nothing
# else reads them from the environment.
