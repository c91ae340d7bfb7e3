"""
order_service.backends.session

aiobotocore client lifecycle.

Responsibilities:
- Open the DynamoDB, S3 and SQS clients from settings (live AWS or LocalStack).
- Keep them open for the life of the process and close them together.
"""

from __future__ import annotations

from contextlib import AsyncExitStack
from typing import Any

from aiobotocore.config import AioConfig
from aiobotocore.session import get_session

from order_service.backends.aws import DynamoDbStore, S3BlobStore, SqsQueue
from order_service.backends.base import Backends
from order_service.observability.logging import get_logger
from order_service.settings import Settings

log = get_logger(__name__)

# LocalStack accepts any credentials; these are its documented defaults.
_EMULATOR_CREDENTIALS = ("test", "test")


def client_kwargs(settings: Settings, service: str) -> dict[str, Any]:
    kwargs: dict[str, Any] = {"region_name": settings.aws_region}
    endpoint_url = settings.endpoint_url
    if endpoint_url:
        kwargs["endpoint_url"] = endpoint_url
        if service == "s3":
            # Virtual-hosted bucket names do not resolve against the emulator.
            kwargs["config"] = AioConfig(s3={"addressing_style": "path"})

    if settings.aws_access_key_id:
        kwargs["aws_access_key_id"] = settings.aws_access_key_id
        kwargs["aws_secret_access_key"] = settings.aws_secret_access_key
    elif endpoint_url:
        kwargs["aws_access_key_id"], kwargs["aws_secret_access_key"] = _EMULATOR_CREDENTIALS
    return kwargs


class AwsBackends:
    """
    Async context manager yielding `Backends` backed by long-lived aiobotocore clients.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._stack: AsyncExitStack | None = None

    async def __aenter__(self) -> Backends:
        session = get_session()
        stack = AsyncExitStack()
        try:
            dynamodb = await stack.enter_async_context(
                session.create_client("dynamodb", **client_kwargs(self._settings, "dynamodb"))
            )
            s3 = await stack.enter_async_context(
                session.create_client("s3", **client_kwargs(self._settings, "s3"))
            )
            sqs = await stack.enter_async_context(
                session.create_client("sqs", **client_kwargs(self._settings, "sqs"))
            )
        except BaseException:
            await stack.aclose()
            raise
        self._stack = stack
        log.info(
            "aws.clients_opened",
            region=self._settings.aws_region,
            endpoint_url=self._settings.endpoint_url,
        )
        return Backends(store=DynamoDbStore(dynamodb), blobs=S3BlobStore(s3), queue=SqsQueue(sqs))

    async def __aexit__(self, *exc_info: Any) -> None:
        if self._stack is not None:
            stack, self._stack = self._stack, None
            await stack.aclose()
            log.info("aws.clients_closed")
