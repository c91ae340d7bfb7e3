"""
order_service.backends.aws

AWS implementations of the collaborator interfaces.

Responsibilities:
- Translate protocol calls into DynamoDB, S3 and SQS API calls.
- Follow pagination for scans and object listings.
- Convert the S3 missing-object condition into `BlobNotFoundError`.

Each adapter wraps an already-open aiobotocore client; opening and closing them
is handled by `order_service.backends.session`.
"""

from __future__ import annotations

from typing import Any

from botocore.exceptions import ClientError

from order_service.backends.base import BlobInfo, BlobNotFoundError, QueuedMessage
from order_service.domain.codec import Item

_MISSING_OBJECT_CODES = frozenset({"NoSuchKey", "404", "NotFound"})


class DynamoDbStore:
    def __init__(self, client: Any) -> None:
        self._client = client

    async def put_item(self, table: str, item: Item) -> None:
        await self._client.put_item(TableName=table, Item=item)

    async def get_item(self, table: str, key: Item) -> Item | None:
        resp = await self._client.get_item(TableName=table, Key=key)
        # A missing key comes back without "Item" (not an error).
        item = resp.get("Item")
        return item or None

    async def scan(self, table: str) -> list[Item]:
        items: list[Item] = []
        paginator = self._client.get_paginator("scan")
        async for page in paginator.paginate(TableName=table):
            items.extend(page.get("Items", []))
        return items


class S3BlobStore:
    def __init__(self, client: Any) -> None:
        self._client = client

    async def put_text(self, bucket: str, key: str, content: str) -> None:
        await self._client.put_object(
            Bucket=bucket,
            Key=key,
            Body=content.encode("utf-8"),
            ContentType="text/plain; charset=utf-8",
        )

    async def get_text(self, bucket: str, key: str) -> str:
        try:
            resp = await self._client.get_object(Bucket=bucket, Key=key)
        except ClientError as e:
            if _error_code(e) in _MISSING_OBJECT_CODES:
                raise BlobNotFoundError(bucket, key) from e
            raise
        async with resp["Body"] as stream:
            data = await stream.read()
        return data.decode("utf-8")

    async def list_objects(self, bucket: str, prefix: str) -> list[BlobInfo]:
        blobs: list[BlobInfo] = []
        paginator = self._client.get_paginator("list_objects_v2")
        async for page in paginator.paginate(Bucket=bucket, Prefix=prefix):
            for obj in page.get("Contents", []):
                blobs.append(
                    BlobInfo(
                        key=obj["Key"],
                        size=int(obj["Size"]),
                        last_modified=obj["LastModified"],
                    )
                )
        return blobs


class SqsQueue:
    def __init__(self, client: Any) -> None:
        self._client = client

    async def resolve_url(self, name: str) -> str:
        resp = await self._client.get_queue_url(QueueName=name)
        return resp["QueueUrl"]

    async def send(self, url: str, body: str) -> str:
        resp = await self._client.send_message(QueueUrl=url, MessageBody=body)
        return resp["MessageId"]

    async def receive(
        self, url: str, *, max_messages: int, wait_seconds: int
    ) -> list[QueuedMessage]:
        resp = await self._client.receive_message(
            QueueUrl=url,
            MaxNumberOfMessages=max_messages,
            WaitTimeSeconds=wait_seconds,
        )
        return [
            QueuedMessage(
                message_id=m["MessageId"],
                body=m["Body"],
                receipt_handle=m["ReceiptHandle"],
            )
            for m in resp.get("Messages", [])
        ]


def _error_code(error: ClientError) -> str:
    return str(error.response.get("Error", {}).get("Code", ""))


# --- Module Notes -----------------------------------------------------------
# Messages read by `SqsQueue.receive` are not deleted; they reappear after the queue's
# visibility timeout.
