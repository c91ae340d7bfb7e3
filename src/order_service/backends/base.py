"""
order_service.backends.base

Collaborator interfaces consumed by `OrderService`.

Responsibilities:
- Describe the three external services as structural protocols.
- Define the value types they return and the one error the service handles.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from order_service.domain.codec import Item


class BlobNotFoundError(LookupError):
    """The blob store has no object under the requested key."""

    def __init__(self, bucket: str, key: str) -> None:
        super().__init__(f"s3://{bucket}/{key} does not exist")
        self.bucket = bucket
        self.key = key


@dataclass(frozen=True, slots=True)
class BlobInfo:
    key: str
    size: int
    last_modified: datetime


@dataclass(frozen=True, slots=True)
class QueuedMessage:
    message_id: str
    body: str
    # Opaque handle a consumer would use to delete the message.
    receipt_handle: str


class KeyValueStore(Protocol):
    async def put_item(self, table: str, item: Item) -> None: ...

    async def get_item(self, table: str, key: Item) -> Item | None: ...

    async def scan(self, table: str) -> list[Item]: ...


class BlobStore(Protocol):
    async def put_text(self, bucket: str, key: str, content: str) -> None: ...

    async def get_text(self, bucket: str, key: str) -> str:
        """Raises `BlobNotFoundError` when the object does not exist."""
        ...

    async def list_objects(self, bucket: str, prefix: str) -> list[BlobInfo]: ...


class MessageQueue(Protocol):
    async def resolve_url(self, name: str) -> str: ...

    async def send(self, url: str, body: str) -> str: ...

    async def receive(
        self, url: str, *, max_messages: int, wait_seconds: int
    ) -> list[QueuedMessage]: ...


@dataclass(frozen=True, slots=True)
class Backends:
    """The three collaborators, opened together and shared by every request."""

    store: KeyValueStore
    blobs: BlobStore
    queue: MessageQueue
