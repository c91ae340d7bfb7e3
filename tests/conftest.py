"""
tests.conftest

In-memory stand-ins for the three AWS collaborators.

Responsibilities:
- Implement the `backends.base` protocols with plain dicts/lists.
- Record every call in one shared log so tests can assert step ordering.
- Allow a single operation to be made to fail on demand.
"""

from __future__ import annotations

import copy
import itertools
from datetime import UTC, datetime

import httpx
import pytest

from order_service.api.app import create_app
from order_service.backends.base import Backends, BlobInfo, BlobNotFoundError, QueuedMessage
from order_service.domain.codec import KEY_ATTRIBUTE, Item
from order_service.settings import Settings


class CallLog:
    def __init__(self) -> None:
        self.calls: list[str] = []
        self.fail_on: dict[str, Exception] = {}

    def record(self, name: str) -> None:
        self.calls.append(name)
        if name in self.fail_on:
            raise self.fail_on[name]


class FakeKeyValueStore:
    def __init__(self, log: CallLog) -> None:
        self._log = log
        self.tables: dict[str, dict[str, Item]] = {}

    async def put_item(self, table: str, item: Item) -> None:
        self._log.record("store.put_item")
        key = item[KEY_ATTRIBUTE]["S"]
        self.tables.setdefault(table, {})[key] = copy.deepcopy(item)

    async def get_item(self, table: str, key: Item) -> Item | None:
        self._log.record("store.get_item")
        item = self.tables.get(table, {}).get(key[KEY_ATTRIBUTE]["S"])
        return copy.deepcopy(item) if item is not None else None

    async def scan(self, table: str) -> list[Item]:
        self._log.record("store.scan")
        return [copy.deepcopy(i) for i in self.tables.get(table, {}).values()]


class FakeBlobStore:
    def __init__(self, log: CallLog) -> None:
        self._log = log
        self.objects: dict[tuple[str, str], tuple[bytes, datetime]] = {}

    async def put_text(self, bucket: str, key: str, content: str) -> None:
        self._log.record("blobs.put_text")
        self.objects[(bucket, key)] = (content.encode("utf-8"), datetime.now(UTC))

    async def get_text(self, bucket: str, key: str) -> str:
        self._log.record("blobs.get_text")
        try:
            data, _ = self.objects[(bucket, key)]
        except KeyError:
            raise BlobNotFoundError(bucket, key) from None
        return data.decode("utf-8")

    async def list_objects(self, bucket: str, prefix: str) -> list[BlobInfo]:
        self._log.record("blobs.list_objects")
        return [
            BlobInfo(key=k, size=len(data), last_modified=modified)
            for (b, k), (data, modified) in sorted(self.objects.items())
            if b == bucket and k.startswith(prefix)
        ]


class FakeMessageQueue:
    def __init__(self, log: CallLog, *, queue_names: tuple[str, ...]) -> None:
        self._log = log
        self._ids = itertools.count(1)
        self.queues: dict[str, list[QueuedMessage]] = {
            f"http://sqs.local/000000000000/{name}": [] for name in queue_names
        }
        self.receive_args: list[tuple[int, int]] = []

    async def resolve_url(self, name: str) -> str:
        self._log.record("queue.resolve_url")
        url = f"http://sqs.local/000000000000/{name}"
        if url not in self.queues:
            raise LookupError(f"queue {name!r} does not exist")
        return url

    async def send(self, url: str, body: str) -> str:
        self._log.record("queue.send")
        n = next(self._ids)
        message = QueuedMessage(message_id=f"msg-{n}", body=body, receipt_handle=f"handle-{n}")
        self.queues[url].append(message)
        return message.message_id

    async def receive(
        self, url: str, *, max_messages: int, wait_seconds: int
    ) -> list[QueuedMessage]:
        self._log.record("queue.receive")
        self.receive_args.append((max_messages, wait_seconds))
        # Peek only: messages stay queued.
        return list(self.queues[url][:max_messages])


@pytest.fixture
def settings() -> Settings:
    return Settings(env="test", use_localstack=True)


@pytest.fixture
def call_log() -> CallLog:
    return CallLog()


@pytest.fixture
def backends(call_log: CallLog, settings: Settings) -> Backends:
    return Backends(
        store=FakeKeyValueStore(call_log),
        blobs=FakeBlobStore(call_log),
        queue=FakeMessageQueue(call_log, queue_names=(settings.queue_name,)),
    )


@pytest.fixture
def app(settings: Settings, backends: Backends):
    return create_app(settings=settings, backends=backends)


@pytest.fixture
def transport(app) -> httpx.ASGITransport:
    # Unhandled errors are returned as 500 responses instead of raised into the test.
    return httpx.ASGITransport(app=app, raise_app_exceptions=False)
