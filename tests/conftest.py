from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path
import sys

import fakeredis
import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def redis_server() -> fakeredis.FakeServer:
    return fakeredis.FakeServer()


@pytest.fixture
def redis_client(redis_server: fakeredis.FakeServer) -> fakeredis.FakeRedis:
    """
    In-memory Redis shared per test; decode_responses matches RedisManager's client.
    """
    client = fakeredis.FakeRedis(server=redis_server, decode_responses=True)
    yield client
    # tests may leave the server emulating a dropped connection
    redis_server.connected = True
    client.flushall()


@pytest.fixture
def storage(redis_client):
    from feedstore.storage import Storage

    return Storage(redis_client)


@pytest.fixture
def make_post():
    """
    Build a Post published `minutes` after a fixed base time.
    """
    from feedstore.schemas import Post

    base = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def _make(guid: str, minutes: int = 0, **fields) -> Post:
        published = base + timedelta(minutes=minutes)
        data = {
            "guid": guid,
            "published": published,
            "updated": published,
            "author": "Jane Doe",
            "title": f"Post {guid}",
            "html": "<p>hello</p>",
            "text": "hello",
            "url": f"https://blog.example.com/{guid}",
            "site": "https://blog.example.com",
        }
        data.update(fields)
        return Post(**data)

    return _make
