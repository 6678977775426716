import logging

import pytest

from feedstore.core import log
from feedstore.core.container import Container
from feedstore.core.database import RedisManager
from feedstore.repositories import FeedRepository, PostRepository
from feedstore.storage import Storage


def test_container_uses_injected_client(redis_client) -> None:
    storage = Container.get_storage(redis_client)
    assert isinstance(storage, Storage)
    assert storage.client is redis_client
    assert isinstance(Container.get_feed_repository(redis_client), FeedRepository)
    assert isinstance(Container.get_post_repository(redis_client), PostRepository)


def test_container_falls_back_to_manager_client(monkeypatch: pytest.MonkeyPatch, redis_client) -> None:
    monkeypatch.setattr(RedisManager, "_client", redis_client)
    assert Container.get_storage().client is redis_client


def test_manager_lifecycle(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(RedisManager, "_client", None)

    client = RedisManager.get_client()
    assert RedisManager.get_client() is client
    assert client.get_connection_kwargs()["decode_responses"] is True

    RedisManager.close()
    assert RedisManager._client is None


def test_setup_logging_sets_root_level() -> None:
    root = logging.getLogger()
    previous = root.level
    try:
        log.setup_logging("debug")
        assert root.level == logging.DEBUG
        log.setup_logging(logging.WARNING)
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous)


def test_setup_logging_is_exported_from_package() -> None:
    import feedstore

    assert feedstore.setup_logging is log.setup_logging
