"""
Redis 기반 피드/포스트 저장소

사용 예:
    from feedstore import Storage, setup_logging
    from feedstore.core.database import RedisManager

    setup_logging()                       # 애플리케이션 시작 시 한 번 (LOG_LEVEL 사용)
    storage = Storage(RedisManager.get_client())
    ...
    RedisManager.close()                  # 종료 시
"""
from feedstore.core.exceptions import FeedStoreException, InvalidIdentityError, StorageUnavailableError
from feedstore.core.log import setup_logging
from feedstore.schemas import Feed, Post
from feedstore.storage import Storage
from feedstore.utils.keys import EntityKind, StorageKey, derive_key

__all__ = [
    "Storage",
    "Feed",
    "Post",
    "EntityKind",
    "StorageKey",
    "derive_key",
    "FeedStoreException",
    "InvalidIdentityError",
    "StorageUnavailableError",
    "setup_logging",
]
