import logging
from typing import Any, Dict, List

import redis

from .base import BaseRepository
from feedstore.core.config import FEEDS_KEY
from feedstore.schemas import Feed
from feedstore.utils.keys import feed_key

logger = logging.getLogger(__name__)


class FeedRepository(BaseRepository):
    def __init__(self, client: redis.Redis, registry_key: str = FEEDS_KEY):
        super().__init__(client, registry_key)

    def add_feed(self, name: str, url: str) -> str:
        """피드 저장 후 키 반환. 해시와 feeds 집합 등록은 한 트랜잭션"""
        # 키를 먼저 만들어 잘못된 URL은 InvalidIdentityError로 실패
        key = str(feed_key(url))
        feed = Feed(name=name, url=url)
        with self._guard("add_feed"):
            with self.transaction() as pipe:
                pipe.hset(key, mapping=feed.to_hash())
                pipe.sadd(self.registry_key, key)
                pipe.execute()
        logger.debug(f"피드 저장: {url} -> {key}")
        return key

    def get_feeds(self) -> List[str]:
        """등록된 피드 키 목록 (순서 없음)"""
        with self._guard("get_feeds"):
            return list(self.client.smembers(self.registry_key))

    def get_feed(self, key: str) -> Dict[str, Any]:
        """피드 해시 조회. 없으면 빈 dict"""
        return self._hgetall(key, "get_feed")

    def exists(self, key: str) -> bool:
        return self._exists(key, "has_feed")

    def count(self) -> int:
        """feeds 집합 크기"""
        with self._guard("get_feeds_count"):
            return self.client.scard(self.registry_key)
