import logging
from typing import Any, Dict, Iterable, List

import redis

from .base import BaseRepository
from feedstore.core.config import POSTS_KEY
from feedstore.schemas import Post
from feedstore.utils.keys import post_key

logger = logging.getLogger(__name__)


class PostRepository(BaseRepository):
    def __init__(self, client: redis.Redis, registry_key: str = POSTS_KEY):
        super().__init__(client, registry_key)

    def _queue(self, pipe, post: Post) -> None:
        # guid 해시를 키로 사용 (포스트마다 고유)
        key = str(post_key(post.guid))
        pipe.hset(key, mapping=post.to_hash())
        # 발행 시각을 점수로 정렬 집합에 등록
        pipe.zadd(self.registry_key, {key: post.score})

    def add_post(self, post: Post) -> None:
        """포스트 저장. 해시와 posts 정렬 집합 등록은 한 트랜잭션"""
        with self._guard("add_post"):
            with self.transaction() as pipe:
                self._queue(pipe, post)
                pipe.execute()
        logger.debug(f"포스트 저장: {post.guid}")

    def add_many(self, posts: Iterable[Post], batch_size: int = 1000) -> int:
        """대량 저장. batch_size 단위로 트랜잭션 처리. 저장된 포스트 수 반환"""
        posts = list(posts)
        if not posts:
            return 0

        total = 0
        for i in range(0, len(posts), batch_size):
            batch = posts[i:i + batch_size]
            with self._guard("add_posts"):
                with self.transaction() as pipe:
                    for post in batch:
                        self._queue(pipe, post)
                    pipe.execute()
            total += len(batch)

        logger.debug(f"포스트 {total}개 저장")
        return total

    def get_guids(self, start: int, stop: int) -> List[str]:
        """
        최신순 guid 목록

        stop은 포함하지 않는다. Redis 범위는 양끝을 포함하므로 stop - 1로 변환한다.
        start >= stop이면 Redis를 호출하지 않고 빈 목록 (끝 인덱스 -1은 '마지막까지'를 뜻함)
        """
        if start >= stop:
            return []

        with self._guard("get_posts"):
            keys = self.client.zrevrange(self.registry_key, start, stop - 1)
            if not keys:
                return []
            # 해시에는 해시 전의 guid 원문이 저장되어 있음
            pipe = self.client.pipeline(transaction=False)
            for key in keys:
                pipe.hget(key, "guid")
            guids = pipe.execute()

        return [guid for guid in guids if guid is not None]

    def get_post(self, guid: str) -> Dict[str, Any]:
        """포스트 해시 조회. 없으면 빈 dict"""
        return self._hgetall(str(post_key(guid)), "get_post")

    def exists(self, guid: str) -> bool:
        return self._exists(str(post_key(guid)), "has_post")

    def count(self) -> int:
        """posts 정렬 집합 크기"""
        with self._guard("get_posts_count"):
            return self.client.zcard(self.registry_key)
