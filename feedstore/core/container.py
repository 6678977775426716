"""
의존성 컨테이너 (Dependency Container)

저장소 객체 생성 로직을 한 곳에 모은다.
클라이언트를 넘기지 않으면 RedisManager의 프로세스 클라이언트를 사용한다.
"""
from typing import Optional

import redis

from feedstore.core.database import RedisManager
from feedstore.repositories import FeedRepository, PostRepository
from feedstore.storage import Storage


class Container:
    """의존성 컨테이너 - 저장소 인스턴스 생성"""

    @staticmethod
    def get_client(client: Optional[redis.Redis] = None) -> redis.Redis:
        return client if client is not None else RedisManager.get_client()

    @staticmethod
    def get_feed_repository(client: Optional[redis.Redis] = None) -> FeedRepository:
        """FeedRepository 인스턴스 반환"""
        return FeedRepository(Container.get_client(client))

    @staticmethod
    def get_post_repository(client: Optional[redis.Redis] = None) -> PostRepository:
        """PostRepository 인스턴스 반환"""
        return PostRepository(Container.get_client(client))

    @staticmethod
    def get_storage(client: Optional[redis.Redis] = None) -> Storage:
        """Storage 인스턴스 반환"""
        return Storage(Container.get_client(client))
