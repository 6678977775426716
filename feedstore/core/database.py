import logging
from typing import Optional

import redis

from feedstore.core.config import REDIS_URL, REDIS_SOCKET_TIMEOUT

logger = logging.getLogger(__name__)


class RedisManager:
    """
    프로세스 단위 Redis 클라이언트 수명주기 관리

    저장소 객체는 이 클래스를 직접 참조하지 않고 생성 시 클라이언트를 주입받는다.
    애플리케이션은 시작 시 get_client(), 종료 시 close()를 호출한다.
    """
    _client: Optional[redis.Redis] = None

    @classmethod
    def create_client(cls, url: Optional[str] = None) -> redis.Redis:
        # decode_responses=True: 모든 응답을 str로 받는다
        return redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
            socket_timeout=REDIS_SOCKET_TIMEOUT,
            socket_connect_timeout=REDIS_SOCKET_TIMEOUT,
        )

    @classmethod
    def get_client(cls) -> redis.Redis:
        if cls._client is None:
            cls._client = cls.create_client()
            logger.info(f"Redis 클라이언트 생성: {REDIS_URL}")
        return cls._client

    @classmethod
    def close(cls):
        if cls._client:
            cls._client.close()
            cls._client = None
            logger.info("Redis 클라이언트 종료")
