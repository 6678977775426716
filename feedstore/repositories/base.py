from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Dict, Iterator

import redis
from redis.exceptions import RedisError

from feedstore.core.exceptions import StorageUnavailableError


class BaseRepository(ABC):
    def __init__(self, client: redis.Redis, registry_key: str):
        self.client = client
        self.registry_key = registry_key

    @contextmanager
    def _guard(self, operation: str) -> Iterator[None]:
        """Redis 오류를 StorageUnavailableError로 변환"""
        try:
            yield
        except RedisError as e:
            raise StorageUnavailableError(operation, f"저장소 작업 실패: {operation} - {str(e)}") from e

    def transaction(self) -> "redis.client.Pipeline":
        """MULTI/EXEC로 묶이는 파이프라인"""
        return self.client.pipeline(transaction=True)

    def _hgetall(self, key: str, operation: str) -> Dict[str, Any]:
        with self._guard(operation):
            return self.client.hgetall(key)

    def _exists(self, key: str, operation: str) -> bool:
        with self._guard(operation):
            return self.client.exists(key) > 0

    def ping(self) -> bool:
        """Redis 연결 확인"""
        with self._guard("ping"):
            return bool(self.client.ping())

    @abstractmethod
    def count(self) -> int:
        """레지스트리에 등록된 엔티티 수"""
        pass
