"""커스텀 예외 클래스"""
from typing import Any, Optional


class FeedStoreException(Exception):
    """기본 저장소 예외"""
    pass


class InvalidIdentityError(FeedStoreException):
    """키를 만들 수 없는 식별자 (정규화/해시 실패)"""

    def __init__(self, identity: Any, message: Optional[str] = None):
        self.identity = identity
        super().__init__(message or f"키를 생성할 수 없는 식별자입니다: {identity!r}")


class StorageUnavailableError(FeedStoreException):
    """Redis 연결 실패 또는 트랜잭션 미완료"""

    def __init__(self, operation: str, message: Optional[str] = None):
        self.operation = operation
        super().__init__(message or f"저장소 작업 실패: {operation}")
