"""
Redis 키 생성

피드는 정규화된 URL, 포스트는 guid 원문을 SHA-256으로 해시해 키를 만든다.
키는 StorageKey 값으로 다루고, Redis에 넘길 때만 "t:<kind>:<base64>" 문자열로 직렬화한다.
"""
import base64
import binascii
import hashlib
import logging
from dataclasses import dataclass
from enum import Enum

from feedstore.core.exceptions import InvalidIdentityError
from feedstore.utils.url_norm import normalize_url

logger = logging.getLogger(__name__)

KEY_PREFIX = "t"


class EntityKind(str, Enum):
    FEED = "feed"
    POST = "post"


@dataclass(frozen=True)
class StorageKey:
    kind: EntityKind
    digest: bytes

    @property
    def namespace(self) -> str:
        return f"{KEY_PREFIX}:{self.kind.value}:"

    def __str__(self) -> str:
        return self.namespace + base64.b64encode(self.digest).decode("ascii")

    @classmethod
    def parse(cls, raw: str) -> "StorageKey":
        """직렬화된 키 문자열 -> StorageKey"""
        for kind in EntityKind:
            prefix = f"{KEY_PREFIX}:{kind.value}:"
            if isinstance(raw, str) and raw.startswith(prefix):
                try:
                    digest = base64.b64decode(raw[len(prefix):], validate=True)
                except (binascii.Error, ValueError) as e:
                    raise InvalidIdentityError(raw, f"잘못된 키 형식입니다: {raw!r}") from e
                if len(digest) == hashlib.sha256().digest_size:
                    return cls(kind, digest)
        raise InvalidIdentityError(raw, f"잘못된 키 형식입니다: {raw!r}")


def derive_key(raw_identity: str, kind: EntityKind) -> StorageKey:
    """식별자(피드 URL 또는 포스트 guid)로부터 저장 키 생성"""
    try:
        processed = normalize_url(raw_identity) if kind is EntityKind.FEED else raw_identity
        digest = hashlib.sha256(processed.encode("utf-8")).digest()
    except (ValueError, TypeError, AttributeError) as e:
        logger.error(f"식별자 처리 실패: {raw_identity!r} - {str(e)}")
        raise InvalidIdentityError(raw_identity) from e
    return StorageKey(kind, digest)


def feed_key(url: str) -> StorageKey:
    return derive_key(url, EntityKind.FEED)


def post_key(guid: str) -> StorageKey:
    return derive_key(guid, EntityKind.POST)
