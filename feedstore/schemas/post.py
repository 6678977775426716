from pydantic import BaseModel, Field
from typing import Optional, Dict
from datetime import datetime, timezone


class Post(BaseModel):
    guid: str = Field(..., description="포스트 고유 식별자 (키 생성에 사용)")
    published: datetime = Field(..., description="발행 시각 (정렬 점수)")
    updated: Optional[datetime] = None
    author: Optional[str] = None
    title: Optional[str] = None
    html: Optional[str] = None
    text: Optional[str] = None
    url: Optional[str] = None
    site: Optional[str] = None

    @property
    def score(self) -> int:
        """posts 정렬 집합 점수: published epoch 밀리초 (tz 없는 값은 UTC로 간주)"""
        published = self.published
        if published.tzinfo is None:
            published = published.replace(tzinfo=timezone.utc)
        return int(published.timestamp() * 1000)

    def to_hash(self) -> Dict[str, str]:
        """Redis 해시 필드로 변환. None 필드는 저장하지 않음"""
        fields = {}
        for name, value in self.model_dump(exclude_none=True).items():
            fields[name] = value.isoformat() if isinstance(value, datetime) else str(value)
        return fields
