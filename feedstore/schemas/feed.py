from pydantic import BaseModel, Field
from typing import Dict


class Feed(BaseModel):
    name: str = Field(..., description="피드 표시 이름")
    url: str = Field(..., description="피드 URL (키 생성에 사용)")

    def to_hash(self) -> Dict[str, str]:
        """Redis 해시 필드로 변환"""
        return {"name": self.name, "url": self.url}
