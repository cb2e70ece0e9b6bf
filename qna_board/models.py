# models.py
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List


def new_id() -> str:
    """128비트 랜덤 UUID를 문자열로 반환한다."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """생성 시각은 UTC(오프셋 포함)로 기록한다."""
    return datetime.now(timezone.utc)


@dataclass
class Reply:
    text: str
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utc_now)


@dataclass
class Question:
    text: str
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utc_now)

    # Question 1개 : Reply 여러 개 (일대다, 등록 순서 유지)
    replies: List[Reply] = field(default_factory=list)
