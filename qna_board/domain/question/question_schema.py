# domain/question/question_schema.py
from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ReplySchema(BaseModel):
    # 응답 JSON 필드명은 camelCase(createdAt)로 내보내고,
    # 내부 dataclass 의 created_at 이름으로도 값을 채울 수 있게 한다.
    model_config = ConfigDict(populate_by_name=True)

    id: str
    text: str
    created_at: datetime = Field(alias='createdAt')


class QuestionSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    text: str
    created_at: datetime = Field(alias='createdAt')
    replies: List[ReplySchema] = []


class QuestionCreate(BaseModel):
    """
    질문 등록을 위한 요청 스키마입니다.

    - text: 질문 내용 (빈 문자열도 허용)
    """
    text: str


class ReplyCreate(BaseModel):
    """
    답글 등록을 위한 요청 스키마입니다.

    - text: 답글 내용 (빈 문자열도 허용)
    """
    text: str
