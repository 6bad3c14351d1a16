import re
import uuid
from pydantic import BaseModel, EmailStr, Field, field_validator

class AuthorCreate(BaseModel):
    """신규 Author 등록 시 받을 데이터 (비밀번호는 평문 → 서비스에서 argon2id 해싱)"""
    username: str = Field(..., min_length=1, max_length=32, description="유저네임")
    email: EmailStr = Field(..., description="이메일")
    password: str = Field(..., min_length=8, description="비밀번호 (8자 이상)")
    avatar_url: str | None = Field(default=None, max_length=255, description="아바타 이미지 URL")

    @field_validator('password')
    @classmethod
    def validate_password(cls, v: str) -> str:
        if not re.search(r"[a-zA-Z]", v):
            raise ValueError('비밀번호에는 최소 하나의 영문자가 포함되어야 합니다.')
        if not re.search(r"\d", v):
            raise ValueError('비밀번호에는 최소 하나의 숫자가 포함되어야 합니다.')
        return v

class AuthorResponse(BaseModel):
    """
    외부로 내보내는 Author 표현 (활성화 토큰, 비밀번호 해시 제외!)

    필드를 명시적으로 나열 → 엔티티에 필드가 추가돼도 자동으로 노출되지 않음
    """
    author_id: uuid.UUID = Field(serialization_alias="authorId")
    author_avatar_url: str = Field(serialization_alias="authorAvatarUrl")
    author_email: str = Field(serialization_alias="authorEmail")
    author_username: str = Field(serialization_alias="authorUsername")

    model_config = {
        "from_attributes": True  # Author 엔티티 객체를 Pydantic 모델로 자동 변환
    }
