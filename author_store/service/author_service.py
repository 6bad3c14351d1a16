import secrets
import uuid
from argon2 import PasswordHasher, Type
from argon2.exceptions import InvalidHashError, VerificationError
from sqlalchemy.orm import Session

from core.config import settings
from models.author import Author
from repository import author_repo
from schemas.author import AuthorCreate

# 해시 파라미터는 settings 기준 (기본: t=9, m=65536, p=1 → 97자 해시)
password_hasher = PasswordHasher(
    time_cost=settings.argon2_time_cost,
    memory_cost=settings.argon2_memory_cost,
    parallelism=settings.argon2_parallelism,
    type=Type.ID,
)


def hash_password(password: str) -> str:
    """비밀번호 평문을 argon2id로 해싱"""
    return password_hasher.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """입력받은 평문과 DB의 해시가 일치하는지 검증"""
    try:
        return password_hasher.verify(hashed_password, plain_password)
    except (VerificationError, InvalidHashError):
        return False


def generate_activation_token() -> str:
    """활성화 토큰: 16바이트 난수 → 32자 hex"""
    return secrets.token_hex(16)


def register_author(db: Session, author_in: AuthorCreate) -> Author:
    """
    신규 Author 등록

    1. 새 UUID 발급
    2. 활성화 토큰 생성
    3. 비밀번호 argon2id 해싱 (평문은 어디에도 저장하지 않음)
    4. 엔티티 생성 (검증) 후 DB 저장
    """
    author = Author(
        uuid.uuid4(),
        generate_activation_token(),
        author_in.avatar_url,
        str(author_in.email),
        hash_password(author_in.password),
        author_in.username,
    )
    return author_repo.insert(db, author)


def serialize(author: Author) -> dict:
    """외부 노출용 dict (authorId, authorAvatarUrl, authorEmail, authorUsername)"""
    return author.to_json()
