"""
pytest 공통 설정
"""
import sys
import os
import uuid
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from argon2 import PasswordHasher, Type
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from core.database import init_db
from models.author import Author

# ===== 원본 데모 데이터 =====
AUTHOR_ID = "08180705-1cdd-421d-b8aa-fe0ec7f76fe6"
AVATAR_URL = "https://img.jakpost.net/c/2020/04/04/2020_04_04_91800_1585973214._large.jpg"

# 테스트용 저비용 argon2id 해셔 (t=1, m=8 → 빠름, 형식은 운영과 동일)
fast_hasher = PasswordHasher(time_cost=1, memory_cost=8, parallelism=1, type=Type.ID)


@pytest.fixture
def db():
    """테스트마다 새 인메모리 DB + 세션"""
    # StaticPool: 인메모리 SQLite는 커넥션이 바뀌면 DB가 사라지므로 1개를 계속 재사용
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    session_factory = sessionmaker(engine, class_=Session, expire_on_commit=False)

    with session_factory() as session:
        yield session

    engine.dispose()


@pytest.fixture
def password_hasher():
    return fast_hasher


@pytest.fixture
def author_hash(password_hasher):
    return password_hasher.hash("password")


@pytest.fixture
def activation_token():
    return uuid.uuid4().hex


@pytest.fixture
def joe(author_hash, activation_token):
    """원본 데모 데이터 그대로의 Author"""
    return Author(
        AUTHOR_ID,
        activation_token,
        AVATAR_URL,
        "Joe@exotic.com",
        author_hash,
        "Joe Exotic",
    )


@pytest.fixture
def make_author(author_hash):
    """유니크한 Author를 만드는 팩토리"""
    def _make(username: str | None = None, email: str | None = None) -> Author:
        unique = uuid.uuid4().hex[:6]
        return Author(
            uuid.uuid4(),
            None,
            None,
            email or f"author_{unique}@exotic.com",
            author_hash,
            username or f"author_{unique}",
        )
    return _make
