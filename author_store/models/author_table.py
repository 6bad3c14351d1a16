from sqlalchemy import BINARY, CHAR, String
from sqlalchemy.orm import Mapped, mapped_column
from core.database import Base


class AuthorTable(Base):
    """
    author 테이블 (저장 전용 모델)

    - 도메인 규칙(검증)은 models.author.Author 가 담당, 여기는 컬럼 정의만
    - 컬럼명은 camelCase(authorId ...), key는 파이썬 속성명과 동일하게 맞춰서
      insert/update 바인딩 시 Author.to_row() dict를 그대로 사용
    - authorId: UUID를 문자열(36자)이 아닌 16바이트 원시값으로 저장
    """
    __tablename__ = "author"

    # PK: UUID 16바이트
    author_id: Mapped[bytes] = mapped_column(
        "authorId",
        BINARY(16),
        key="author_id",
        primary_key=True,
    )

    # 이미 활성화된 계정이면 NULL
    author_activation_token: Mapped[str | None] = mapped_column(
        "authorActivationToken",
        CHAR(32),
        key="author_activation_token",
        nullable=True,
    )

    author_avatar_url: Mapped[str | None] = mapped_column(
        "authorAvatarUrl",
        String(255),
        key="author_avatar_url",
        nullable=True,
    )

    author_email: Mapped[str] = mapped_column(
        "authorEmail",
        String(128),
        key="author_email",
        unique=True,
        nullable=False,
    )

    # argon2id 해시 (기본 파라미터 기준 정확히 97자)
    author_hash: Mapped[str] = mapped_column(
        "authorHash",
        CHAR(97),
        key="author_hash",
        nullable=False,
    )

    author_username: Mapped[str] = mapped_column(
        "authorUsername",
        String(32),
        key="author_username",
        unique=True,
        index=True,          # 유저네임 검색이 빈번 → 인덱스
        nullable=False,
    )
