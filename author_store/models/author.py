import re
import uuid
from typing import Any

from argon2 import Type, extract_parameters
from argon2.exceptions import InvalidHashError
from email_validator import EmailNotValidError, validate_email

from core.exceptions import InvalidFormat, OutOfRange
from core.identifiers import parse_author_id
from core.sanitize import sanitize_text
from schemas.author import AuthorResponse

# 컬럼 길이와 동일하게 유지할 것 (models/author_table.py)
ACTIVATION_TOKEN_LENGTH = 32
AVATAR_URL_MAX_LENGTH = 255
EMAIL_MAX_LENGTH = 128
HASH_MAX_LENGTH = 97
USERNAME_MAX_LENGTH = 32

HEX_PATTERN = re.compile(r"[0-9a-f]+")


class Author:
    """
    Author 도메인 엔티티 (계정 1건 = author 테이블 1행)

    - 생성자와 모든 setter가 같은 검증을 통과해야 값이 들어감
      → 살아있는 인스턴스는 항상 6개 필드가 전부 유효한 상태
    - 검증 순서: id → 활성화 토큰 → 아바타 URL → 이메일 → 해시 → 유저네임
      첫 번째 실패에서 바로 예외 (부분 생성된 객체는 밖으로 나가지 않음)
    - DB I/O는 하지 않음 → repository/author_repo.py 담당
    """

    def __init__(
        self,
        author_id: uuid.UUID | str | bytes,
        author_activation_token: str | None,
        author_avatar_url: str | None,
        author_email: str,
        author_hash: str,
        author_username: str,
    ):
        self.author_id = author_id
        self.author_activation_token = author_activation_token
        self.author_avatar_url = author_avatar_url
        self.author_email = author_email
        self.author_hash = author_hash
        self.author_username = author_username

    # ===== author_id =====

    @property
    def author_id(self) -> uuid.UUID:
        return self._author_id

    @author_id.setter
    def author_id(self, new_author_id: uuid.UUID | str | bytes) -> None:
        self._author_id = parse_author_id(new_author_id)

    # ===== author_activation_token =====

    @property
    def author_activation_token(self) -> str | None:
        return self._author_activation_token

    @author_activation_token.setter
    def author_activation_token(self, new_token: str | None) -> None:
        # None = 이미 활성화됨 / 토큰 미발급
        if new_token is None:
            self._author_activation_token = None
            return

        new_token = new_token.strip().lower()
        if not HEX_PATTERN.fullmatch(new_token):
            raise InvalidFormat("활성화 토큰은 16진수 문자열이어야 합니다")

        if len(new_token) != ACTIVATION_TOKEN_LENGTH:
            raise OutOfRange(f"활성화 토큰은 정확히 {ACTIVATION_TOKEN_LENGTH}자여야 합니다")

        self._author_activation_token = new_token

    # ===== author_avatar_url =====

    @property
    def author_avatar_url(self) -> str:
        return self._author_avatar_url

    @author_avatar_url.setter
    def author_avatar_url(self, new_avatar_url: str | None) -> None:
        # 아바타는 선택 항목: 없으면 빈 문자열로 저장
        new_avatar_url = sanitize_text(new_avatar_url or "")

        if len(new_avatar_url) > AVATAR_URL_MAX_LENGTH:
            raise OutOfRange(f"아바타 URL은 {AVATAR_URL_MAX_LENGTH}자 이하여야 합니다")

        self._author_avatar_url = new_avatar_url

    # ===== author_email =====

    @property
    def author_email(self) -> str:
        return self._author_email

    @author_email.setter
    def author_email(self, new_email: str) -> None:
        new_email = new_email.strip()
        # 길이 제한 먼저 (email-validator는 254자 초과를 형식 오류로 처리)
        if len(new_email) > EMAIL_MAX_LENGTH:
            raise OutOfRange(f"이메일은 {EMAIL_MAX_LENGTH}자 이하여야 합니다")

        try:
            # 문법 검사만 (DNS 조회 X: 엔티티 생성에 네트워크 I/O 금지)
            validate_email(new_email, check_deliverability=False)
        except EmailNotValidError as exc:
            raise InvalidFormat(f"이메일 형식이 올바르지 않습니다: {exc}") from exc

        self._author_email = new_email

    # ===== author_hash =====

    @property
    def author_hash(self) -> str:
        return self._author_hash

    @author_hash.setter
    def author_hash(self, new_hash: str) -> None:
        new_hash = new_hash.strip()
        if not new_hash:
            raise InvalidFormat("비밀번호 해시가 비어 있습니다")

        # "$argon2id$v=19$m=...,t=...,p=...$salt$hash" 형식에서 알고리즘 태그 확인
        try:
            parameters = extract_parameters(new_hash)
        except InvalidHashError as exc:
            raise InvalidFormat("argon2 해시 형식이 아닙니다") from exc

        if parameters.type is not Type.ID:
            raise InvalidFormat("argon2id 해시만 허용됩니다")

        if len(new_hash) > HASH_MAX_LENGTH:
            raise OutOfRange(f"비밀번호 해시는 {HASH_MAX_LENGTH}자 이하여야 합니다")

        self._author_hash = new_hash

    # ===== author_username =====

    @property
    def author_username(self) -> str:
        return self._author_username

    @author_username.setter
    def author_username(self, new_username: str) -> None:
        new_username = sanitize_text(new_username)
        if not new_username:
            raise InvalidFormat("유저네임이 비어 있거나 허용되지 않는 문자만 포함합니다")

        if len(new_username) > USERNAME_MAX_LENGTH:
            raise OutOfRange(f"유저네임은 {USERNAME_MAX_LENGTH}자 이하여야 합니다")

        self._author_username = new_username

    # ===== DB 행 <-> 엔티티 =====

    @classmethod
    def from_row(cls, row: Any) -> "Author":
        """DB에서 읽은 행(AuthorTable)을 엔티티로: 새로 만들 때와 같은 검증을 통과해야 함"""
        return cls(
            row.author_id,
            row.author_activation_token,
            row.author_avatar_url,
            row.author_email,
            row.author_hash,
            row.author_username,
        )

    def to_row(self) -> dict:
        """INSERT/UPDATE 바인딩용 값 (id는 16바이트 원시값)"""
        return {
            "author_id": self._author_id.bytes,
            "author_activation_token": self._author_activation_token,
            "author_avatar_url": self._author_avatar_url,
            "author_email": self._author_email,
            "author_hash": self._author_hash,
            "author_username": self._author_username,
        }

    def to_json(self) -> dict:
        """외부 노출용 표현: 토큰/해시 제외"""
        return AuthorResponse.model_validate(self).model_dump(mode="json", by_alias=True)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Author):
            return NotImplemented
        return self.to_row() == other.to_row()

    def __hash__(self) -> int:
        # 같은 Author면 id도 같음 → id만으로 해시
        return hash(self._author_id)

    def __repr__(self) -> str:
        # 해시/토큰은 로그에 새지 않도록 제외
        return (
            f"Author(author_id={str(self._author_id)!r}, "
            f"author_username={self._author_username!r}, "
            f"author_email={self._author_email!r})"
        )
