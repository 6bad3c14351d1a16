"""
Author 도메인 예외 계층

    AuthorError
    ├── InvalidFormat       값이 형식/내용 규칙을 어김 (빈 값, 잘못된 이메일, argon2id 아님 ...)
    ├── OutOfRange          값이 길이 제한을 넘음
    ├── InvalidIdentifier   UUID로 해석할 수 없는 식별자
    └── StorageFailure      DB 오류 또는 DB에서 읽은 행이 깨져 있음

검증 예외 3종은 ValueError도 상속 → 호출자가 ValueError 하나로 묶어서 잡을 수 있음
"""


class AuthorError(Exception):
    """Author 관련 모든 예외의 부모"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidFormat(AuthorError, ValueError):
    pass


class OutOfRange(AuthorError, ValueError):
    pass


class InvalidIdentifier(AuthorError, ValueError):
    pass


class StorageFailure(AuthorError):
    """DB 레이어에서 발생한 실패: 원인 예외는 __cause__로 연결"""
