import uuid

from core.exceptions import InvalidIdentifier


def parse_author_id(value: uuid.UUID | str | bytes) -> uuid.UUID:
    """
    식별자를 uuid.UUID로 변환

    허용하는 입력:
    - uuid.UUID: 그대로 반환
    - str: "08180705-1cdd-421d-b8aa-fe0ec7f76fe6" 같은 표준 문자열 (하이픈 없는 hex도 허용)
    - bytes: DB에 저장된 16바이트 원시값

    Author 외의 다른 엔티티도 같은 함수를 쓰면 됨 (상속 X, 공용 유틸)
    """
    if isinstance(value, uuid.UUID):
        return value

    if isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
        if len(raw) != 16:
            raise InvalidIdentifier(f"식별자 바이트 길이가 16이 아닙니다: {len(raw)}")
        return uuid.UUID(bytes=raw)

    if isinstance(value, str):
        try:
            return uuid.UUID(value.strip())
        except ValueError as exc:
            raise InvalidIdentifier(f"UUID 형식이 아닌 식별자입니다: {value!r}") from exc

    raise InvalidIdentifier(f"지원하지 않는 식별자 타입입니다: {type(value).__name__}")
