import re

# <태그> 와 닫히지 않은 "<..." 꼬리까지 제거
TAG_PATTERN = re.compile(r"<[^>]*>?")
# NUL 및 제어문자 (탭/개행 제외)
CONTROL_PATTERN = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")

LIKE_ESCAPE = "\\"


def sanitize_text(value: str) -> str:
    """
    사용자 입력 문자열 정리

    1. 앞뒤 공백 제거
    2. HTML 태그 제거 (XSS 벡터)
    3. 제어문자 제거
    따옴표는 인코딩하지 않고 그대로 둔다 ("O'Brien" 유지)
    """
    if not value:
        return ""

    sanitized = value.strip()
    sanitized = TAG_PATTERN.sub("", sanitized)
    sanitized = CONTROL_PATTERN.sub("", sanitized)
    return sanitized.strip()


def escape_like(value: str) -> str:
    """LIKE 와일드카드(%, _)와 이스케이프 문자 자체를 리터럴로 취급하도록 이스케이프"""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
