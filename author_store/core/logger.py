import logging
import json
from datetime import datetime, timezone
from contextvars import ContextVar

from core.config import settings

# 호출 단위 추적 ID를 저장하는 Context Variable
# (서비스 레이어가 요청마다 set 해주면 저장소 로그에도 같은 ID가 찍힘)
request_id_var: ContextVar[str] = ContextVar("request_id", default="-")


class JsonFormatter(logging.Formatter):
    """
    로그를 JSON 형식으로 출력하는 포매터

    Before: INFO:repository.author:author 저장 완료
    After:  {"timestamp": "...", "level": "INFO", "message": "author 저장 완료", "author_id": "..."}
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "request_id": request_id_var.get("-"),
        }

        # 추가 필드가 있으면 병합 (예: author_id, operation 등)
        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        # 예외 정보가 있으면 원인까지 같이 남김
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False)


def get_logger(name: str) -> logging.Logger:
    """구조화된 JSON 로거 생성"""
    logger = logging.getLogger(name)

    # 중복 핸들러 방지
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)
        logger.setLevel(settings.log_level.upper())

    return logger
