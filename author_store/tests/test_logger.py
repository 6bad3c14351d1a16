"""
JSON 로그 포매터 테스트
"""
import json
import logging

from core.logger import JsonFormatter, get_logger, request_id_var


def test_JSON_로그_형식():
    record = logging.LogRecord("repository.author", logging.INFO, __file__, 1, "author 저장 완료", None, None)
    record.extra_data = {"operation": "insert", "author_id": "abc"}

    token = request_id_var.set("req-1234")
    try:
        data = json.loads(JsonFormatter().format(record))
    finally:
        request_id_var.reset(token)

    assert data["level"] == "INFO"
    assert data["message"] == "author 저장 완료"
    assert data["logger"] == "repository.author"
    assert data["request_id"] == "req-1234"
    assert data["operation"] == "insert"
    assert data["author_id"] == "abc"


def test_로거_핸들러_중복_방지():
    logger = get_logger("test.logger")
    get_logger("test.logger")
    assert len(logger.handlers) == 1
