"""
author 테이블 접근 함수 모음

- 세션은 호출자가 열고 닫음 (여기서는 받은 세션으로 실행 + commit만)
- 모든 쿼리는 SQLAlchemy 구문 + 바인딩 파라미터 → 문자열 이어붙인 SQL 없음
- DB 오류(SQLAlchemyError)는 rollback 후 StorageFailure 하나로 통일
- DB에서 읽은 행이 검증을 통과하지 못해도 StorageFailure (호출자 잘못이 아니라 데이터가 깨진 것)
"""
import uuid
from sqlalchemy import delete as delete_stmt, insert as insert_stmt, select, update as update_stmt
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.exceptions import AuthorError, StorageFailure
from core.identifiers import parse_author_id
from core.logger import get_logger
from core.sanitize import LIKE_ESCAPE, escape_like, sanitize_text
from models.author import Author
from models.author_table import AuthorTable

logger = get_logger("repository.author")


def _storage_failure(db: Session, exc: Exception, operation: str, author_id: uuid.UUID | None = None) -> StorageFailure:
    """rollback + 에러 로그 후 StorageFailure 생성 (raise ... from exc 로 원인 연결)"""
    db.rollback()
    logger.error(
        f"author {operation} 실패: {exc.__class__.__name__}",
        extra={"extra_data": {
            "operation": operation,
            "author_id": str(author_id) if author_id else None,
        }},
    )
    # SQLAlchemy 에러 문자열에는 바인딩 값(해시, 토큰)이 포함됨 → 메시지에는 예외 종류만
    return StorageFailure(f"author {operation} 실패: {exc.__class__.__name__}")


def _hydrate(row: AuthorTable) -> Author:
    """DB 행 → Author (검증 실패 시 StorageFailure)"""
    try:
        return Author.from_row(row)
    except AuthorError as exc:
        logger.error(
            "author 행 변환 실패: 저장된 데이터가 검증 규칙을 어김",
            extra={"extra_data": {"reason": exc.message}},
        )
        raise StorageFailure(f"저장된 author 행이 올바르지 않습니다: {exc.message}") from exc


def insert(db: Session, author: Author) -> Author:
    """author 1건 저장 (6개 컬럼 전부, id는 16바이트로)"""
    try:
        db.execute(insert_stmt(AuthorTable).values(**author.to_row()))
        db.commit()
    except SQLAlchemyError as exc:
        raise _storage_failure(db, exc, "insert", author.author_id) from exc

    logger.info(
        "author 저장 완료",
        extra={"extra_data": {"operation": "insert", "author_id": str(author.author_id)}},
    )
    return author


def update(db: Session, author: Author) -> Author:
    """id가 일치하는 행의 나머지 5개 컬럼을 덮어씀 (id 자체는 절대 변경 X)"""
    values = author.to_row()
    author_id_bytes = values.pop("author_id")

    try:
        result = db.execute(
            update_stmt(AuthorTable)
            .where(AuthorTable.author_id == author_id_bytes)
            .values(**values)
        )
        db.commit()
    except SQLAlchemyError as exc:
        raise _storage_failure(db, exc, "update", author.author_id) from exc

    logger.info(
        "author 수정 완료",
        extra={"extra_data": {
            "operation": "update",
            "author_id": str(author.author_id),
            "rowcount": result.rowcount,
        }},
    )
    return author


def delete(db: Session, author: Author) -> None:
    """id가 일치하는 행 삭제"""
    try:
        db.execute(
            delete_stmt(AuthorTable).where(AuthorTable.author_id == author.author_id.bytes)
        )
        db.commit()
    except SQLAlchemyError as exc:
        raise _storage_failure(db, exc, "delete", author.author_id) from exc

    logger.info(
        "author 삭제 완료",
        extra={"extra_data": {"operation": "delete", "author_id": str(author.author_id)}},
    )


def find_by_id(db: Session, author_id: uuid.UUID | str) -> Author | None:
    """id로 author 조회: 없으면 None (예외 아님)"""
    # 잘못된 id는 호출자 문제 → InvalidIdentifier 그대로 전파
    author_id = parse_author_id(author_id)

    try:
        result = db.execute(select(AuthorTable).where(AuthorTable.author_id == author_id.bytes))
        row = result.scalars().first()
    except SQLAlchemyError as exc:
        raise _storage_failure(db, exc, "find_by_id", author_id) from exc

    if row is None:
        return None
    return _hydrate(row)


def find_by_username(db: Session, author_username: str) -> list[Author]:
    """
    유저네임 부분 일치 검색 (LIKE '%입력%')

    - 입력의 %, _ 는 이스케이프 → 와일드카드가 아닌 문자 그대로 검색
    - 대소문자 구분 여부는 DB 엔진/콜레이션을 따름
    - 결과가 없으면 빈 리스트
    """
    author_username = sanitize_text(author_username)
    if not author_username:
        raise StorageFailure("검색할 유저네임이 비어 있거나 허용되지 않는 문자만 포함합니다")

    pattern = f"%{escape_like(author_username)}%"

    try:
        result = db.execute(
            select(AuthorTable)
            .where(AuthorTable.author_username.like(pattern, escape=LIKE_ESCAPE))
            .order_by(AuthorTable.author_username, AuthorTable.author_id)
        )
        rows = list(result.scalars().all())
    except SQLAlchemyError as exc:
        raise _storage_failure(db, exc, "find_by_username") from exc

    return [_hydrate(row) for row in rows]
