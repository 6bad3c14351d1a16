from collections.abc import Generator
from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from core.config import settings

# 1. 동기 엔진 생성
#    - echo: 실행되는 SQL을 콘솔에 출력 (settings.database_echo로 제어)
#    - 커넥션 풀 정책은 SQLAlchemy 기본값 그대로 사용
engine = create_engine(
    settings.database_url,
    echo=settings.database_echo,
)


# 2. 세션 팩토리
#    - expire_on_commit=False: commit 후에도 객체 속성에 접근 가능
SessionLocal = sessionmaker(
    engine,
    class_=Session,
    expire_on_commit=False,
)


# 3. Base 클래스: 모든 테이블 모델이 상속받는 부모
#    여기서 선언하면 순환 import 방지 가능
class Base(DeclarativeBase):
    pass


# 4. 세션 스코프 헬퍼
#    세션은 호출자가 열고 닫는다 (엔티티/저장소는 받은 세션만 사용)
def get_db() -> Generator[Session, None, None]:
    with SessionLocal() as session:
        try:
            yield session
        finally:
            session.close()


def init_db(bind=None) -> None:
    """author 테이블 생성 (마이그레이션 도구 없이 create_all 한 번)"""
    # 테이블 모델을 import 해야 Base.metadata에 등록됨
    from models.author_table import AuthorTable  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
