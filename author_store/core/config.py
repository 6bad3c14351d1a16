from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path

class Settings(BaseSettings):
    # Database (기본값은 로컬 SQLite 파일: 운영에서는 .env로 MySQL/Postgres 지정)
    database_url: str = "sqlite:///./author.db"
    database_echo: bool = False   # True면 실행되는 SQL을 콘솔에 출력 (개발용)

    # 로깅
    log_level: str = "INFO"

    # Argon2id 해싱 파라미터
    # m=65536, p=1 조합이면 해시 문자열 길이가 정확히 97자 → authorHash 컬럼에 딱 맞음
    argon2_time_cost: int = 9
    argon2_memory_cost: int = 65536
    argon2_parallelism: int = 1

    # Pydantic v2 방식: Config 내부 클래스 대신 model_config 사용
    model_config = SettingsConfigDict(
        # config.py -> core -> author_store -> 루트 아래의 .env 찾기
        env_file=Path(__file__).parent.parent.parent / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,     # 환경변수 대소문자 무시
        extra="ignore",
    )


# 싱글톤 인스턴스: 어디서든 import해서 사용
settings = Settings()
