"""애플리케이션 설정"""

from pydantic_settings import BaseSettings
from pathlib import Path

DATA_DIR = Path(__file__).parent.parent.parent / "data"


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 데이터베이스
    database_url: str = f"sqlite:///{DATA_DIR / 'books.db'}"
    sql_echo: bool = False

    # 인증 게이트웨이가 넣어주는 사용자 ID 헤더
    user_id_header: str = "X-User-Id"

    # 로깅
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # .env에 정의되지 않은 필드는 무시
    }


# 전역 설정 인스턴스
settings = Settings()
