"""SQLAlchemy 데이터베이스 설정"""
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from pathlib import Path

from backend.config.settings import settings


def _engine_options(database_url: str) -> dict:
    """URL 종류에 맞는 create_engine 옵션"""
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return {}

    options = {"connect_args": {"check_same_thread": False}}  # SQLite만 필요
    if url.database in (None, "", ":memory:"):
        # 인메모리 DB는 커넥션 하나를 공유해야 같은 테이블을 본다
        options["poolclass"] = StaticPool
    else:
        # 데이터베이스 디렉토리
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    return options


# SQLAlchemy 엔진 생성
engine = create_engine(
    settings.database_url,
    echo=settings.sql_echo,
    **_engine_options(settings.database_url),
)

# 세션 팩토리
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base 클래스
Base = declarative_base()


def get_db():
    """데이터베이스 세션 의존성"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """데이터베이스 초기화 (테이블 생성)"""
    # 모델 import로 테이블 정의 로드
    from backend.api.models.book import Book, BookSection, SectionSummary

    Base.metadata.create_all(bind=engine)
