"""테스트 공통 픽스처 (인메모리 SQLite + TestClient)"""
import os

# 앱 import 전에 설정해야 엔진이 인메모리 DB로 생성됨
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from backend.api.database import Base, SessionLocal, engine
from backend.api.main import app
from backend.config.settings import settings

USER_1 = "user-1"
USER_2 = "user-2"


@pytest.fixture(autouse=True)
def _tables():
    """테스트마다 테이블 재생성"""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    """서비스 테스트용 DB 세션"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    """API 테스트용 클라이언트"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers():
    """사용자 ID 헤더 생성 함수"""

    def _headers(user_id: str = USER_1) -> dict:
        return {settings.user_id_header: user_id}

    return _headers
