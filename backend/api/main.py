"""FastAPI 메인 애플리케이션"""
import logging
import sys
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from backend.api.auth import IdentityMiddleware
from backend.api.database import init_db
from backend.api.errors import register_exception_handlers
from backend.api.routers import books, sections, summaries
from backend.config.settings import settings

APP_VERSION = "0.1.0"


# 로깅 설정 (서버 시작 시 초기화)
def setup_logging(level: str = settings.log_level):
    """서버 로깅 설정 (표준 출력)"""
    # 루트 로거 설정
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())

    # 기존 핸들러 제거 (중복 방지)
    root_logger.handlers.clear()

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] %(name)s - %(levelname)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(stdout_handler)

    logger = logging.getLogger(__name__)
    logger.info(f"[INFO] 서버 로깅 설정 완료 ({level.upper()} 레벨)")


# 로깅 설정 초기화
setup_logging()

# 데이터베이스 초기화
init_db()

# FastAPI 앱 생성
app = FastAPI(
    title="Book Summary Store API",
    description="책/섹션/섹션 요약 저장 서비스 (사용자별 소유권 적용)",
    version=APP_VERSION,
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # 개발 환경용, 프로덕션에서는 특정 도메인으로 제한
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 게이트웨이가 넘겨준 사용자 헤더 → request.state.user
app.add_middleware(IdentityMiddleware)

register_exception_handlers(app)

# 라우터 등록
app.include_router(books.router)
app.include_router(sections.router)
app.include_router(summaries.router)


@app.get("/")
async def root():
    """루트 엔드포인트"""
    return {"message": "Book Summary Store API", "version": APP_VERSION}


@app.get("/health")
async def health_check():
    """헬스체크 엔드포인트"""
    return {"status": "ok"}
