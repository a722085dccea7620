"""요청 사용자 식별

인증 자체는 앞단 게이트웨이가 담당한다. 게이트웨이가 검증한 사용자 ID를
신뢰 헤더(settings.user_id_header)로 넘겨주면 IdentityMiddleware가
request.state.user에 올려두고, 각 라우터는 require_user()로 꺼내 쓴다.
서비스 계층은 request를 보지 않고 user_id를 인자로만 받는다.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from backend.api.errors import UnauthorizedError
from backend.config.settings import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurrentUser:
    """인증된 사용자"""
    id: str


class IdentityMiddleware(BaseHTTPMiddleware):
    """신뢰 헤더에서 사용자 ID를 읽어 request.state.user에 저장"""

    def __init__(self, app, header_name: Optional[str] = None):
        super().__init__(app)
        self.header_name = header_name or settings.user_id_header

    async def dispatch(self, request: Request, call_next):
        user_id = (request.headers.get(self.header_name) or "").strip()
        request.state.user = CurrentUser(id=user_id) if user_id else None
        return await call_next(request)


def require_user(request: Request) -> CurrentUser:
    """
    현재 요청의 인증된 사용자 반환 (FastAPI 의존성)

    Raises:
        UnauthorizedError: 인증된 사용자가 없는 경우
    """
    user = getattr(request.state, "user", None)
    if user is None:
        logger.info(f"[INFO] 인증 정보 없음: {request.method} {request.url.path}")
        raise UnauthorizedError()
    return user
