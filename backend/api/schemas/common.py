"""공통 응답 스키마"""
from pydantic import BaseModel


class SuccessResponse(BaseModel):
    """데이터 없는 성공 응답 (삭제 등)"""
    success: bool = True


class ErrorDetail(BaseModel):
    code: str  # UNAUTHORIZED / NOT_FOUND / VALIDATION
    message: str


class ErrorResponse(BaseModel):
    """실패 응답"""
    success: bool = False
    error: ErrorDetail


# 라우터 OpenAPI 문서용 실패 응답 목록
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "VALIDATION"},
    401: {"model": ErrorResponse, "description": "UNAUTHORIZED"},
    404: {"model": ErrorResponse, "description": "NOT_FOUND"},
}
