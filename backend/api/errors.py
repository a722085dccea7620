"""API 에러 타입 및 예외 핸들러

모든 실패는 세 가지 코드 중 하나로 응답한다.

- UNAUTHORIZED: 인증된 사용자가 없음 (DB 접근 전에 즉시 반환)
- NOT_FOUND: 대상이 없거나 다른 사용자의 소유 (두 경우를 구분하지 않음)
- VALIDATION: 입력 제약 위반 (DB 접근 전에 검출)

응답 형식: {"success": false, "error": {"code": ..., "message": ...}}
"""
import logging
from enum import Enum
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ErrorCode(str, Enum):
    """실패 코드 Enum"""
    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_FOUND = "NOT_FOUND"
    VALIDATION = "VALIDATION"


HTTP_STATUS_BY_CODE = {
    ErrorCode.UNAUTHORIZED: 401,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.VALIDATION: 400,
}


class ActionError(Exception):
    """요청 처리 실패 (재시도 없음)"""

    code: ErrorCode = ErrorCode.VALIDATION

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def status_code(self) -> int:
        return HTTP_STATUS_BY_CODE[self.code]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": False,
            "error": {"code": self.code.value, "message": self.message},
        }


class UnauthorizedError(ActionError):
    code = ErrorCode.UNAUTHORIZED

    def __init__(self, message: str = "You must be signed in to perform this action."):
        super().__init__(message)


class NotFoundError(ActionError):
    code = ErrorCode.NOT_FOUND


class InvalidInputError(ActionError):
    code = ErrorCode.VALIDATION


def format_validation_errors(errors: List[Dict[str, Any]]) -> str:
    """
    pydantic 에러 리스트를 사람이 읽을 수 있는 메시지로 변환

    Args:
        errors: ValidationError.errors() 또는 RequestValidationError.errors()

    Returns:
        "field: message; ..." 형식의 메시지
    """
    parts = []
    for error in errors:
        message = str(error.get("msg", "Invalid input"))
        # model_validator에서 올린 ValueError는 "Value error, " 접두어가 붙음
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        loc = [str(p) for p in error.get("loc", ()) if p not in ("body", "query", "path")]
        parts.append(f"{'.'.join(loc)}: {message}" if loc else message)
    return "; ".join(parts) or "Invalid input."


def _error_response(error: ActionError) -> JSONResponse:
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


async def action_error_handler(request: Request, exc: ActionError) -> JSONResponse:
    logger.info(f"[INFO] {exc.code.value} {request.method} {request.url.path}: {exc.message}")
    return _error_response(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = format_validation_errors(exc.errors())
    logger.info(f"[INFO] VALIDATION {request.method} {request.url.path}: {message}")
    return _error_response(InvalidInputError(message))


def register_exception_handlers(app: FastAPI) -> None:
    """앱에 에러 핸들러 등록"""
    app.add_exception_handler(ActionError, action_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
