"""섹션 요약 관련 API 라우터"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.api.auth import CurrentUser, require_user
from backend.api.database import get_db
from backend.api.services.summary_service import SummaryService
from backend.api.schemas.common import ERROR_RESPONSES
from backend.api.schemas.summary import (
    SummaryCreate,
    SummaryData,
    SummaryEnvelope,
    SummaryListData,
    SummaryListEnvelope,
    SummaryResponse,
)

router = APIRouter(
    prefix="/api/books/{book_id}/sections/{section_id}/summaries",
    tags=["summaries"],
    responses=ERROR_RESPONSES,
)


@router.post("", response_model=SummaryEnvelope)
def create_summary(
    book_id: str,
    section_id: str,
    payload: SummaryCreate,
    user: CurrentUser = Depends(require_user),
    db: Session = Depends(get_db),
):
    """
    요약 저장

    요약 텍스트는 외부 생성기가 만든 결과를 그대로 저장합니다.
    """
    summary = SummaryService(db).create_summary(user.id, section_id, book_id, payload)
    return SummaryEnvelope(data=SummaryData(summary=SummaryResponse.model_validate(summary)))


@router.get("", response_model=SummaryListEnvelope)
def list_summaries(
    book_id: str,
    section_id: str,
    user: CurrentUser = Depends(require_user),
    db: Session = Depends(get_db),
):
    """섹션의 요약 리스트 조회"""
    summaries, total = SummaryService(db).list_summaries(user.id, section_id, book_id)
    return SummaryListEnvelope(
        data=SummaryListData(
            items=[SummaryResponse.model_validate(summary) for summary in summaries],
            total=total,
        )
    )
