"""섹션 관련 API 라우터"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.api.auth import CurrentUser, require_user
from backend.api.database import get_db
from backend.api.services.section_service import SectionService
from backend.api.schemas.common import ERROR_RESPONSES, SuccessResponse
from backend.api.schemas.section import (
    SectionCreate,
    SectionData,
    SectionEnvelope,
    SectionListData,
    SectionListEnvelope,
    SectionResponse,
    SectionUpdate,
)

router = APIRouter(prefix="/api/books/{book_id}/sections", tags=["sections"], responses=ERROR_RESPONSES)


@router.post("", response_model=SectionEnvelope)
def create_section(
    book_id: str,
    payload: SectionCreate,
    user: CurrentUser = Depends(require_user),
    db: Session = Depends(get_db),
):
    """섹션 생성"""
    section = SectionService(db).create_section(user.id, book_id, payload)
    return SectionEnvelope(data=SectionData(section=SectionResponse.model_validate(section)))


@router.get("", response_model=SectionListEnvelope)
def list_sections(
    book_id: str,
    user: CurrentUser = Depends(require_user),
    db: Session = Depends(get_db),
):
    """책의 섹션 리스트 조회"""
    sections, total = SectionService(db).list_sections(user.id, book_id)
    return SectionListEnvelope(
        data=SectionListData(
            items=[SectionResponse.model_validate(section) for section in sections],
            total=total,
        )
    )


@router.patch("/{section_id}", response_model=SectionEnvelope)
def update_section(
    book_id: str,
    section_id: str,
    payload: SectionUpdate,
    user: CurrentUser = Depends(require_user),
    db: Session = Depends(get_db),
):
    """섹션 부분 수정"""
    section = SectionService(db).update_section(user.id, section_id, book_id, payload)
    return SectionEnvelope(data=SectionData(section=SectionResponse.model_validate(section)))


@router.delete("/{section_id}", response_model=SuccessResponse)
def delete_section(
    book_id: str,
    section_id: str,
    user: CurrentUser = Depends(require_user),
    db: Session = Depends(get_db),
):
    """섹션 삭제 (섹션의 요약도 함께 삭제)"""
    SectionService(db).delete_section(user.id, section_id, book_id)
    return SuccessResponse()
