"""섹션 요약 관련 Pydantic 스키마"""
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional, List


class SummaryCreate(BaseModel):
    """요약 생성 스키마 (요약 텍스트는 외부 생성기가 만든 것을 그대로 저장)"""
    summary_text: str = Field(..., min_length=1)
    variant: Optional[str] = None  # "short", "detailed", "bullets", "kids-friendly"
    language: Optional[str] = None


class SummaryResponse(BaseModel):
    """요약 응답 스키마"""
    id: str
    section_id: str
    variant: Optional[str] = None
    language: Optional[str] = None
    summary_text: str
    created_at: datetime

    model_config = {
        "from_attributes": True,
    }


class SummaryData(BaseModel):
    summary: SummaryResponse


class SummaryEnvelope(BaseModel):
    """요약 단건 응답"""
    success: bool = True
    data: SummaryData


class SummaryListData(BaseModel):
    items: List[SummaryResponse]
    total: int


class SummaryListEnvelope(BaseModel):
    """요약 리스트 응답"""
    success: bool = True
    data: SummaryListData
