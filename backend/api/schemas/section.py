"""섹션 관련 Pydantic 스키마"""
from pydantic import BaseModel, Field, field_validator, model_validator
from datetime import datetime
from typing import Optional, List

DEFAULT_ORDER_INDEX = 1


class SectionCreate(BaseModel):
    """섹션 생성 스키마"""
    raw_text: str = Field(..., min_length=1)  # 요약 대상 원문
    section_type: Optional[str] = None  # "chapter", "section", "appendix"
    order_index: Optional[int] = None  # 생략 시 1
    title: Optional[str] = None


class SectionUpdate(BaseModel):
    """섹션 부분 수정 스키마 (포함된 필드만 반영)"""
    section_type: Optional[str] = None
    order_index: Optional[int] = None
    title: Optional[str] = None
    raw_text: Optional[str] = Field(None, min_length=1)

    @field_validator("raw_text")
    @classmethod
    def raw_text_not_null(cls, value):
        if value is None:
            raise ValueError("raw_text must not be null")
        return value

    @model_validator(mode="after")
    def at_least_one_field(self):
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided to update.")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class SectionResponse(BaseModel):
    """섹션 응답 스키마"""
    id: str
    book_id: str
    section_type: Optional[str] = None
    order_index: Optional[int] = None
    title: Optional[str] = None
    raw_text: str
    created_at: datetime

    model_config = {
        "from_attributes": True,
    }


class SectionData(BaseModel):
    section: SectionResponse


class SectionEnvelope(BaseModel):
    """섹션 단건 응답"""
    success: bool = True
    data: SectionData


class SectionListData(BaseModel):
    items: List[SectionResponse]
    total: int


class SectionListEnvelope(BaseModel):
    """섹션 리스트 응답"""
    success: bool = True
    data: SectionListData
