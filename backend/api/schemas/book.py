"""책 관련 Pydantic 스키마"""
from pydantic import BaseModel, Field, field_validator, model_validator
from datetime import datetime
from typing import Optional, List


class BookCreate(BaseModel):
    """책 생성 스키마"""
    title: str = Field(..., min_length=1)
    author: Optional[str] = None
    source_type: Optional[str] = None  # "manual", "upload", "url"
    source_url: Optional[str] = None
    language: Optional[str] = None
    notes: Optional[str] = None


class BookUpdate(BaseModel):
    """
    책 부분 수정 스키마

    요청에 포함된 필드만 반영한다 (model_fields_set 기준).
    생략된 필드는 그대로 두고, null로 보낸 선택 필드는 비운다.
    """
    title: Optional[str] = Field(None, min_length=1)
    author: Optional[str] = None
    source_type: Optional[str] = None
    source_url: Optional[str] = None
    language: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_not_null(cls, value):
        if value is None:
            raise ValueError("title must not be null")
        return value

    @model_validator(mode="after")
    def at_least_one_field(self):
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided to update.")
        return self

    def changes(self) -> dict:
        """요청에 실제로 포함된 필드만"""
        return self.model_dump(exclude_unset=True)


class BookResponse(BaseModel):
    """책 응답 스키마"""
    id: str
    user_id: str
    title: str
    author: Optional[str] = None
    source_type: Optional[str] = None
    source_url: Optional[str] = None
    language: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True,
    }


class BookData(BaseModel):
    book: BookResponse


class BookEnvelope(BaseModel):
    """책 단건 응답"""
    success: bool = True
    data: BookData


class BookListData(BaseModel):
    items: List[BookResponse]
    total: int


class BookListEnvelope(BaseModel):
    """책 리스트 응답"""
    success: bool = True
    data: BookListData
