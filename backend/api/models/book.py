"""책 관련 데이터 모델"""
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, Text, ForeignKey, DateTime
from backend.api.database import Base


def generate_id() -> str:
    """새 엔티티 ID (uuid4 문자열)"""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """현재 UTC 시각 (naive, DB 백엔드와 무관하게 같은 형식)"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Book(Base):
    """책 테이블"""
    __tablename__ = "books"

    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(String, nullable=False, index=True)  # 소유자, 생성 후 변경 불가
    title = Column(String, nullable=False)
    author = Column(String, nullable=True)
    source_type = Column(String, nullable=True)  # "manual", "upload", "url"
    source_url = Column(String, nullable=True)
    language = Column(String, nullable=True)  # 예: "en", "ta"
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)


class BookSection(Base):
    """책 섹션(챕터/부록 등) 테이블"""
    __tablename__ = "book_sections"

    id = Column(String(36), primary_key=True, default=generate_id)
    book_id = Column(String(36), ForeignKey("books.id"), nullable=False, index=True)
    section_type = Column(String, nullable=True)  # "chapter", "section", "appendix"
    order_index = Column(Integer, nullable=True)  # 읽기 순서, 중복 허용
    title = Column(String, nullable=True)  # 예: "Chapter 3 - Markets"
    raw_text = Column(Text, nullable=False)  # 요약 대상 원문
    created_at = Column(DateTime, default=utcnow, nullable=False)


class SectionSummary(Base):
    """섹션 요약 테이블"""
    __tablename__ = "section_summaries"

    id = Column(String(36), primary_key=True, default=generate_id)
    section_id = Column(String(36), ForeignKey("book_sections.id"), nullable=False, index=True)
    variant = Column(String, nullable=True)  # "short", "detailed", "bullets", "kids-friendly"
    language = Column(String, nullable=True)  # 요약 언어
    summary_text = Column(Text, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
