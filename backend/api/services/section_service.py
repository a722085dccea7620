"""섹션 서비스"""
import logging
from typing import List, Tuple
from sqlalchemy.orm import Session
from backend.api.models.book import BookSection, SectionSummary, generate_id, utcnow
from backend.api.schemas.section import DEFAULT_ORDER_INDEX, SectionCreate, SectionUpdate
from backend.api.services.ownership_service import OwnershipService

logger = logging.getLogger(__name__)


class SectionService:
    """섹션 서비스 클래스"""

    def __init__(self, db: Session):
        self.db = db
        self.ownership = OwnershipService(db)

    def create_section(self, user_id: str, book_id: str, payload: SectionCreate) -> BookSection:
        """
        책에 섹션 추가

        Args:
            user_id: 요청 사용자 ID
            book_id: 책 ID
            payload: 생성 입력 (raw_text 필수, order_index 생략 시 1)

        Returns:
            생성된 BookSection 객체
        """
        self.ownership.verify_book_ownership(book_id, user_id)

        order_index = payload.order_index
        if order_index is None:
            order_index = DEFAULT_ORDER_INDEX

        section = BookSection(
            id=generate_id(),
            book_id=book_id,
            section_type=payload.section_type,
            order_index=order_index,
            title=payload.title,
            raw_text=payload.raw_text,
            created_at=utcnow(),
        )
        self.db.add(section)
        self.db.commit()
        self.db.refresh(section)

        logger.info(f"[INFO] Section created: id={section.id}, book_id={book_id}, order_index={order_index}")
        return section

    def update_section(
        self, user_id: str, section_id: str, book_id: str, payload: SectionUpdate
    ) -> BookSection:
        """섹션 부분 수정 (섹션은 수정 시각을 기록하지 않음)"""
        section = self.ownership.verify_section_ownership(section_id, book_id, user_id)

        changes = payload.changes()
        for field, value in changes.items():
            setattr(section, field, value)

        self.db.commit()
        self.db.refresh(section)

        logger.info(f"[INFO] Section updated: id={section.id}, fields={sorted(changes)}")
        return section

    def delete_section(self, user_id: str, section_id: str, book_id: str) -> None:
        """
        섹션 삭제 (해당 섹션의 요약도 함께 삭제)

        요약을 먼저 지운 뒤 섹션을 지운다 (외래 키 순서). 두 삭제는 하나의 커밋으로 처리한다.
        요약이 없어도 실패하지 않는다.
        """
        self.ownership.verify_section_ownership(section_id, book_id, user_id)

        deleted_summaries = (
            self.db.query(SectionSummary)
            .filter(SectionSummary.section_id == section_id)
            .delete(synchronize_session=False)
        )
        self.db.query(BookSection).filter(BookSection.id == section_id).delete(
            synchronize_session=False
        )
        self.db.commit()

        logger.info(
            f"[INFO] Section deleted: id={section_id}, book_id={book_id}, summaries_deleted={deleted_summaries}"
        )

    def list_sections(self, user_id: str, book_id: str) -> Tuple[List[BookSection], int]:
        """책의 섹션 전체 조회 (order_index, created_at 순)"""
        self.ownership.verify_book_ownership(book_id, user_id)

        sections = (
            self.db.query(BookSection)
            .filter(BookSection.book_id == book_id)
            .order_by(BookSection.order_index, BookSection.created_at)
            .all()
        )
        return sections, len(sections)
