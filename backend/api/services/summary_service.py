"""섹션 요약 서비스

요약은 생성 후 변경하지 않는다. 같은 variant/language 조합이 여러 개 있어도 된다.
"""
import logging
from typing import List, Tuple
from sqlalchemy.orm import Session
from backend.api.models.book import SectionSummary, generate_id, utcnow
from backend.api.schemas.summary import SummaryCreate
from backend.api.services.ownership_service import OwnershipService

logger = logging.getLogger(__name__)


class SummaryService:
    """요약 서비스 클래스"""

    def __init__(self, db: Session):
        self.db = db
        self.ownership = OwnershipService(db)

    def create_summary(
        self, user_id: str, section_id: str, book_id: str, payload: SummaryCreate
    ) -> SectionSummary:
        """
        섹션에 요약 저장

        Raises:
            NotFoundError: 책 또는 섹션을 찾을 수 없는 경우
        """
        self.ownership.verify_section_ownership(section_id, book_id, user_id)

        summary = SectionSummary(
            id=generate_id(),
            section_id=section_id,
            variant=payload.variant,
            language=payload.language,
            summary_text=payload.summary_text,
            created_at=utcnow(),
        )
        self.db.add(summary)
        self.db.commit()
        self.db.refresh(summary)

        logger.info(
            f"[INFO] Summary created: id={summary.id}, section_id={section_id}, "
            f"variant={summary.variant}, language={summary.language}"
        )
        return summary

    def list_summaries(
        self, user_id: str, section_id: str, book_id: str
    ) -> Tuple[List[SectionSummary], int]:
        """섹션의 요약 전체 조회"""
        self.ownership.verify_section_ownership(section_id, book_id, user_id)

        summaries = (
            self.db.query(SectionSummary)
            .filter(SectionSummary.section_id == section_id)
            .order_by(SectionSummary.created_at)
            .all()
        )
        return summaries, len(summaries)
