"""소유권 검증 서비스

Summary → Section → Book → User 체인을 따라 요청 사용자가 대상을 소유하는지 확인한다.
Section/Summary에는 user_id 컬럼이 없으므로 항상 Book을 먼저 확인한 뒤 Section을 조회한다.
"없음"과 "다른 사용자 소유"는 같은 NOT_FOUND로 응답한다.
"""
import logging
from sqlalchemy.orm import Session
from backend.api.errors import NotFoundError
from backend.api.models.book import Book, BookSection

logger = logging.getLogger(__name__)


class OwnershipService:
    """소유권 검증 서비스 클래스"""

    def __init__(self, db: Session):
        self.db = db

    def verify_book_ownership(self, book_id: str, user_id: str) -> Book:
        """
        사용자가 소유한 책 조회 (id, user_id 동시 필터 단일 쿼리)

        Args:
            book_id: 책 ID
            user_id: 요청 사용자 ID

        Returns:
            Book 객체

        Raises:
            NotFoundError: 책이 없거나 다른 사용자의 책인 경우
        """
        book = (
            self.db.query(Book)
            .filter(Book.id == book_id, Book.user_id == user_id)
            .first()
        )
        if book is None:
            logger.warning(f"[WARNING] 소유한 책 없음: book_id={book_id}, user_id={user_id}")
            raise NotFoundError("Book not found.")
        return book

    def verify_section_ownership(self, section_id: str, book_id: str, user_id: str) -> BookSection:
        """
        사용자가 소유한 책의 섹션 조회 (책 소유권 확인 후 id, book_id 동시 필터)

        Raises:
            NotFoundError: 책 또는 섹션을 찾을 수 없는 경우
        """
        self.verify_book_ownership(book_id, user_id)

        section = (
            self.db.query(BookSection)
            .filter(BookSection.id == section_id, BookSection.book_id == book_id)
            .first()
        )
        if section is None:
            logger.warning(
                f"[WARNING] 섹션 없음: section_id={section_id}, book_id={book_id}, user_id={user_id}"
            )
            raise NotFoundError("Section not found.")
        return section
