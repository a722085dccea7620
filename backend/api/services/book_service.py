"""책 서비스"""
import logging
from typing import List, Tuple
from sqlalchemy.orm import Session
from backend.api.models.book import Book, generate_id, utcnow
from backend.api.schemas.book import BookCreate, BookUpdate
from backend.api.services.ownership_service import OwnershipService

logger = logging.getLogger(__name__)


class BookService:
    """책 서비스 클래스"""

    def __init__(self, db: Session):
        self.db = db
        self.ownership = OwnershipService(db)

    def create_book(self, user_id: str, payload: BookCreate) -> Book:
        """
        책 생성

        Args:
            user_id: 소유자 ID
            payload: 생성 입력 (title 필수)

        Returns:
            생성된 Book 객체
        """
        now = utcnow()
        book = Book(
            id=generate_id(),
            user_id=user_id,
            title=payload.title,
            author=payload.author,
            source_type=payload.source_type,
            source_url=payload.source_url,
            language=payload.language,
            notes=payload.notes,
            created_at=now,
            updated_at=now,
        )
        self.db.add(book)
        self.db.commit()
        self.db.refresh(book)

        logger.info(f"[INFO] Book created: id={book.id}, user_id={user_id}")
        return book

    def update_book(self, user_id: str, book_id: str, payload: BookUpdate) -> Book:
        """
        책 부분 수정

        요청에 포함된 필드만 반영하고 updated_at은 항상 갱신한다.

        Raises:
            NotFoundError: 소유한 책이 아닌 경우
        """
        book = self.ownership.verify_book_ownership(book_id, user_id)

        changes = payload.changes()
        for field, value in changes.items():
            setattr(book, field, value)
        book.updated_at = utcnow()

        self.db.commit()
        self.db.refresh(book)

        logger.info(f"[INFO] Book updated: id={book.id}, fields={sorted(changes)}")
        return book

    def list_books(self, user_id: str) -> Tuple[List[Book], int]:
        """
        사용자의 책 전체 조회

        Returns:
            (책 리스트, 개수) - 개수는 반환된 리스트 길이
        """
        books = (
            self.db.query(Book)
            .filter(Book.user_id == user_id)
            .order_by(Book.created_at)
            .all()
        )
        return books, len(books)
