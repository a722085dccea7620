"""책 관련 API 라우터"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.api.auth import CurrentUser, require_user
from backend.api.database import get_db
from backend.api.services.book_service import BookService
from backend.api.schemas.common import ERROR_RESPONSES
from backend.api.schemas.book import (
    BookCreate,
    BookData,
    BookEnvelope,
    BookListData,
    BookListEnvelope,
    BookResponse,
    BookUpdate,
)

router = APIRouter(prefix="/api/books", tags=["books"], responses=ERROR_RESPONSES)


@router.post("", response_model=BookEnvelope)
def create_book(
    payload: BookCreate,
    user: CurrentUser = Depends(require_user),
    db: Session = Depends(get_db),
):
    """책 생성"""
    book = BookService(db).create_book(user.id, payload)
    return BookEnvelope(data=BookData(book=BookResponse.model_validate(book)))


@router.get("", response_model=BookListEnvelope)
def list_books(
    user: CurrentUser = Depends(require_user),
    db: Session = Depends(get_db),
):
    """내 책 리스트 조회"""
    books, total = BookService(db).list_books(user.id)
    return BookListEnvelope(
        data=BookListData(
            items=[BookResponse.model_validate(book) for book in books],
            total=total,
        )
    )


@router.patch("/{book_id}", response_model=BookEnvelope)
def update_book(
    book_id: str,
    payload: BookUpdate,
    user: CurrentUser = Depends(require_user),
    db: Session = Depends(get_db),
):
    """
    책 부분 수정

    요청 본문에 포함된 필드만 변경합니다.
    """
    book = BookService(db).update_book(user.id, book_id, payload)
    return BookEnvelope(data=BookData(book=BookResponse.model_validate(book)))
