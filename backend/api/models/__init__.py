"""데이터 모델 패키지"""
from backend.api.models.book import Book, BookSection, SectionSummary

__all__ = [
    "Book",
    "BookSection",
    "SectionSummary",
]
