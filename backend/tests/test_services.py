"""책/섹션/요약 서비스 테스트"""
from datetime import datetime

import pytest
from sqlalchemy import text

from backend.api.errors import NotFoundError
from backend.api.models.book import BookSection, SectionSummary, utcnow
from backend.api.schemas.book import BookCreate, BookUpdate
from backend.api.schemas.section import SectionCreate, SectionUpdate
from backend.api.schemas.summary import SummaryCreate
from backend.api.services.book_service import BookService
from backend.api.services.section_service import SectionService
from backend.api.services.summary_service import SummaryService


@pytest.fixture
def book(db_session):
    return BookService(db_session).create_book(
        "user-1",
        BookCreate(
            title="Moby Dick",
            author="Herman Melville",
            source_type="manual",
            source_url="https://example.com/moby",
            language="en",
        ),
    )


@pytest.fixture
def section(db_session, book):
    return SectionService(db_session).create_section(
        "user-1", book.id, SectionCreate(raw_text="Call me Ishmael")
    )


def _count_summaries(db_session, section_id):
    return db_session.query(SectionSummary).filter(SectionSummary.section_id == section_id).count()


# --- 책 ---


def test_create_book(book):
    assert book.user_id == "user-1"
    assert book.title == "Moby Dick"
    assert book.notes is None
    assert book.created_at == book.updated_at


def test_create_book_ids_are_unique(db_session):
    service = BookService(db_session)
    ids = {service.create_book("user-1", BookCreate(title=f"Book {i}")).id for i in range(5)}
    assert len(ids) == 5

    books, total = service.list_books("user-1")
    assert {b.id for b in books} == ids
    assert total == 5


def test_update_book_only_notes(db_session, book):
    """notes만 보내면 나머지 필드는 그대로"""
    updated = BookService(db_session).update_book("user-1", book.id, BookUpdate(notes="Whale"))

    assert updated.notes == "Whale"
    assert updated.title == "Moby Dick"
    assert updated.author == "Herman Melville"
    assert updated.source_type == "manual"
    assert updated.source_url == "https://example.com/moby"
    assert updated.language == "en"


def test_update_book_refreshes_updated_at(db_session, book):
    old = datetime(2000, 1, 1)
    book.updated_at = old
    db_session.commit()

    updated = BookService(db_session).update_book("user-1", book.id, BookUpdate(title="X"))

    assert updated.title == "X"
    assert updated.updated_at > old
    assert updated.updated_at >= updated.created_at


def test_update_book_explicit_null_clears_optional_field(db_session, book):
    updated = BookService(db_session).update_book("user-1", book.id, BookUpdate(author=None))
    assert updated.author is None
    assert updated.language == "en"


def test_update_book_by_other_user_is_not_found(db_session, book):
    with pytest.raises(NotFoundError):
        BookService(db_session).update_book("user-2", book.id, BookUpdate(title="X"))

    db_session.expire_all()
    assert BookService(db_session).list_books("user-1")[0][0].title == "Moby Dick"


def test_list_books_is_scoped_to_owner(db_session, book):
    BookService(db_session).create_book("user-2", BookCreate(title="Other"))

    books, total = BookService(db_session).list_books("user-1")
    assert [b.id for b in books] == [book.id]
    assert total == 1

    assert BookService(db_session).list_books("user-3") == ([], 0)


# --- 섹션 ---


def test_create_section_defaults_order_index(section, book):
    assert section.book_id == book.id
    assert section.order_index == 1
    assert section.raw_text == "Call me Ishmael"


def test_create_section_keeps_given_order_index(db_session, book):
    section = SectionService(db_session).create_section(
        "user-1",
        book.id,
        SectionCreate(raw_text="Loomings", order_index=0, section_type="chapter", title="Chapter 1"),
    )
    assert section.order_index == 0
    assert section.section_type == "chapter"


def test_create_section_on_foreign_book_is_not_found(db_session, book):
    with pytest.raises(NotFoundError):
        SectionService(db_session).create_section("user-2", book.id, SectionCreate(raw_text="x"))
    assert db_session.query(BookSection).count() == 0


def test_update_section_applies_supplied_fields(db_session, book, section):
    updated = SectionService(db_session).update_section(
        "user-1", section.id, book.id, SectionUpdate(title="Loomings", order_index=4)
    )
    assert updated.title == "Loomings"
    assert updated.order_index == 4
    assert updated.raw_text == "Call me Ishmael"


def test_update_section_by_other_user_is_not_found(db_session, book, section):
    with pytest.raises(NotFoundError):
        SectionService(db_session).update_section(
            "user-2", section.id, book.id, SectionUpdate(title="X")
        )


def test_list_sections_is_idempotent(db_session, book, section):
    service = SectionService(db_session)
    service.create_section("user-1", book.id, SectionCreate(raw_text="second", order_index=2))

    first_items, first_total = service.list_sections("user-1", book.id)
    second_items, second_total = service.list_sections("user-1", book.id)

    assert [s.id for s in first_items] == [s.id for s in second_items]
    assert first_total == second_total == 2


def test_list_sections_orders_by_order_index(db_session, book):
    service = SectionService(db_session)
    third = service.create_section("user-1", book.id, SectionCreate(raw_text="c", order_index=3))
    first = service.create_section("user-1", book.id, SectionCreate(raw_text="a", order_index=1))

    items, _ = service.list_sections("user-1", book.id)
    assert [s.id for s in items] == [first.id, third.id]


@pytest.mark.parametrize("summary_count", [0, 1, 7])
def test_delete_section_cascades_to_summaries(db_session, book, section, summary_count):
    summaries = SummaryService(db_session)
    for i in range(summary_count):
        summaries.create_summary(
            "user-1", section.id, book.id, SummaryCreate(summary_text=f"summary {i}")
        )
    section_id = section.id

    SectionService(db_session).delete_section("user-1", section_id, book.id)

    assert db_session.query(BookSection).filter(BookSection.id == section_id).count() == 0
    assert _count_summaries(db_session, section_id) == 0


def test_delete_section_leaves_other_sections_alone(db_session, book, section):
    sections = SectionService(db_session)
    summaries = SummaryService(db_session)
    other = sections.create_section("user-1", book.id, SectionCreate(raw_text="other"))
    summaries.create_summary("user-1", other.id, book.id, SummaryCreate(summary_text="kept"))
    other_id = other.id

    sections.delete_section("user-1", section.id, book.id)

    assert _count_summaries(db_session, other_id) == 1
    assert sections.list_sections("user-1", book.id)[1] == 1


def test_delete_section_by_other_user_is_not_found(db_session, book, section):
    with pytest.raises(NotFoundError):
        SectionService(db_session).delete_section("user-2", section.id, book.id)
    assert db_session.query(BookSection).count() == 1


# --- 요약 ---


def test_create_summary(db_session, book, section):
    summary = SummaryService(db_session).create_summary(
        "user-1",
        section.id,
        book.id,
        SummaryCreate(summary_text="A sailor's tale", variant="short", language="en"),
    )
    assert summary.section_id == section.id
    assert summary.variant == "short"
    assert summary.language == "en"


def test_duplicate_variant_and_language_are_allowed(db_session, book, section):
    service = SummaryService(db_session)
    for _ in range(2):
        service.create_summary(
            "user-1", section.id, book.id, SummaryCreate(summary_text="same", variant="short")
        )

    items, total = service.list_summaries("user-1", section.id, book.id)
    assert total == 2
    assert len({s.id for s in items}) == 2


def test_summary_operations_by_other_user_are_not_found(db_session, book, section):
    service = SummaryService(db_session)
    with pytest.raises(NotFoundError):
        service.create_summary("user-2", section.id, book.id, SummaryCreate(summary_text="x"))
    with pytest.raises(NotFoundError):
        service.list_summaries("user-2", section.id, book.id)
    assert _count_summaries(db_session, section.id) == 0


@pytest.fixture
def foreign_keys_on(db_session):
    """SQLite 외래 키 강제 (PostgreSQL과 같은 제약 조건)"""
    db_session.commit()
    db_session.execute(text("PRAGMA foreign_keys=ON"))
    yield
    db_session.commit()
    db_session.execute(text("PRAGMA foreign_keys=OFF"))


@pytest.mark.parametrize("summary_count", [1, 7])
def test_delete_section_with_enforced_foreign_keys(
    db_session, book, section, foreign_keys_on, summary_count
):
    """외래 키가 강제되어도 요약이 있는 섹션을 삭제할 수 있음"""
    assert db_session.execute(text("PRAGMA foreign_keys")).scalar() == 1
    summaries = SummaryService(db_session)
    for i in range(summary_count):
        summaries.create_summary(
            "user-1", section.id, book.id, SummaryCreate(summary_text=f"summary {i}")
        )
    section_id = section.id

    SectionService(db_session).delete_section("user-1", section_id, book.id)

    assert db_session.query(BookSection).filter(BookSection.id == section_id).count() == 0
    assert _count_summaries(db_session, section_id) == 0


def test_timestamps_are_naive_utc(db_session, book, section):
    """시각은 UTC 기준 naive datetime으로 저장/반환"""
    before = utcnow()
    summary = SummaryService(db_session).create_summary(
        "user-1", section.id, book.id, SummaryCreate(summary_text="x")
    )

    for value in (book.created_at, book.updated_at, section.created_at, summary.created_at):
        assert value.tzinfo is None
    assert summary.created_at >= before
