"""
Question browsing: paginated index with joined lookups, single-question detail, lookup listings.
Read-only. Each function takes the session explicitly; callers own its lifetime.
Storage errors (sqlalchemy.exc.SQLAlchemyError) propagate; nothing here retries.
"""
import logging
import math
from typing import NamedTuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.question import Question
from app.services.collections import collection, eager_options, select_in_options, slice_query

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 25
MAX_PAGE_SIZE = 100

# Many-to-one relations hydrated on every listed question
QUESTION_LOOKUPS = ("category", "difficulty", "type", "correct_answer")


class QuestionPage(NamedTuple):
    """One page of questions plus total-count metadata."""

    items: list[Question]
    total_count: int
    page: int  # normalized, >= 1
    page_size: int  # normalized, 1..max

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size) if self.page_size else 0


class LookupCount(NamedTuple):
    id: str
    label: str
    question_count: int


def normalize_paging(
    page: int,
    page_size: int,
    default_page_size: int = DEFAULT_PAGE_SIZE,
    max_page_size: int = MAX_PAGE_SIZE,
) -> tuple[int, int]:
    """Clamp page to >= 1; reset page_size outside 1..max_page_size to the default. Never raises."""
    page = 1 if page < 1 else page
    if page_size < 1 or page_size > max_page_size:
        page_size = default_page_size
    return page, page_size


def list_questions_page(
    db: Session,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
    default_page_size: int = DEFAULT_PAGE_SIZE,
    max_page_size: int = MAX_PAGE_SIZE,
) -> QuestionPage:
    """
    Return one page of questions ordered by id, each with category, difficulty, type and correct answer.
    Two reads: COUNT(*) over questions, then one joined SELECT with OFFSET/LIMIT.
    A page starting past the last row skips the fetch (offset may exceed the driver's integer range).
    """
    page, page_size = normalize_paging(page, page_size, default_page_size, max_page_size)
    base = collection(db, Question, order_by=(Question.id,))
    total_count = base.order_by(None).count()
    offset = (page - 1) * page_size
    if offset >= total_count:
        items = []
    else:
        items = slice_query(
            base.options(*eager_options(Question, QUESTION_LOOKUPS)),
            offset,
            page_size,
        ).all()
    if not items:
        logger.info("No questions returned for page %s with page size %s (total %s)", page, page_size, total_count)
    return QuestionPage(items=items, total_count=total_count, page=page, page_size=page_size)


def get_question(db: Session, question_id: str) -> Question | None:
    """One question with its lookups and incorrect answers; None if not found."""
    q = collection(db, Question, eager=QUESTION_LOOKUPS, filters=(Question.id == question_id,))
    return q.options(*select_in_options(Question, ("incorrect_answers",))).first()


def list_lookups(db: Session, model) -> list[LookupCount]:
    """All rows of a lookup entity ordered by label, with how many questions reference each (one grouped query)."""
    label_col = getattr(model, model.label_attr)
    fk_col = Question.__table__.c[_question_fk_column(model)]
    rows = (
        db.query(model.id, label_col, func.count(fk_col))
        .outerjoin(Question.__table__, fk_col == model.id)
        .group_by(model.id, label_col)
        .order_by(label_col)
        .all()
    )
    return [LookupCount(id=r[0], label=r[1], question_count=r[2]) for r in rows]


def _question_fk_column(model) -> str:
    """Name of the Question column that references the given lookup table."""
    target = model.__table__
    for fk in Question.__table__.foreign_keys:
        if fk.column.table is target:
            return fk.parent.name
    raise ValueError(f"Question has no foreign key to {model.__name__}")
