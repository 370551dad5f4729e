"""
Data-quality checks on the seeded trivia data. Report only; nothing is repaired.
The schema does not stop a question's correct answer from also being linked as one of its incorrect answers.
"""
import logging
from typing import NamedTuple

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.incorrect_answer import incorrect_answers
from app.models.question import Question

logger = logging.getLogger(__name__)


class AnswerOverlap(NamedTuple):
    question_id: str
    answer_id: str


def find_correct_answer_overlaps(db: Session) -> list[AnswerOverlap]:
    """Questions whose correct answer also appears in their incorrect-answer links, ordered by question id."""
    link = incorrect_answers.c
    stmt = (
        select(Question.id, Question.correct_answer_id)
        .join(incorrect_answers, link.B == Question.id)
        .where(link.A == Question.correct_answer_id)
        .order_by(Question.id)
    )
    overlaps = [AnswerOverlap(question_id=r[0], answer_id=r[1]) for r in db.execute(stmt).all()]
    if overlaps:
        logger.warning("Data quality: %s question(s) list their correct answer as incorrect", len(overlaps))
    return overlaps
