"""
Questions API: GET /questions (paginated index), GET /questions/{id} (detail with incorrect answers).
Read-only, no auth. Out-of-range page/page_size are normalized, never rejected.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.schemas.question import QuestionResponse, QuestionDetailResponse, QuestionPageResponse
from app.services.question_service import list_questions_page, get_question

router = APIRouter(prefix="/questions", tags=["questions"])


@router.get("", response_model=QuestionPageResponse)
def list_questions(
    page: int = 1,
    page_size: int = settings.default_page_size,
    db: Session = Depends(get_db),
):
    """One page of questions ordered by id, with category, difficulty, type and correct answer."""
    result = list_questions_page(
        db,
        page,
        page_size,
        default_page_size=settings.default_page_size,
        max_page_size=settings.max_page_size,
    )
    return QuestionPageResponse(
        items=[QuestionResponse.model_validate(q) for q in result.items],
        total_count=result.total_count,
        page=result.page,
        page_size=result.page_size,
        total_pages=result.total_pages,
    )


@router.get("/{question_id}", response_model=QuestionDetailResponse)
def read_question(question_id: str, db: Session = Depends(get_db)):
    """Single question with its incorrect answer options."""
    q = get_question(db, question_id)
    if not q:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Question not found")
    return QuestionDetailResponse.model_validate(q)
