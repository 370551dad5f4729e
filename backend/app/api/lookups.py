"""
Lookup APIs: GET /categories, GET /difficulties, GET /types (ordered by label, with question counts).
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.models import Category, Difficulty, QuestionType
from app.schemas.lookup import LookupResponse, LookupListResponse
from app.services.question_service import list_lookups

router = APIRouter(tags=["lookups"])


def _to_response(rows) -> LookupListResponse:
    return LookupListResponse(
        items=[LookupResponse(id=r.id, label=r.label, question_count=r.question_count) for r in rows]
    )


@router.get("/categories", response_model=LookupListResponse)
def list_categories(db: Session = Depends(get_db)):
    return _to_response(list_lookups(db, Category))


@router.get("/difficulties", response_model=LookupListResponse)
def list_difficulties(db: Session = Depends(get_db)):
    return _to_response(list_lookups(db, Difficulty))


@router.get("/types", response_model=LookupListResponse)
def list_types(db: Session = Depends(get_db)):
    return _to_response(list_lookups(db, QuestionType))
