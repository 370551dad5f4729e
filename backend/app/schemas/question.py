"""
Question response schemas (JSON). Rendering is left to the client.
"""
from pydantic import BaseModel


class AnswerResponse(BaseModel):
    id: str
    text: str

    class Config:
        from_attributes = True


class CategoryResponse(BaseModel):
    id: str
    name: str
    opentdb_id: int

    class Config:
        from_attributes = True


class DifficultyResponse(BaseModel):
    id: str
    level: str

    class Config:
        from_attributes = True


class QuestionTypeResponse(BaseModel):
    id: str
    name: str

    class Config:
        from_attributes = True


class QuestionResponse(BaseModel):
    id: str
    text: str
    category: CategoryResponse
    difficulty: DifficultyResponse
    type: QuestionTypeResponse
    correct_answer: AnswerResponse

    class Config:
        from_attributes = True


class QuestionDetailResponse(QuestionResponse):
    """Single question; includes the incorrect answer options."""
    incorrect_answers: list[AnswerResponse] = []


class QuestionPageResponse(BaseModel):
    items: list[QuestionResponse]
    total_count: int
    page: int
    page_size: int
    total_pages: int
