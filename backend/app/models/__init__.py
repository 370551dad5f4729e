"""
SQLAlchemy models for the trivia schema. Import here so the app and init_sqlite_db register every table.
"""
from app.models.answer import Answer
from app.models.category import Category
from app.models.difficulty import Difficulty
from app.models.question_type import QuestionType
from app.models.incorrect_answer import incorrect_answers
from app.models.question import Question

# Lookup entities: one unique label each, one-to-many to Question
LOOKUP_MODELS = (Category, Difficulty, QuestionType)

__all__ = [
    "Answer",
    "Category",
    "Difficulty",
    "QuestionType",
    "Question",
    "incorrect_answers",
    "LOOKUP_MODELS",
]
