"""
_IncorrectAnswers: pure join table (A = Answer.id, B = Question.id). "Answer A is a wrong option for question B."
No key of its own; the (A, B) pair is unique.
"""
from sqlalchemy import Table, Column, String, ForeignKey, Index

from app.database import Base

incorrect_answers = Table(
    "_IncorrectAnswers",
    Base.metadata,
    Column("A", String, ForeignKey("Answer.id", ondelete="CASCADE", onupdate="CASCADE"), nullable=False),
    Column("B", String, ForeignKey("Question.id", ondelete="CASCADE", onupdate="CASCADE"), nullable=False),
    Index("_IncorrectAnswers_AB_unique", "A", "B", unique=True),
    Index("_IncorrectAnswers_B_index", "B"),
)
