"""
Question: one trivia question. References exactly one category, difficulty, type and correct answer.
Incorrect options come from the _IncorrectAnswers join table. Ids are opaque strings from the seed import.
"""
from sqlalchemy import String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Question(Base):
    __tablename__ = "Question"

    id: Mapped[str] = mapped_column("id", String, primary_key=True)
    text: Mapped[str] = mapped_column("question", String, nullable=False)
    correct_answer_id: Mapped[str] = mapped_column(
        "correct_answer_id", String, ForeignKey("Answer.id", onupdate="CASCADE"), nullable=False
    )
    difficulty_id: Mapped[str] = mapped_column(
        "difficultyId", String, ForeignKey("Difficulty.id", ondelete="RESTRICT", onupdate="CASCADE"), nullable=False
    )
    category_id: Mapped[str] = mapped_column(
        "categoryId", String, ForeignKey("Category.id", ondelete="RESTRICT", onupdate="CASCADE"), nullable=False
    )
    type_id: Mapped[str] = mapped_column(
        "typeId", String, ForeignKey("Type.id", ondelete="RESTRICT", onupdate="CASCADE"), nullable=False
    )

    category = relationship("Category", back_populates="questions")
    difficulty = relationship("Difficulty", back_populates="questions")
    type = relationship("QuestionType", back_populates="questions")
    correct_answer = relationship("Answer", back_populates="correct_for")
    incorrect_answers = relationship(
        "Answer", secondary="_IncorrectAnswers", back_populates="incorrect_for", order_by="Answer.id"
    )

    def __repr__(self) -> str:
        return f"<Question {self.id}>"
