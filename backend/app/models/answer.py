"""
Answer: one answer text, shared across questions. Text is unique.
An answer is the correct answer for some questions and an incorrect option (via _IncorrectAnswers) for others.
"""
from sqlalchemy import String, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Answer(Base):
    __tablename__ = "Answer"

    id: Mapped[str] = mapped_column("id", String, primary_key=True)
    text: Mapped[str] = mapped_column("answer", String, nullable=False)

    __table_args__ = (
        Index("Answer_answer_key", "answer", unique=True),
    )

    correct_for = relationship("Question", back_populates="correct_answer")
    incorrect_for = relationship("Question", secondary="_IncorrectAnswers", back_populates="incorrect_answers")

    def __repr__(self) -> str:
        return f"<Answer {self.id} {self.text!r}>"
