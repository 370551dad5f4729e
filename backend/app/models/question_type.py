"""
Question type: fixed lookup (multiple | boolean in the seeded data). Stored in table "Type", column "type".
"""
from sqlalchemy import String, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class QuestionType(Base):
    __tablename__ = "Type"

    id: Mapped[str] = mapped_column("id", String, primary_key=True)
    name: Mapped[str] = mapped_column("type", String, nullable=False)

    __table_args__ = (Index("Type_type_key", "type", unique=True),)

    questions = relationship("Question", back_populates="type", passive_deletes="all")

    label_attr = "name"
