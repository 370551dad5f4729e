"""
Difficulty: fixed lookup (easy | medium | hard in the seeded data). Level is unique.
"""
from sqlalchemy import String, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Difficulty(Base):
    __tablename__ = "Difficulty"

    id: Mapped[str] = mapped_column("id", String, primary_key=True)
    level: Mapped[str] = mapped_column("level", String, nullable=False)

    __table_args__ = (Index("Difficulty_level_key", "level", unique=True),)

    questions = relationship("Question", back_populates="difficulty", passive_deletes="all")

    label_attr = "level"
