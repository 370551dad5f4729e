"""
Category: fixed lookup of question categories. Name and upstream opentdb_id are unique.
Deleting a category still referenced by a question is rejected (RESTRICT), not cascaded.
"""
from sqlalchemy import String, Integer, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Category(Base):
    __tablename__ = "Category"

    id: Mapped[str] = mapped_column("id", String, primary_key=True)
    name: Mapped[str] = mapped_column("name", String, nullable=False)
    opentdb_id: Mapped[int] = mapped_column("opentdb_id", Integer, nullable=False)  # id in the upstream trivia API

    __table_args__ = (
        Index("Category_name_key", "name", unique=True),
        Index("Category_opentdb_id_key", "opentdb_id", unique=True),
    )

    questions = relationship("Question", back_populates="category", passive_deletes="all")

    # Attribute used for ordering and display in lookup listings
    label_attr = "name"
